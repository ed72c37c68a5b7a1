"""Character cursor over an in-memory source text.

The cursor owns the text being scanned and the index of the next character
to consume. Its single read operation, next_character(), supports look-ahead
(peek) and variable step size (stride). Reading past the end is not an error:
the configured end marker is returned instead, on every call, for as long as
the cursor stays exhausted.

Thread Safety:
CharacterCursor instances are mutated by every non-peek read.
Create one per scanning task; there is no internal locking.

"""

from __future__ import annotations

from glyphscan.errors import ConfigurationError

DEFAULT_END_MARKER = "\0"


def validate_end_marker(end_marker: object) -> str:
    """Check that end_marker is a single character.

    Args:
        end_marker: Candidate sentinel value

    Returns:
        The validated end marker.

    Raises:
        ConfigurationError: If end_marker is not a one-character string.
    """
    if not isinstance(end_marker, str) or len(end_marker) != 1:
        raise ConfigurationError(
            "end_marker", end_marker, "end marker must be a single character"
        )
    return end_marker


class CharacterCursor:
    """Scan position over a source text.

    Position semantics:
        position is the index of the next character to be consumed. A
        non-peek read advances it by the stride whenever the target index
        is <= len(text), so draining the text with stride-1 reads leaves
        position at len(text) + 1. Scanner.next_token() relies on that extra
        step: it steps position back by one after every token, which lands
        an exhausted cursor on len(text) again and keeps exhaustion sticky.

    Usage:
            >>> cursor = CharacterCursor("01234")
            >>> cursor.next_character()
            '0'
            >>> cursor.next_character(stride=3)
            '3'
            >>> cursor.next_character(peek=True)
            '4'
            >>> cursor.position
            4

    """

    __slots__ = ("text", "position", "_end_marker")

    def __init__(self, text: str = "", end_marker: str = DEFAULT_END_MARKER) -> None:
        """Initialize cursor at the start of text.

        Args:
            text: Source text to scan (may be empty)
            end_marker: Character returned once the text is exhausted

        Raises:
            ConfigurationError: If end_marker is not a single character.
        """
        self.text = text
        self.position = 0
        self._end_marker = validate_end_marker(end_marker)

    @property
    def end_marker(self) -> str:
        """Character returned once the text is exhausted."""
        return self._end_marker

    @end_marker.setter
    def end_marker(self, value: str) -> None:
        self._end_marker = validate_end_marker(value)

    @property
    def exhausted(self) -> bool:
        """True once a stride-1 read would return the end marker."""
        return self.position >= len(self.text)

    @property
    def remaining(self) -> int:
        """Number of characters not yet consumed."""
        return max(len(self.text) - self.position, 0)

    def next_character(self, peek: bool = False, stride: int = 1) -> str:
        """Return the character stride - 1 places past position.

        Args:
            peek: If True, position is left unchanged
            stride: Offset of the character to read, also the amount
                position advances by on a non-peek read

        Returns:
            The character at position + stride - 1, or end_marker if that
            index lies past the end of text.

        Raises:
            ConfigurationError: If stride is not an int >= 1.
        """
        if not isinstance(stride, int) or isinstance(stride, bool) or stride < 1:
            raise ConfigurationError("stride", stride, "stride must be an int >= 1")

        text = self.text
        target = self.position + stride - 1

        # Inclusive bound: the first read past the end still advances.
        if not peek and target <= len(text):
            self.position += stride

        if target >= len(text):
            return self._end_marker
        return text[target]

    def reset(self, text: str | None = None) -> None:
        """Rewind to position 0, optionally replacing the text.

        Args:
            text: New source text; None keeps the current text
        """
        if text is not None:
            self.text = text
        self.position = 0

    def __repr__(self) -> str:
        return (
            f"CharacterCursor(position={self.position}, length={len(self.text)}, "
            f"end_marker={self._end_marker!r})"
        )
