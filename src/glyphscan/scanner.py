"""First-match token scanner.

A Scanner owns a CharacterCursor, an ordered list of possible transforms and
one default transform. Each next_token() call buffers one character, offers
it to the transforms in order, and returns the first token produced. If every
transform declines, the default transform produces the token.

Transforms do not see the scanner. They receive a ScanState: the buffered
character plus the few cursor operations needed to consume a lexeme.

Thread Safety:
Scanner instances are single-owner and mutated by every next_token() call.
Create one per scanning task; instances share no mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from glyphscan.config import get_scan_config
from glyphscan.cursor import CharacterCursor
from glyphscan.profiling import get_scan_accumulator
from glyphscan.stream import TokenStream
from glyphscan.utils.logger import get_logger

if TYPE_CHECKING:
    from glyphscan.protocols import DefaultTransform, Transform

logger = get_logger(__name__)


class ScanState:
    """The view of a scan that a transform works with.

    One ScanState is created per next_token() call and shared by every
    transform tried during that call.

    Attributes:
        buffer: The character currently under examination. Transforms move
            it forward with advance(); on return it must hold the next
            character that has not been consumed.

    Usage:
            >>> def integer(state):
            ...     if not state.buffer.isdigit():
            ...         return None
            ...     return ("Integer", state.take_while(str.isdigit))

    """

    __slots__ = ("_cursor", "buffer")

    def __init__(self, cursor: CharacterCursor, buffer: str) -> None:
        self._cursor = cursor
        self.buffer = buffer

    @property
    def end_marker(self) -> str:
        """Sentinel the cursor returns once the text is exhausted."""
        return self._cursor.end_marker

    @property
    def at_end(self) -> bool:
        """True if the buffer holds the end marker."""
        return self.buffer == self._cursor.end_marker

    def advance(self, stride: int = 1) -> str:
        """Consume the next character into the buffer.

        Args:
            stride: Offset of the character to load; characters in between
                are skipped

        Returns:
            The new buffer contents.
        """
        self.buffer = self._cursor.next_character(stride=stride)
        return self.buffer

    def peek(self, stride: int = 1) -> str:
        """Look ahead without moving the cursor or changing the buffer.

        peek(1) is the character advance() would load next.
        """
        return self._cursor.next_character(peek=True, stride=stride)

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Collect buffered characters while predicate holds.

        Stops at the first non-matching character or at the end marker,
        leaving it in the buffer.

        Args:
            predicate: Test applied to each buffered character

        Returns:
            The collected lexeme, possibly empty.
        """
        end_marker = self._cursor.end_marker
        chars: list[str] = []
        while self.buffer != end_marker and predicate(self.buffer):
            chars.append(self.buffer)
            self.advance()
        return "".join(chars)

    def __repr__(self) -> str:
        return f"ScanState(buffer={self.buffer!r}, position={self._cursor.position})"


class Scanner[T]:
    """Produces tokens by running the first matching transform.

    Ordering:
        Transforms are tried in list order and the first non-None result
        wins; later transforms are not invoked. The default transform runs
        only when every transform declined.

    Transform contract:
        Every transform, matching or declining, must leave state.buffer on
        the next character to examine. The default transform must always
        return a token. Neither condition is checked.

    Usage:
            >>> def undefined(state):
            ...     token = ("Undefined", state.buffer)
            ...     state.advance()
            ...     return token
            >>> scanner = Scanner("ab", default_transform=undefined)
            >>> [scanner.next_token() for _ in range(3)]
            [('Undefined', 'a'), ('Undefined', 'b'), ('Undefined', '\\x00')]

    """

    __slots__ = ("_cursor", "_transforms", "_default_transform")

    def __init__(
        self,
        text: str = "",
        *,
        default_transform: DefaultTransform[T],
        transforms: Iterable[Transform[T]] = (),
        end_marker: str | None = None,
    ) -> None:
        """Initialize scanner over text.

        Args:
            text: Source text to scan (may be empty)
            default_transform: Fallback producing a token for any character
            transforms: Possible transforms, tried in order
            end_marker: Sentinel for the exhausted cursor; None uses the
                active ScanConfig's end_marker

        Raises:
            ConfigurationError: If end_marker is not a single character.
        """
        if end_marker is None:
            end_marker = get_scan_config().end_marker
        self._cursor = CharacterCursor(text, end_marker)
        self._transforms: list[Transform[T]] = list(transforms)
        self._default_transform = default_transform

    @property
    def cursor(self) -> CharacterCursor:
        """The character cursor this scanner reads from."""
        return self._cursor

    @property
    def transforms(self) -> list[Transform[T]]:
        """Possible transforms in the order they are tried."""
        return self._transforms

    @transforms.setter
    def transforms(self, transforms: Iterable[Transform[T]]) -> None:
        self._transforms = list(transforms)

    @property
    def default_transform(self) -> DefaultTransform[T]:
        """Fallback transform used when every transform declines."""
        return self._default_transform

    @default_transform.setter
    def default_transform(self, transform: DefaultTransform[T]) -> None:
        self._default_transform = transform

    @property
    def text(self) -> str:
        """Source text (forwarded to the cursor)."""
        return self._cursor.text

    @text.setter
    def text(self, text: str) -> None:
        self._cursor.text = text

    @property
    def position(self) -> int:
        """Cursor position (forwarded to the cursor)."""
        return self._cursor.position

    @position.setter
    def position(self, position: int) -> None:
        self._cursor.position = position

    @property
    def end_marker(self) -> str:
        """End-of-text sentinel (forwarded to the cursor)."""
        return self._cursor.end_marker

    @end_marker.setter
    def end_marker(self, end_marker: str) -> None:
        self._cursor.end_marker = end_marker

    def next_character(self, peek: bool = False, stride: int = 1) -> str:
        """Read from the cursor. See CharacterCursor.next_character()."""
        return self._cursor.next_character(peek=peek, stride=stride)

    def next_token(self) -> T:
        """Produce the next token.

        1. Buffers the next character.
        2. Calls the transforms in order; the first token produced wins.
        3. Falls back to the default transform if all of them declined.
        4. Steps the cursor back by one, so the character left pending in
           the buffer is read again by the following call.

        Returns:
            The produced token. Never fails for well-behaved transforms.
        """
        cursor = self._cursor
        start = cursor.position
        state = ScanState(cursor, cursor.next_character())
        fallback = False

        try:
            for transform in self._transforms:
                token = transform(state)
                if token is not None:
                    break
            else:
                fallback = True
                token = self._default_transform(state)
        finally:
            cursor.position -= 1

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_token(cursor.position - start, fallback)
        return token

    def reset(self, text: str | None = None) -> None:
        """Rewind to the start of the text so it can be scanned again.

        Args:
            text: New source text; None re-scans the current text
        """
        self._cursor.reset(text)
        logger.debug("Scanner reset (length=%d)", len(self._cursor.text))

    def tokens(
        self,
        limit: int | None = None,
        stop_when: Callable[[T], bool] | None = None,
        *,
        include_last: bool = True,
    ) -> TokenStream[T]:
        """Stream tokens from this scanner.

        Args:
            limit: Stop after this many tokens; None uses the active
                ScanConfig's max_tokens (infinite by default)
            stop_when: Stop once a produced token satisfies this predicate
            include_last: Whether the token that satisfied stop_when is
                yielded

        Returns:
            A single-pass TokenStream.
        """
        return TokenStream(self, limit=limit, stop_when=stop_when, include_last=include_last)

    def __iter__(self) -> TokenStream[T]:
        """Infinite token stream (the default sequence behaviour)."""
        return TokenStream(self)

    def __repr__(self) -> str:
        return (
            f"Scanner(transforms={len(self._transforms)}, position={self._cursor.position}, "
            f"length={len(self._cursor.text)})"
        )
