"""Lazy token sequences.

TokenStream turns any TokenSource into a standard Python iterator, pulling
exactly one token per next() call. Without a stopping rule the stream is
infinite, because a scanner always produces another token (the end marker
keeps falling through to the default transform). Finite streams compose a
count limit or a sentinel predicate around the same pull.

Usage:
    >>> stream = TokenStream(scanner, stop_when=until_token(EOF))
    >>> tokens = list(stream)  # ends with EOF

    >>> first_ten = list(TokenStream(scanner, limit=10))

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from glyphscan.config import get_scan_config
from glyphscan.errors import ConfigurationError
from glyphscan.utils.logger import get_logger

if TYPE_CHECKING:
    from glyphscan.protocols import TokenSource

logger = get_logger(__name__)


def until_token(value: Any) -> Callable[[Any], bool]:
    """Build a stop_when predicate matching tokens equal to value.

    Args:
        value: The designated end token

    Returns:
        Predicate for TokenStream's stop_when.
    """

    def matches(token: Any) -> bool:
        return token == value

    return matches


class TokenStream[T]:
    """Single-pass iterator over the tokens of a TokenSource.

    Stopping rules:
        limit is checked before pulling, so a stream that has hit its limit
        never advances the source again. stop_when is checked after each
        pull; include_last decides whether the token that satisfied it is
        yielded. Once stopped, the stream stays stopped.

    Not restartable: rewind the scanner (Scanner.reset()) and build a new
    stream to scan the text again.

    """

    __slots__ = ("_source", "_limit", "_stop_when", "_include_last", "_produced", "_done")

    def __init__(
        self,
        source: TokenSource[T],
        limit: int | None = None,
        stop_when: Callable[[T], bool] | None = None,
        *,
        include_last: bool = True,
    ) -> None:
        """Initialize stream over source.

        Args:
            source: Object whose next_token() produces the tokens
            limit: Maximum number of tokens; None uses the active
                ScanConfig's max_tokens (infinite by default)
            stop_when: Predicate marking the final token
            include_last: Whether the token matching stop_when is yielded

        Raises:
            ConfigurationError: If limit is negative.
        """
        if limit is None:
            limit = get_scan_config().max_tokens
        if limit is not None and limit < 0:
            raise ConfigurationError("limit", limit, "limit must be None or an int >= 0")
        self._source = source
        self._limit = limit
        self._stop_when = stop_when
        self._include_last = include_last
        self._produced = 0
        self._done = False

    @property
    def produced(self) -> int:
        """Number of tokens pulled from the source so far."""
        return self._produced

    @property
    def done(self) -> bool:
        """True once a stopping rule has ended the stream."""
        return self._done

    def __iter__(self) -> TokenStream[T]:
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration

        if self._limit is not None and self._produced >= self._limit:
            self._finish("limit")
            raise StopIteration

        token = self._source.next_token()
        self._produced += 1

        if self._stop_when is not None and self._stop_when(token):
            self._finish("stop_when")
            if not self._include_last:
                raise StopIteration
        return token

    def _finish(self, reason: str) -> None:
        self._done = True
        logger.debug("Token stream stopped by %s after %d tokens", reason, self._produced)

    def __repr__(self) -> str:
        return f"TokenStream(produced={self._produced}, limit={self._limit}, done={self._done})"
