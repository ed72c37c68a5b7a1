"""Protocols for glyphscan.

Defines the contracts between the scanner and the code embedding it:
transforms supplied to a Scanner, and token sources consumed by a TokenStream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from glyphscan.scanner import ScanState


class Transform[T](Protocol):
    """A transform that may produce a token or decline.

    Contract:
        Whether it matches or declines, the transform must leave
        state.buffer on the next character to examine. A transform that
        consumed look-ahead and then declines keeps that progress; later
        transforms see the advanced buffer. The scanner cannot detect a
        violation, which desynchronizes every subsequent token.

    """

    def __call__(self, state: ScanState, /) -> T | None:
        """Return a token, or None if the pattern does not match."""
        ...


class DefaultTransform[T](Protocol):
    """The fallback transform, guaranteed to produce a token.

    Same buffer contract as Transform. Must never return None; a typical
    implementation wraps the buffered character in an "undefined" token.
    """

    def __call__(self, state: ScanState, /) -> T:
        """Return a token for the buffered character."""
        ...


@runtime_checkable
class TokenSource[T](Protocol):
    """Anything that produces one token per call.

    Scanner is the canonical implementation. TokenStream accepts any
    TokenSource, so test doubles and pre-lexed sources stream the same way.
    """

    def next_token(self) -> T:
        """Produce the next token. Never fails."""
        ...
