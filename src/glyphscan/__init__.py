"""
glyphscan — an embeddable first-match lexing primitive

A scanner turns text into tokens by trying an ordered list of transforms
against the current character and falling back to a default transform when
none of them match. Token types and grammars belong to the embedding code;
glyphscan supplies the scan loop, the character cursor and the lazy token
stream.

Quick Start:
    >>> from glyphscan import Scanner, until_token
    >>>
    >>> def word(state):
    ...     if not state.buffer.isalpha():
    ...         return None
    ...     return ("Word", state.take_while(str.isalnum))
    >>>
    >>> def undefined(state):
    ...     token = ("Undefined", state.buffer)
    ...     state.advance()
    ...     return token
    >>>
    >>> scanner = Scanner("hi!", transforms=[word], default_transform=undefined)
    >>> list(scanner.tokens(stop_when=until_token(("Undefined", "\\0"))))
    [('Word', 'hi'), ('Undefined', '!'), ('Undefined', '\\x00')]

Installation:
    pip install glyphscan            # Core (zero deps)
"""

from collections.abc import Callable, Iterable

from glyphscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from glyphscan.cursor import DEFAULT_END_MARKER, CharacterCursor
from glyphscan.errors import ConfigurationError, GlyphscanError
from glyphscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from glyphscan.protocols import DefaultTransform, TokenSource, Transform
from glyphscan.scanner import Scanner, ScanState
from glyphscan.stream import TokenStream, until_token

__version__ = "0.1.0"


def tokenize[T](
    text: str,
    *,
    default_transform: DefaultTransform[T],
    transforms: Iterable[Transform[T]] = (),
    end_marker: str | None = None,
    limit: int | None = None,
    stop_when: Callable[[T], bool] | None = None,
    include_last: bool = True,
) -> TokenStream[T]:
    """Scan text with a freshly built Scanner.

    Args:
        text: Source text
        default_transform: Fallback producing a token for any character
        transforms: Possible transforms, tried in order
        end_marker: Sentinel for the exhausted cursor (ScanConfig default if None)
        limit: Maximum number of tokens (ScanConfig default if None)
        stop_when: Predicate marking the final token
        include_last: Whether the token matching stop_when is yielded

    Returns:
        TokenStream over the new scanner. Infinite unless a limit or
        stop_when applies.

    Example:
        >>> tokens = list(tokenize("a b", default_transform=undefined, limit=3))
    """
    scanner = Scanner(
        text,
        default_transform=default_transform,
        transforms=transforms,
        end_marker=end_marker,
    )
    return scanner.tokens(limit=limit, stop_when=stop_when, include_last=include_last)


__all__ = [
    "DEFAULT_END_MARKER",
    "CharacterCursor",
    "ConfigurationError",
    "DefaultTransform",
    "GlyphscanError",
    "ScanAccumulator",
    "ScanConfig",
    "ScanState",
    "Scanner",
    "TokenSource",
    "TokenStream",
    "Transform",
    "__version__",
    "get_scan_accumulator",
    "get_scan_config",
    "profiled_scan",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
    "until_token",
]
