"""Shared transforms for glyphscan tests.

Tokens are plain (type, value) tuples so expected sequences read naturally
in assertions. Each fixture returns a transform taking a ScanState.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from glyphscan import ScanState

Tok = tuple[str, str]


def _is_blank(char: str) -> bool:
    """Horizontal whitespace only; newlines are their own tokens."""
    return char in " \t"


@pytest.fixture
def undefined() -> Callable[[ScanState], Tok]:
    """Default transform wrapping any single character."""

    def transform(state: ScanState) -> Tok:
        token = ("Undefined", state.buffer)
        state.advance()
        return token

    return transform


@pytest.fixture
def skip_blanks() -> Callable[[ScanState], Tok | None]:
    """Consumes spaces and tabs, then always declines."""

    def transform(state: ScanState) -> Tok | None:
        while _is_blank(state.buffer):
            state.advance()
        return None

    return transform


@pytest.fixture
def newline() -> Callable[[ScanState], Tok | None]:
    def transform(state: ScanState) -> Tok | None:
        if state.buffer != "\n":
            return None
        state.advance()
        return ("NewLine", "\n")

    return transform


@pytest.fixture
def whitespace() -> Callable[[ScanState], Tok | None]:
    """Collapses a run of spaces and tabs into one Whitespace token."""

    def transform(state: ScanState) -> Tok | None:
        if not _is_blank(state.buffer):
            return None
        state.take_while(_is_blank)
        return ("Whitespace", " ")

    return transform


@pytest.fixture
def identifier() -> Callable[[ScanState], Tok | None]:
    def transform(state: ScanState) -> Tok | None:
        if not state.buffer.isalpha():
            return None
        return ("Identifier", state.take_while(str.isalnum))

    return transform


@pytest.fixture
def integer() -> Callable[[ScanState], Tok | None]:
    def transform(state: ScanState) -> Tok | None:
        if not state.buffer.isdigit():
            return None
        return ("Integer", state.take_while(str.isdigit))

    return transform
