"""glyphscan ScanAccumulator — opt-in profiling for token scanning.

This module provides accumulated metrics while scanning:
- Total profiling time
- Tokens produced
- Tokens that fell through to the default transform
- Characters consumed from the cursor

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from glyphscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = list(scanner.tokens(limit=50))

    print(metrics.summary())
    # {"total_ms": 0.4, "tokens": 50, "default_tokens": 3, "characters": 212}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        tokens: Number of next_token() calls recorded.
        default_tokens: Tokens produced by the default transform.
        characters: Net cursor advance across all recorded tokens.

    """

    start_time: float = field(default_factory=perf_counter)
    tokens: int = 0
    default_tokens: int = 0
    characters: int = 0

    def record_token(self, characters: int, fallback: bool) -> None:
        """Record one produced token.

        Args:
            characters: How far the cursor moved while producing the token.
            fallback: True if the default transform produced it.

        """
        self.tokens += 1
        self.characters += max(characters, 0)
        if fallback:
            self.default_tokens += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, tokens, default_tokens, characters.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "tokens": self.tokens,
            "default_tokens": self.default_tokens,
            "characters": self.characters,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during next_token() calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
