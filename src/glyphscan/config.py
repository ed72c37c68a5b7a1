"""ContextVar-based scan configuration for glyphscan.

Provides context-local defaults using Python's ContextVars (PEP 567).
Scanners and token streams read the active config only for values the
caller did not pass explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from glyphscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(end_marker="$", max_tokens=100)):
        scanner = Scanner(source, default_transform=undefined)
        tokens = list(scanner.tokens())  # at most 100 tokens, "$" at end

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from glyphscan.cursor import DEFAULT_END_MARKER, validate_end_marker
from glyphscan.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        end_marker: Sentinel character returned once a cursor is exhausted.
            Used by scanners constructed without an explicit end_marker.
        max_tokens: Default limit for token streams built without an
            explicit limit. None means the stream is infinite.

    """

    end_marker: str = DEFAULT_END_MARKER
    max_tokens: int | None = None

    def __post_init__(self) -> None:
        validate_end_marker(self.end_marker)
        if self.max_tokens is not None and (
            not isinstance(self.max_tokens, int) or self.max_tokens < 0
        ):
            raise ConfigurationError(
                "max_tokens", self.max_tokens, "max_tokens must be None or an int >= 0"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({"max_tokens": 10, "colour": "red"})
            >>> config.max_tokens
            10

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local).

    Returns:
        The active ScanConfig for this thread/context.

    """
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(end_marker="$")):
        ...     cursor_end = Scanner(default_transform=f).end_marker
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
