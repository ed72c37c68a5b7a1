"""Exception classes for glyphscan.

Provides standardized exceptions for error handling throughout glyphscan.

Malformed input is never an error at this layer: characters no transform
recognizes fall through to the default transform. The only failures the
library raises are configuration mistakes made by the embedding code.
"""

from __future__ import annotations

from typing import Any


class GlyphscanError(Exception):
    """Base exception for all glyphscan errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(GlyphscanError):
    """A scanner, cursor or stream was configured or called incorrectly.

    Raised for programming mistakes such as a stride below 1 or an end
    marker that is not a single character. These indicate a bug in the
    embedding code, not a condition of the scanned text, and are never
    caught inside glyphscan.
    """

    def __init__(self, parameter: str, value: Any, message: str) -> None:
        """Initialize configuration error.

        Args:
            parameter: Name of the offending parameter (e.g., "stride")
            value: The rejected value
            message: Description of the requirement that was violated
        """
        self.parameter = parameter
        self.value = value
        self.message = message
        super().__init__(f"{parameter}={value!r}: {message}")
