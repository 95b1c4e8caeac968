"""Exception hierarchy for the file and configuration boundary.

Parsing itself never raises; malformed text degrades to a body-only result.
"""

from typing import Optional


class PaletteError(Exception):
    """Base exception for all palette errors."""


class ContentReadError(PaletteError, OSError):
    """Raised when a resource file cannot be read as text."""

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        detail = message or f"Cannot read resource content: {path}"
        super().__init__(detail)
        self.path = path


class ConfigError(PaletteError, ValueError):
    """Raised when config.yaml or a setting value is invalid."""
