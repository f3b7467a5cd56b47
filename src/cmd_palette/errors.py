"""Error types for cmd-palette."""

from __future__ import annotations


class PaletteError(Exception):
    """Base error for command palette operations."""


class EmptyStackError(PaletteError, IndexError):
    """Raised when leaving a submenu while already at the root level."""

    def __init__(self):
        super().__init__("Cannot leave submenu: navigation stack is empty")


class InvalidIndexError(PaletteError, IndexError):
    """Raised when reading a ranked entry that does not exist."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for {size} ranked commands")


class StaleSessionError(PaletteError):
    """Raised when a closed session is required to be active."""

    def __init__(self):
        super().__init__("Session is closed")


class RegistryFormatError(PaletteError, ValueError):
    """Raised when registry data cannot be converted into command entries."""


class ConfigError(PaletteError, ValueError):
    """Raised when a configuration value is invalid."""
