"""Exceptions raised by cribsheet."""


class CribsheetError(Exception):
    """Base class for all cribsheet errors."""


class InvalidFilterPattern(CribsheetError):
    """A command-line filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")


class NoteSourceError(CribsheetError):
    """Notes could not be loaded from their source."""


class ConfigError(CribsheetError):
    """Configuration file could not be read."""
