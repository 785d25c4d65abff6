"""Error types for recordkit.

Defines a small hierarchy of exceptions raised by data entries, repositories
and HTML components. None of them are recovered locally; they propagate to the
caller, where the server maps them onto HTTP responses.
"""

from __future__ import annotations


class RecordKitError(Exception):
    """Base error for all recordkit exceptions."""


class OutOfBoundsError(RecordKitError, ValueError):
    """Raised when a value falls outside what a setter or component accepts."""


class DataEntryError(RecordKitError):
    """Raised for invalid access to a data entry column."""


class UndefinedColumnError(DataEntryError):
    """Raised when a column is not part of the entry definitions."""

    def __init__(self, entry_name: str, column: str) -> None:
        super().__init__(f"Column '{column}' is not defined for {entry_name} entries")


class ProtectedColumnError(DataEntryError):
    """Raised when a protected column is read or written through the generic API."""

    def __init__(self, entry_name: str, column: str) -> None:
        super().__init__(f"Column '{column}' of {entry_name} entries is protected")


class DataEntryNotFoundError(DataEntryError):
    """Raised when a data entry row cannot be found (or is deleted)."""

    def __init__(self, entry_name: str, identifier: object, reason: str = "does not exist") -> None:
        super().__init__(f"The {entry_name} '{identifier}' {reason}")


class HtmlError(RecordKitError):
    """Raised for inconsistent HTML component state."""
