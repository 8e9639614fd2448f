"""
Exception hierarchy for the Sales CRUD CLI.

Only fatal conditions are modelled as exceptions: they propagate up to the CLI
entrypoint, which prints the message and exits. Non-fatal store failures are
reported through `OperationResult` instead.
"""

from __future__ import annotations

from typing import Optional


class CrudError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class CrudFatalError(CrudError):
    """An error that aborts the process."""


class ConnectionConfigError(CrudFatalError):
    """The client handle could not be constructed from the configured URI."""


class InvalidRecordIdError(CrudFatalError):
    """A record identifier is not a valid 24-character hex ObjectId."""

    def __init__(self, raw_id: str, details: Optional[str] = None) -> None:
        super().__init__("Invalid ID format", details or repr(raw_id))
        self.raw_id = raw_id


class InvalidMenuChoiceError(CrudFatalError):
    """The menu selection is not an integer."""

    def __init__(self, raw_choice: str) -> None:
        super().__init__("Option must be an integer", repr(raw_choice))
        self.raw_choice = raw_choice


class RecordDecodeError(CrudFatalError):
    """Documents returned by the store could not be read back as records."""


__all__ = [
    "CrudError",
    "CrudFatalError",
    "ConnectionConfigError",
    "InvalidRecordIdError",
    "InvalidMenuChoiceError",
    "RecordDecodeError",
]
