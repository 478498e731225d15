"""Exception hierarchy for recordkeeper."""

from __future__ import annotations

from pathlib import Path


class RecordKeeperError(Exception):
    """Base exception for all recordkeeper errors."""


class MalformedRecordError(RecordKeeperError):
    """An input line does not have the shape of a record."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        path: str | Path = "",
    ) -> None:
        self.line_number = line_number
        self.path = str(path)
        super().__init__(message)


class MissingFieldError(MalformedRecordError):
    """Wrong field count, or a required field is blank."""


class InvalidFormatError(MalformedRecordError):
    """A field that must be numeric is not."""


class InvalidScoreFormatError(InvalidFormatError):
    """The score column of a student line is not an integer."""


class StorageIOError(RecordKeeperError):
    """A file could not be read or written."""

    def __init__(self, message: str, *, path: str | Path = "") -> None:
        self.path = str(path)
        super().__init__(message)


class CorruptDataError(RecordKeeperError):
    """A persisted file exists but its contents cannot be parsed."""

    def __init__(self, message: str, *, path: str | Path = "") -> None:
        self.path = str(path)
        super().__init__(message)


__all__ = [
    "RecordKeeperError",
    "MalformedRecordError",
    "MissingFieldError",
    "InvalidFormatError",
    "InvalidScoreFormatError",
    "StorageIOError",
    "CorruptDataError",
]
