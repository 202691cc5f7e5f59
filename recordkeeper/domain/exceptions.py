"""
Domain exceptions for the record keeping core.

Repository errors (duplicate / missing key, invalid field value) are raised
per operation and caught by the application drivers.  Parser errors abort a
whole line-record read on the first offending line.
"""

from __future__ import annotations

from typing import Any, Optional


class RecordKeeperError(Exception):
    """Base exception for all record keeping errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateKeyError(RecordKeeperError):
    """Raised when inserting an item whose key is already stored."""

    def __init__(self, key: Any, container: str = "inventory"):
        self.key = key
        super().__init__(
            message=f"Item with ID {key} already exists in {container}.",
            details={"key": key, "container": container},
        )


class NotFoundError(RecordKeeperError):
    """Raised when a key is not present in a repository."""

    def __init__(self, key: Any, container: str = "inventory"):
        self.key = key
        super().__init__(
            message=f"Item with ID {key} not found in {container}.",
            details={"key": key, "container": container},
        )


class InvalidValueError(RecordKeeperError):
    """Raised when a new field value violates the field's constraint."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(
            message=reason,
            details={"field": field, "value": value},
        )


class RecordParseError(RecordKeeperError):
    """Base for errors raised while reading a line-record file."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            message=f"Line {line_number}: {reason}",
            details={"line_number": line_number, "line": line},
        )


class MissingFieldError(RecordParseError):
    """Raised when a record line has the wrong field count or an empty field."""


class InvalidFormatError(RecordParseError):
    """Raised when a numeric field is malformed, overflows, or is out of range."""
