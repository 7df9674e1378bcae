"""
Error kinds raised by repositories and parsers.

Every failure is a RecordError carrying one ErrorKind and a details dict
describing the offending id, field, line or path.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    IO_FAILURE = "io_failure"


class RecordError(Exception):
    """Base error for all record-keeping failures."""

    def __init__(self, kind: ErrorKind, message: str, details: Optional[dict] = None):
        self.kind = kind
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @classmethod
    def duplicate_key(cls, entity_id) -> "RecordError":
        return cls(
            ErrorKind.DUPLICATE_KEY,
            f"Item with ID {entity_id} already exists.",
            details={"id": entity_id},
        )

    @classmethod
    def not_found(cls, entity_id) -> "RecordError":
        return cls(
            ErrorKind.NOT_FOUND,
            f"Item with ID {entity_id} not found.",
            details={"id": entity_id},
        )
