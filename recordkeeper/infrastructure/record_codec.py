"""Conversion between dataclass entities and JSON-compatible records."""

import dataclasses
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Type, TypeVar, get_type_hints

from recordkeeper.domain.errors import ErrorKind, RecordError

T = TypeVar("T")


def to_record(entity) -> Dict[str, Any]:
    """
    Convert an entity to a dict of JSON-serializable values.

    Datetimes become ISO format strings and decimals become strings, so the
    record survives a JSON round trip without losing precision.
    """
    record = {}
    for field in dataclasses.fields(entity):
        value = getattr(entity, field.name)
        if isinstance(value, datetime):
            value = value.isoformat()
        elif isinstance(value, Decimal):
            value = str(value)
        record[field.name] = value
    return record


def from_record(entity_type: Type[T], record: Any) -> T:
    """
    Build an entity of entity_type from a record produced by to_record.

    Raises:
        RecordError: MISSING_FIELD if a declared field is absent,
            INVALID_FORMAT if a value has the wrong type
    """
    if not isinstance(record, dict):
        raise RecordError(
            ErrorKind.INVALID_FORMAT,
            f"Expected an object for {entity_type.__name__}, got {type(record).__name__}",
        )

    hints = get_type_hints(entity_type)
    values = {}
    for field in dataclasses.fields(entity_type):
        if field.name not in record:
            raise RecordError(
                ErrorKind.MISSING_FIELD,
                f"Missing field '{field.name}' for {entity_type.__name__}",
                details={"field": field.name},
            )
        values[field.name] = _decode(field.name, hints[field.name], record[field.name])
    return entity_type(**values)


def _decode(name: str, expected: type, value: Any):
    try:
        if expected is datetime:
            return datetime.fromisoformat(value)
        if expected is Decimal:
            return Decimal(str(value))
    except (TypeError, ValueError, InvalidOperation):
        raise _bad_value(name, expected, value)

    if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise _bad_value(name, expected, value)
    if expected is str and not isinstance(value, str):
        raise _bad_value(name, expected, value)
    return value


def _bad_value(name: str, expected: type, value: Any) -> RecordError:
    return RecordError(
        ErrorKind.INVALID_FORMAT,
        f"Invalid value for '{name}': expected {expected.__name__}",
        details={"field": name, "value": repr(value)},
    )
