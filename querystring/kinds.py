"""
Value kinds for the record encoder.

This module classifies runtime values into the small set of kinds the encoder
dispatches on, and provides the emptiness check used by ``omitempty`` and the
string conversion used for sequence elements.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Set
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from .fields import is_record
from .utils.constants import FALSE_STRING, FLOAT_FORMAT, TRUE_STRING, UTC_DESIGNATOR


class ValueKind(Enum):
    """Kinds of field values recognised by the encoder."""

    ABSENT = "absent"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a runtime value.

    Booleans are checked before integers since bool is an int subclass.
    Only lists and tuples count as sequences; strings, bytes and sets do not.
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, datetime):
        return ValueKind.TIMESTAMP
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, numbers.Real):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if is_record(value):
        return ValueKind.RECORD
    return ValueKind.OTHER


def _offset_string(offset: timedelta) -> str:
    if not offset:
        return UTC_DESIGNATOR
    sign = "+" if offset >= timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as an RFC 3339 timestamp.

    The fractional part keeps up to nanosecond digits with trailing zeros
    removed, and is left out when zero. UTC is written as "Z"; naive
    datetimes are treated as UTC.

    Examples:
        2024-01-02 03:04:05 UTC          -> "2024-01-02T03:04:05Z"
        2024-01-02 03:04:05.120000+02:00 -> "2024-01-02T03:04:05.12+02:00"
    """
    text = value.replace(tzinfo=None, microsecond=0).isoformat()
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    return text + _offset_string(offset if offset is not None else timedelta(0))


def _is_zero_time(value: datetime) -> bool:
    return value.replace(tzinfo=None) == datetime.min


def is_empty_value(value: Any) -> bool:
    """
    Check if a value counts as empty for the ``omitempty`` option.

    Empty values are None, False, numeric zero, empty strings and
    collections, the zero datetime (datetime.min), and objects whose
    is_zero() method returns true.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, Mapping, Set)):
        return len(value) == 0
    if isinstance(value, datetime):
        return _is_zero_time(value)

    is_zero = getattr(value, "is_zero", None)
    if callable(is_zero):
        return bool(is_zero())
    return False


def value_to_string(value: Any) -> str:
    """
    Convert a single value to its query string form.

    Timestamps use format_timestamp, integers base 10, floats fixed-point
    with six decimals and booleans "true"/"false". Any other kind yields an
    empty string.
    """
    kind = kind_of(value)
    if kind is ValueKind.TIMESTAMP:
        return format_timestamp(value)
    if kind is ValueKind.STRING:
        return str.__str__(value)
    if kind is ValueKind.INTEGER:
        return "%d" % value
    if kind is ValueKind.FLOAT:
        return FLOAT_FORMAT % value
    if kind is ValueKind.BOOLEAN:
        return TRUE_STRING if value else FALSE_STRING
    return ""


__all__ = [
    "ValueKind",
    "kind_of",
    "format_timestamp",
    "is_empty_value",
    "value_to_string",
]
