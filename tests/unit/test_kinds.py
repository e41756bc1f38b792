"""
Unit tests for value kinds.

Tests classification, the omitempty emptiness check, timestamp formatting
and element-to-string conversion.
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum, IntEnum

from querystring.kinds import (
    ValueKind,
    format_timestamp,
    is_empty_value,
    kind_of,
    value_to_string,
)

from conftest import Customer, Pagination


class Color(str, Enum):
    RED = "red"


class Level(IntEnum):
    HIGH = 3


class Zeroable:
    def __init__(self, zero):
        self.zero = zero

    def is_zero(self):
        return self.zero


class TestKindOf:
    """Test runtime classification."""

    @pytest.mark.parametrize("value,kind", [
        (None, ValueKind.ABSENT),
        (datetime(2024, 1, 1), ValueKind.TIMESTAMP),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.INTEGER),
        (Level.HIGH, ValueKind.INTEGER),
        (1.5, ValueKind.FLOAT),
        ("text", ValueKind.STRING),
        (Color.RED, ValueKind.STRING),
        ([1, 2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({"a": "b"}, ValueKind.MAPPING),
        (Pagination(), ValueKind.RECORD),
        (Customer(name="x"), ValueKind.RECORD),
        ({1, 2}, ValueKind.OTHER),
        (b"raw", ValueKind.OTHER),
        (Decimal("1.5"), ValueKind.OTHER),
        (1 + 2j, ValueKind.OTHER),
        (object(), ValueKind.OTHER),
    ])
    def test_kind_of(self, value, kind):
        assert kind_of(value) is kind


class TestIsEmptyValue:
    """Test the omitempty emptiness check."""

    @pytest.mark.parametrize("value", [
        None, False, 0, 0.0, "", [], (), {}, set(), b"",
        datetime.min, datetime.min.replace(tzinfo=timezone.utc),
        Zeroable(True),
    ])
    def test_empty(self, value):
        assert is_empty_value(value)

    @pytest.mark.parametrize("value", [
        True, 1, -1, 0.1, "x", [""], (0,), {"a": ""}, {0},
        datetime(2024, 1, 1), Zeroable(False), object(), Pagination(),
    ])
    def test_not_empty(self, value):
        assert not is_empty_value(value)


class TestFormatTimestamp:
    """Test RFC 3339 timestamp formatting."""

    def test_utc_without_fraction(self):
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-01-02T03:04:05Z"

    def test_fraction_trims_trailing_zeros(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 120000, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-01-02T03:04:05.12Z"

    def test_full_microseconds(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-01-02T03:04:05.123456Z"

    def test_positive_offset(self):
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2024-01-02T03:04:05+02:00"

    def test_negative_offset_with_minutes(self):
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(-timedelta(hours=3, minutes=30)))
        assert format_timestamp(value) == "2024-01-02T03:04:05-03:30"

    def test_naive_is_utc(self):
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"

    def test_zero_time(self):
        assert format_timestamp(datetime.min) == "0001-01-01T00:00:00Z"


class TestValueToString:
    """Test element conversion."""

    @pytest.mark.parametrize("value,expected", [
        ("a", "a"),
        ("", ""),
        (Color.RED, "red"),
        (42, "42"),
        (-7, "-7"),
        (Level.HIGH, "3"),
        (True, "true"),
        (False, "false"),
        (1.5, "1.500000"),
        (2.0, "2.000000"),
        (None, ""),
        ({"a": "b"}, ""),
        ([1], ""),
        (object(), ""),
    ])
    def test_value_to_string(self, value, expected):
        assert value_to_string(value) == expected

    def test_timestamp(self):
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert value_to_string(value) == "2024-01-02T03:04:05Z"
