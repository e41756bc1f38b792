"""
Record encoder.

This module converts records into Values. A record is either a mapping of
strings to strings, or a structured record (dataclass or pydantic model
instance) whose fields are named and filtered by their directives.

Usage:
    from dataclasses import dataclass
    from querystring import encode, url_field

    @dataclass
    class Search:
        query: str = url_field("q")
        tags: list = url_field("tag", default_factory=list)

    encode(Search("python", ["a", "b"]))
    # Values({'q': ['python'], 'tag': ['a', 'b']})
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from .fields import FieldDescriptor, describe_fields, is_record
from .kinds import ValueKind, format_timestamp, is_empty_value, kind_of, value_to_string
from .tag import Tag, new_tag, tag_from_options
from .utils.config import EncoderOptions, get_config
from .utils.exceptions import EncoderFailureError, TypeMismatchError, UnsupportedTypeError
from .utils.logging import EncoderLogger
from .collection import Values


@runtime_checkable
class QueryEncoder(Protocol):
    """
    Interface for values that encode themselves.

    A field value implementing encode_query() is emitted as one entry per
    returned string instead of going through the default conversion. Any
    exception raised aborts the whole encode call, as does a result that is
    a bare str or holds anything other than strings.
    """

    def encode_query(self) -> Sequence[str]:
        ...


class Converter:
    """
    Converts records into Values using a directive resolver.

    A Converter holds no state besides its resolver, so one instance can be
    shared by independent encode calls.
    """

    def __init__(self, tag: Optional[Tag] = None):
        """
        Initialize converter.

        Args:
            tag: Directive resolver; defaults to new_tag()
        """
        self.tag = tag if tag is not None else new_tag()
        self._log = EncoderLogger(__name__)

    @classmethod
    def from_options(cls, options: EncoderOptions) -> "Converter":
        """Create a converter whose resolver follows the given options."""
        return cls(tag_from_options(options))

    def values(self, record: Any) -> Values:
        """
        Convert a record to Values.

        Args:
            record: A Values instance (returned unchanged), None, a mapping
                of str to str, or a dataclass or pydantic model instance

        Returns:
            The encoded values; empty for None

        Raises:
            TypeMismatchError: If a mapping has a non-string key or value
            UnsupportedTypeError: If the record is of any other type
            EncoderFailureError: If a field's custom encoder fails
        """
        if isinstance(record, Values):
            return record

        result = Values()
        if record is None:
            return result

        self._log.log_encode_start(type(record).__name__)
        if isinstance(record, Mapping):
            self._encode_mapping(result, record)
        elif is_record(record):
            self._encode_record(result, record)
        else:
            raise UnsupportedTypeError(
                type(record).__name__, "expected a mapping or a structured record"
            )

        self._log.log_encode_complete(len(result), result.value_count())
        return result

    def _encode_mapping(self, result: Values, record: Mapping) -> None:
        for key, value in record.items():
            if not isinstance(key, str):
                raise TypeMismatchError("map key must be a string", key=key)
            if not isinstance(value, str):
                raise TypeMismatchError("map value must be a string", key=key)
            result.add(key, value)

    def _encode_record(self, result: Values, record: Any) -> None:
        for field in describe_fields(type(record)):
            value = field.value_of(record)

            # Embedded records contribute their own fields in place
            if field.embedded and (value is None or is_record(value)):
                self._encode_embedded(result, field, value)
                continue

            if not field.exported:
                self._log.log_field_skipped(field.name, "not exported")
                continue

            self._encode_field(result, field, value)

    def _encode_embedded(self, result: Values, field: FieldDescriptor, value: Any) -> None:
        directive = self.tag.lookup(field)
        if not directive.include:
            self._log.log_field_skipped(field.name, "skip directive")
            return
        if value is None:
            self._log.log_field_skipped(field.name, "embedded record is absent")
            return
        self._encode_record(result, value)

    def _encode_field(self, result: Values, field: FieldDescriptor, value: Any) -> None:
        directive = self.tag.lookup(field)
        if not directive.include:
            self._log.log_field_skipped(field.name, "skip directive")
            return
        if not directive.name:
            if self.tag.default_naming.is_empty():
                self._log.log_field_skipped(field.name, "no usable name")
            else:
                self._log.log_unnamed_field(field.name)
            return
        if directive.options.omit_empty and is_empty_value(value):
            self._log.log_field_skipped(field.name, "empty value")
            return

        name = directive.name
        if isinstance(value, datetime):
            result.add(name, format_timestamp(value))
            return

        if isinstance(value, QueryEncoder):
            try:
                encoded = _collect_encoded(value)
            except Exception as e:
                self._log.log_encoder_failure(name, e)
                raise EncoderFailureError(name, e) from e
            result.extend(name, encoded)
            return

        kind = kind_of(value)
        if kind is ValueKind.ABSENT:
            self._log.log_field_skipped(field.name, "absent value")
        elif kind is ValueKind.SEQUENCE:
            for element in value:
                result.add(name, value_to_string(element))
        elif kind in (ValueKind.STRING, ValueKind.INTEGER, ValueKind.BOOLEAN):
            result.add(name, value_to_string(value))
        else:
            self._log.log_field_skipped(field.name, f"{kind.value} values are not encoded")


def _collect_encoded(value: QueryEncoder) -> List[str]:
    """Run a custom encoder and check that it produced a sequence of strings."""
    encoded = value.encode_query()
    if isinstance(encoded, str):
        raise TypeError("encode_query() must return a sequence of strings, not a str")
    encoded = list(encoded)
    for element in encoded:
        if not isinstance(element, str):
            raise TypeError(
                f"encode_query() returned a {type(element).__name__} element, expected str"
            )
    return encoded


@lru_cache(maxsize=32)
def _converter_for(options: EncoderOptions) -> Converter:
    return Converter.from_options(options)


def encode(record: Any, options: Optional[EncoderOptions] = None) -> Values:
    """
    Convert a record to Values.

    Args:
        record: Record to encode (see Converter.values)
        options: Encoder options; defaults to the global configuration

    Returns:
        The encoded values
    """
    if options is None:
        options = get_config().encoder
    return _converter_for(options).values(record)


def values(record: Any) -> Values:
    """Convert a record to Values with the default options."""
    return encode(record)


__all__ = [
    "QueryEncoder",
    "Converter",
    "encode",
    "values",
]
