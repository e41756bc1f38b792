"""
Field descriptors for structured records.

Structured records are dataclass instances and pydantic model instances. The
field list of a record class is derived once and cached; the encoder then
walks the descriptors instead of inspecting the class on every call.

Directive strings are attached to fields through their metadata, under the
configured directive key (``"url"`` by default)::

    @dataclass
    class Search:
        query: str = url_field("q")
        page: int = url_field("page,omitempty", default=0)
        debug: bool = url_field("-", default=False)

    class Search(BaseModel):
        query: str = Field(json_schema_extra={"url": "q"})
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel

from .utils.constants import DEFAULT_DIRECTIVE_KEY, EMBEDDED_KEY
from .utils.exceptions import UnsupportedTypeError
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one declared field of a record class."""

    name: str
    type: Any
    exported: bool
    embedded: bool
    metadata: Mapping[str, Any]

    def directive(self, key: str) -> Optional[str]:
        """Return the raw directive string stored under key, if any."""
        raw = self.metadata.get(key)
        if raw is None:
            return None
        return str(raw)

    def value_of(self, record: Any) -> Any:
        return getattr(record, self.name, None)


def is_record_class(cls: Any) -> bool:
    """Check if cls is a dataclass or pydantic model class."""
    if not isinstance(cls, type):
        return False
    return dataclasses.is_dataclass(cls) or issubclass(cls, BaseModel)


def is_record(value: Any) -> bool:
    """Check if value is a dataclass or pydantic model instance."""
    return not isinstance(value, type) and is_record_class(type(value))


def _is_exported(name: str) -> bool:
    return not name.startswith("_")


def _describe_dataclass(cls: type) -> Tuple[FieldDescriptor, ...]:
    return tuple(
        FieldDescriptor(
            name=f.name,
            type=f.type,
            exported=_is_exported(f.name),
            embedded=bool(f.metadata.get(EMBEDDED_KEY, False)),
            metadata=f.metadata,
        )
        for f in dataclasses.fields(cls)
    )


def _describe_model(cls: type) -> Tuple[FieldDescriptor, ...]:
    descriptors = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        descriptors.append(
            FieldDescriptor(
                name=name,
                type=info.annotation,
                exported=_is_exported(name),
                embedded=bool(extra.get(EMBEDDED_KEY, False)),
                metadata=MappingProxyType(dict(extra)),
            )
        )
    return tuple(descriptors)


@lru_cache(maxsize=None)
def describe_fields(cls: type) -> Tuple[FieldDescriptor, ...]:
    """
    Describe the declared fields of a record class.

    Args:
        cls: A dataclass or pydantic model class

    Returns:
        Field descriptors in declaration order (inherited fields first)

    Raises:
        UnsupportedTypeError: If cls is not a record class
    """
    if not is_record_class(cls):
        raise UnsupportedTypeError(getattr(cls, "__name__", repr(cls)), "not a record class")

    if dataclasses.is_dataclass(cls):
        descriptors = _describe_dataclass(cls)
    else:
        descriptors = _describe_model(cls)

    logger.debug(f"Described {len(descriptors)} fields for {cls.__name__}")
    return descriptors


def url_field(
    directive: Optional[str] = None,
    *,
    key: str = DEFAULT_DIRECTIVE_KEY,
    embedded: bool = False,
    **kwargs: Any,
) -> Any:
    """
    Declare a dataclass field carrying a query directive.

    Field names that cannot be case-converted, such as ``type_`` or
    ``from_``, get no default name and are skipped with a warning; give
    them an explicit name, e.g. ``url_field("type")``.

    Args:
        directive: Directive string such as "name,omitempty" or "-"
        key: Directive key the string is stored under
        embedded: Splice the nested record's fields into the parent
        **kwargs: Forwarded to dataclasses.field (default, default_factory, ...)

    Returns:
        A dataclasses.Field
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if directive is not None:
        metadata[key] = directive
    if embedded:
        metadata[EMBEDDED_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


__all__ = [
    "FieldDescriptor",
    "is_record_class",
    "is_record",
    "describe_fields",
    "url_field",
]
