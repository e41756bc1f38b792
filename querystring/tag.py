"""
Directive resolution for record fields.

A directive is the string attached to a field under the directive key, in
the form ``name,option1,option2``. The name segment sets the query parameter
name; an empty name falls back to the field name converted with the
configured naming strategy. A directive equal to the skip sentinel excludes
the field entirely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Union

from .fields import FieldDescriptor
from .utils.config import EncoderOptions
from .utils.constants import (
    NameCase,
    DirectiveOption,
    DEFAULT_DIRECTIVE_KEY,
    DEFAULT_NAMING_STRATEGY,
    DEFAULT_SKIP_SENTINEL,
    DIRECTIVE_SEPARATOR,
)
from .utils.naming import convert_name


class TagOptions(tuple):
    """Options listed after the name segment of a directive."""

    def contains(self, option: Union[str, DirectiveOption]) -> bool:
        """Check whether the options include the given option."""
        if isinstance(option, DirectiveOption):
            option = option.value
        return option in self

    @property
    def omit_empty(self) -> bool:
        return self.contains(DirectiveOption.OMIT_EMPTY)


@dataclass(frozen=True)
class Directive:
    """Resolved directive of a single field."""

    name: str
    options: TagOptions = TagOptions()
    include: bool = True


SKIP_DIRECTIVE = Directive(name="", options=TagOptions(), include=False)


@lru_cache(maxsize=1024)
def parse_directive(raw: str) -> Tuple[str, TagOptions]:
    """
    Split a raw directive into its name and options.

    Examples:
        parse_directive("foo,omitempty") returns ("foo", ("omitempty",))
        parse_directive(",omitempty") returns ("", ("omitempty",))
        parse_directive("") returns ("", ())
    """
    name, *options = raw.split(DIRECTIVE_SEPARATOR)
    return name, TagOptions(options)


class Tag(ABC):
    """
    Directive resolver interface.

    A Tag reads the raw directive of a field, parses it, and resolves the
    output name and options the encoder uses for that field.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Directive key read from field metadata."""

    @property
    @abstractmethod
    def skip(self) -> str:
        """Directive value that excludes a field."""

    @abstractmethod
    def get(self, field: FieldDescriptor) -> Tuple[str, bool]:
        """Return the raw directive of a field and whether one was declared."""

    @abstractmethod
    def parse_tag(self, tag: str) -> Tuple[str, TagOptions]:
        """Parse a raw directive into its name and options."""

    @abstractmethod
    def resolve(self, field_name: str, raw: str) -> Directive:
        """Resolve the directive of a field from its name and raw directive."""

    @property
    def default_naming(self) -> NameCase:
        """Naming strategy applied to fields without an explicit name."""
        return NameCase.NONE

    def lookup(self, field: FieldDescriptor) -> Directive:
        """Read and resolve the directive of a field descriptor."""
        raw, _ = self.get(field)
        return self.resolve(field.name, raw)


class DefaultTag(Tag):
    """
    Default directive resolver.

    Reads directives under a configurable key, skips fields whose directive
    equals the sentinel, and names unnamed fields with a naming strategy.
    """

    def __init__(
        self,
        tag_key: str = DEFAULT_DIRECTIVE_KEY,
        skip: str = DEFAULT_SKIP_SENTINEL,
        use_name: Union[NameCase, str, None] = DEFAULT_NAMING_STRATEGY,
    ):
        self._key = tag_key
        self._skip = skip
        self.use_name = NameCase.parse(use_name)

    @property
    def key(self) -> str:
        return self._key

    @property
    def skip(self) -> str:
        return self._skip

    @property
    def default_naming(self) -> NameCase:
        return self.use_name

    def get(self, field: FieldDescriptor) -> Tuple[str, bool]:
        raw = field.directive(self._key)
        if raw is None:
            return "", False
        return raw, True

    def parse_tag(self, tag: str) -> Tuple[str, TagOptions]:
        return parse_directive(tag)

    def resolve(self, field_name: str, raw: str) -> Directive:
        if raw == self._skip:
            return SKIP_DIRECTIVE

        name, options = self.parse_tag(raw)
        if not name and not self.use_name.is_empty():
            name = convert_name(self.use_name, field_name)
        return Directive(name=name, options=options)

    def __repr__(self) -> str:
        return (
            f"DefaultTag(key={self._key!r}, skip={self._skip!r}, "
            f"use_name={self.use_name.value!r})"
        )


def new_tag(
    use_name: Union[NameCase, str, None] = DEFAULT_NAMING_STRATEGY,
    skip_field: str = DEFAULT_SKIP_SENTINEL,
    tag: str = DEFAULT_DIRECTIVE_KEY,
) -> DefaultTag:
    """
    Create a DefaultTag.

    Args:
        use_name: Naming strategy for fields without an explicit name
        skip_field: Directive value that excludes a field
        tag: Directive key read from field metadata

    Returns:
        A configured DefaultTag
    """
    return DefaultTag(tag_key=tag, skip=skip_field, use_name=use_name)


def tag_from_options(options: EncoderOptions) -> DefaultTag:
    """Create a DefaultTag from encoder options."""
    return new_tag(
        use_name=options.naming_strategy,
        skip_field=options.skip_sentinel,
        tag=options.directive_key,
    )


__all__ = [
    "TagOptions",
    "Directive",
    "parse_directive",
    "Tag",
    "DefaultTag",
    "new_tag",
    "tag_from_options",
]
