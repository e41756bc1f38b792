"""
Constants and Enumerations for the querystring package.

This module consolidates the constant definitions shared by the name caser,
the directive resolver and the record encoder, providing a single source of
truth for defaults and recognised option names.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet


# =============================================================================
# Naming Strategies
# =============================================================================

class NameCase(Enum):
    """Default naming strategies applied to fields without an explicit name."""

    CAMEL = "camel"  # helloWorld
    PASCAL = "pascal"  # HelloWorld
    SNAKE = "snake"  # hello_world
    NONE = ""  # identity

    @classmethod
    def parse(cls, value) -> "NameCase":
        """
        Resolve a strategy from an enum member, its value or its name.

        Unrecognised values map to NONE.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        text = str(value).strip().lower()
        for member in cls:
            if text == member.value or text == member.name.lower():
                return member
        return cls.NONE

    def is_empty(self) -> bool:
        return self is NameCase.NONE


# =============================================================================
# Name Conversion Constants
# =============================================================================

SEPARATOR_CHARS: FrozenSet[str] = frozenset("_-.")
SNAKE_SEPARATOR = "_"


# =============================================================================
# Directive Constants
# =============================================================================

DEFAULT_DIRECTIVE_KEY = "url"
DEFAULT_SKIP_SENTINEL = "-"
DEFAULT_NAMING_STRATEGY = NameCase.SNAKE

DIRECTIVE_SEPARATOR = ","
EMBEDDED_KEY = "embedded"


class DirectiveOption(Enum):
    """Options recognised after the name segment of a directive."""

    OMIT_EMPTY = "omitempty"


# =============================================================================
# Value Formatting Constants
# =============================================================================

UTC_DESIGNATOR = "Z"
FLOAT_FORMAT = "%f"
TRUE_STRING = "true"
FALSE_STRING = "false"


__all__ = [
    "NameCase",
    "SEPARATOR_CHARS",
    "SNAKE_SEPARATOR",
    "DEFAULT_DIRECTIVE_KEY",
    "DEFAULT_SKIP_SENTINEL",
    "DEFAULT_NAMING_STRATEGY",
    "DIRECTIVE_SEPARATOR",
    "EMBEDDED_KEY",
    "DirectiveOption",
    "UTC_DESIGNATOR",
    "FLOAT_FORMAT",
    "TRUE_STRING",
    "FALSE_STRING",
]
