"""
Naming Utilities for the querystring package.

This module provides the case conversions used to derive default query
parameter names from field names, and exposes them as a standalone utility.
Non-conforming input is signalled by an empty string rather than an exception,
so callers check the result for emptiness.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from .constants import NameCase, SEPARATOR_CHARS, SNAKE_SEPARATOR


# =============================================================================
# Character Classification
# =============================================================================

def is_separator(char: str) -> bool:
    """Check if the character is one of the word separators ('_', '-', '.')."""
    return char in SEPARATOR_CHARS


def is_compliant(char: str) -> bool:
    """Check if the character may appear inside a convertible name."""
    return char.isalpha() or char.isdigit() or is_separator(char)


def is_valid_name(name: str) -> bool:
    """
    Check if a name can be case-converted.

    The name must start with a letter, end with a letter or digit, and contain
    only letters, digits and separators in between.

    Args:
        name: Candidate name

    Returns:
        True if the name conforms, False otherwise
    """
    if not name:
        return False
    first, last = name[0], name[-1]
    if not first.isalpha():
        return False
    if not (last.isalpha() or last.isdigit()):
        return False
    return all(is_compliant(char) for char in name[1:-1])


# =============================================================================
# Core Case Conversions
# =============================================================================

def _join_words(name: str, upper_first: bool) -> str:
    """Drop separators and uppercase the character that follows each one."""
    if not is_valid_name(name):
        return ""

    parts = [name[0].upper() if upper_first else name[0].lower()]
    after_separator = False
    for char in name[1:]:
        if is_separator(char):
            after_separator = True
            continue
        if after_separator:
            parts.append(char.upper())
            after_separator = False
            continue
        parts.append(char)
    return "".join(parts)


def to_camel_case(name: str) -> str:
    """
    Convert a name to camelCase.

    Examples:
        to_camel_case("foo-bar") returns "fooBar"
        to_camel_case("hello_2_world") returns "hello2World"
        to_camel_case("foo-bar-") returns ""
    """
    return _join_words(name, upper_first=False)


def to_pascal_case(name: str) -> str:
    """
    Convert a name to PascalCase.

    Examples:
        to_pascal_case("foo.bar") returns "FooBar"
        to_pascal_case("hello_2-bar") returns "Hello2Bar"
        to_pascal_case("1foo-bar") returns ""
    """
    return _join_words(name, upper_first=True)


def to_snake_case(name: str) -> str:
    """
    Convert a name to snake_case.

    Separators become a single underscore, and word boundaries are inserted
    before uppercase letters, before a digit run that follows a letter, and
    before a letter that follows a digit.

    Examples:
        to_snake_case("HelloWorld") returns "hello_world"
        to_snake_case("hello2World") returns "hello_2_world"
        to_snake_case("foo-bar-1") returns "foo_bar_1"
        to_snake_case("foo-bar-") returns ""

    Args:
        name: Name to convert

    Returns:
        The snake_case name, or an empty string for non-conforming input
    """
    if not is_valid_name(name):
        return ""

    parts = [name[0].lower()]
    at_boundary = False
    previous = name[0]
    for char in name[1:]:
        if is_separator(char):
            if not at_boundary:
                parts.append(SNAKE_SEPARATOR)
                at_boundary = True
            previous = char
            continue

        if not at_boundary:
            if char.isalpha() and (char.isupper() or previous.isdigit()):
                parts.append(SNAKE_SEPARATOR)
            elif char.isdigit() and not previous.isdigit():
                parts.append(SNAKE_SEPARATOR)

        parts.append(char.lower())
        at_boundary = False
        previous = char
    return "".join(parts)


_CONVERTERS: Dict[NameCase, Callable[[str], str]] = {
    NameCase.CAMEL: to_camel_case,
    NameCase.PASCAL: to_pascal_case,
    NameCase.SNAKE: to_snake_case,
}


def convert_name(strategy: Union[NameCase, str, None], name: str) -> str:
    """
    Convert a name with the given naming strategy.

    Args:
        strategy: A NameCase member or its string value ("camel", "pascal",
            "snake"); anything else leaves the name unchanged
        name: Name to convert

    Returns:
        Converted name; empty string when the name cannot be converted
    """
    converter = _CONVERTERS.get(NameCase.parse(strategy))
    if converter is None:
        return name
    return converter(name)


__all__ = [
    "is_separator",
    "is_compliant",
    "is_valid_name",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "convert_name",
]
