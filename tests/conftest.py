"""
Pytest configuration and shared fixtures for querystring tests.

This module provides sample record types, converters and configuration
isolation used across the test suite.
"""

import pytest
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from querystring import Converter, new_tag, url_field
from querystring.utils.config import set_config


# =============================================================================
# Sample record types
# =============================================================================

@dataclass
class SubEncode:
    """Field value that encodes itself as 'hello-world'."""

    hello: str = url_field("hello", key="form")
    world: str = url_field("world", key="form")

    def encode_query(self) -> List[str]:
        return [f"{self.hello}-{self.world}"]


class FailingEncoder:
    """Field value whose custom encoder always fails."""

    def encode_query(self) -> List[str]:
        raise ValueError("cannot encode")


@dataclass
class FormInput:
    """Record read with the 'form' directive key."""

    hello: str = url_field("hello", key="form")
    foo: str = url_field("foo,omitempty", key="form", default="")
    empty: str = url_field("empty", key="form", default="")
    om: int = url_field("om,omitempty", key="form", default=0)
    array: Tuple[int, int, int] = url_field("array", key="form", default=(1, 2, 3))
    slice: List[str] = url_field("slice", key="form", default_factory=list)
    sub: Optional[SubEncode] = url_field("sub", key="form", default=None)
    _small: str = url_field("small", key="form", default="small")
    skip: int = url_field("-", key="form", default=10)
    time: Optional[datetime] = url_field("time,omitempty", key="form", default=None)


@dataclass
class Pagination:
    page: int = url_field("page,omitempty", default=0)
    per_page: int = url_field("per_page,omitempty", default=0)


@dataclass
class SearchRequest:
    """Record embedding Pagination, with default-named fields."""

    query: str = url_field("q")
    pagination: Optional[Pagination] = url_field(embedded=True, default=None)
    sortOrder: str = "asc"
    includeArchived: bool = False


class Address(BaseModel):
    city: str = Field(json_schema_extra={"url": "city"})
    zip_code: str = ""


class Customer(BaseModel):
    name: str
    address: Optional[Address] = Field(default=None, json_schema_extra={"embedded": True})
    nickname: Optional[str] = Field(default=None, json_schema_extra={"url": "nick,omitempty"})
    internal_id: int = Field(default=0, json_schema_extra={"url": "-"})


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Reset global configuration and environment overrides per test."""
    for var in (
        "QUERYSTRING_CONFIG",
        "QUERYSTRING_NAMING_STRATEGY",
        "QUERYSTRING_SKIP_SENTINEL",
        "QUERYSTRING_DIRECTIVE_KEY",
    ):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def form_converter():
    """Converter reading directives under the 'form' key."""
    return Converter(new_tag(tag="form"))


@pytest.fixture
def converter():
    """Converter with default options."""
    return Converter()


@pytest.fixture
def fixed_time():
    """A UTC timestamp with a fractional second."""
    return datetime(2024, 3, 5, 14, 7, 9, 120000, tzinfo=timezone.utc)


@pytest.fixture
def form_input(fixed_time):
    """FormInput populated like a typical request."""
    return FormInput(
        hello="world",
        foo="bar",
        empty="",
        slice=["a", "b", "c"],
        sub=SubEncode(hello="subHello", world="subWorld"),
        _small="small",
        skip=10,
        time=fixed_time,
    )
