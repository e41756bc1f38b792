#!/usr/bin/env python3
"""
Basic usage example for querystring.

This example encodes a dataclass request and a pydantic model into URL query
values and builds the final query string with urllib.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, Field

import querystring
from querystring import EncoderOptions, url_field


@dataclass
class Pagination:
    page: int = url_field(",omitempty", default=0)
    perPage: int = url_field(",omitempty", default=0)


@dataclass
class SearchRequest:
    query: str = url_field("q")
    tags: List[str] = url_field("tag,omitempty", default_factory=list)
    since: Optional[datetime] = url_field(",omitempty", default=None)
    pagination: Pagination = url_field(embedded=True, default_factory=Pagination)
    debug: bool = url_field("-", default=False)


class ReportFilter(BaseModel):
    teamName: str
    regions: List[str] = Field(default_factory=list, json_schema_extra={"url": "region"})


def main():
    """Demonstrate basic encoding."""
    print("querystring - Basic Usage Example")
    print("=" * 60)

    request = SearchRequest(
        query="status:open",
        tags=["bug", "ui"],
        since=datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc),
        pagination=Pagination(page=2, perPage=50),
    )
    params = querystring.encode(request)
    print(f"Values: {params}")
    print(f"Query:  {urlencode(params, doseq=True)}")

    report = ReportFilter(teamName="core", regions=["eu", "us"])
    camel = EncoderOptions().with_naming_strategy("camel")
    print(f"Snake:  {urlencode(querystring.encode(report), doseq=True)}")
    print(f"Camel:  {urlencode(querystring.encode(report, camel), doseq=True)}")


if __name__ == "__main__":
    main()
