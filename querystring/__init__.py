"""
querystring: encode records as URL query values

Converts mappings and structured records (dataclasses and pydantic models)
into an ordered multi-valued collection ready to be sent as URL query
parameters or a form-encoded body.

Key Features:
- Per-field directives: "name,omitempty" to rename and omit empty values,
  "-" to skip a field
- Default names derived from field names (snake, camel or pascal case)
- Sequences encoded as repeated keys, datetimes as RFC 3339 timestamps
- Custom encoding through an encode_query() method on field values

Usage:
    from dataclasses import dataclass
    from urllib.parse import urlencode
    import querystring

    @dataclass
    class Search:
        query: str = querystring.url_field("q")
        page_size: int = 20

    params = querystring.encode(Search("python"))
    urlencode(params, doseq=True)  # 'q=python&page_size=20'
"""

__version__ = "0.1.0"
__author__ = "querystring Team"
__email__ = "querystring@example.com"

# Public API exports
from .encoder import (
    QueryEncoder,
    Converter,
    encode,
    values,
)

from .tag import (
    Tag,
    DefaultTag,
    Directive,
    TagOptions,
    new_tag,
)

from .fields import url_field, describe_fields
from .collection import Values

from .utils.constants import NameCase
from .utils.naming import convert_name
from .utils.config import EncoderOptions, get_config, set_config, load_config
from .utils.exceptions import (
    QueryStringError,
    UnsupportedTypeError,
    TypeMismatchError,
    EncoderFailureError,
)

__all__ = [
    "QueryEncoder",
    "Converter",
    "encode",
    "values",
    "Tag",
    "DefaultTag",
    "Directive",
    "TagOptions",
    "new_tag",
    "url_field",
    "describe_fields",
    "Values",
    "NameCase",
    "convert_name",
    "EncoderOptions",
    "get_config",
    "set_config",
    "load_config",
    "QueryStringError",
    "UnsupportedTypeError",
    "TypeMismatchError",
    "EncoderFailureError",
]
