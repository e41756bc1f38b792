"""
Utils package for querystring.

This module provides the name caser, shared constants, the exception
hierarchy, logging helpers and configuration management.
"""

# Core utilities
from .exceptions import (
    QueryStringError,
    UnsupportedTypeError,
    TypeMismatchError,
    EncoderFailureError,
)
from .constants import *
from .naming import *

# Configuration
from .config import (
    EncoderOptions,
    LoggingConfig,
    QueryStringConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, EncoderLogger

__all__ = [
    # Core exceptions
    "QueryStringError",
    "UnsupportedTypeError",
    "TypeMismatchError",
    "EncoderFailureError",

    # Constants (exported via *)
    # Naming utilities (exported via *)

    # Configuration
    "EncoderOptions",
    "LoggingConfig",
    "QueryStringConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "EncoderLogger",
]
