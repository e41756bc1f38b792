"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
querystring package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the querystring package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("QUERYSTRING_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    # Configure root logger for querystring
    logger = logging.getLogger("querystring")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "querystring" or name.startswith("querystring."):
        return logging.getLogger(name)
    return logging.getLogger(f"querystring.{name}")


class EncoderLogger:
    """
    Logging helpers for the record encoder.

    Traversal details go to DEBUG; custom encoder failures go to WARNING
    right before the failure is raised to the caller.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_encode_start(self, record_type: str) -> None:
        """Log the beginning of an encode call."""
        self.logger.debug(f"Encoding record of type {record_type}")

    def log_field_skipped(self, field_name: str, reason: str) -> None:
        """
        Log a field that produced no entries.

        Args:
            field_name: Declared field name
            reason: Why the field was left out
        """
        self.logger.debug(f"Skipped field '{field_name}': {reason}")

    def log_unnamed_field(self, field_name: str) -> None:
        """Log a field whose name could not be converted to a query name."""
        self.logger.warning(
            f"Field '{field_name}' has no usable query name and was skipped; "
            f"give it an explicit directive name"
        )

    def log_encoder_failure(self, field_name: str, error: BaseException) -> None:
        """
        Log a failing custom encoder.

        Args:
            field_name: Output name of the field
            error: Exception raised by the encoder
        """
        self.logger.warning(
            f"Custom encoder for field '{field_name}' failed: {type(error).__name__}: {error}"
        )

    def log_encode_complete(self, key_count: int, value_count: int) -> None:
        """Log the size of a finished encode."""
        self.logger.debug(f"Encoded {key_count} keys ({value_count} values)")


# Initialize logging on module import
setup_logging()
