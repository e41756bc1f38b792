"""
Configuration System for the querystring package.

This module provides the encoder options object and a file-backed
configuration manager. Settings are read from a JSON or YAML file and can be
overridden through environment variables.
"""

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .constants import (
    NameCase,
    DEFAULT_DIRECTIVE_KEY,
    DEFAULT_NAMING_STRATEGY,
    DEFAULT_SKIP_SENTINEL,
)
from .logging import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "QUERYSTRING_CONFIG"


@dataclass(frozen=True)
class EncoderOptions:
    """Options controlling how record fields are named and filtered."""

    naming_strategy: NameCase = DEFAULT_NAMING_STRATEGY
    skip_sentinel: str = DEFAULT_SKIP_SENTINEL
    directive_key: str = DEFAULT_DIRECTIVE_KEY

    def with_naming_strategy(self, strategy) -> "EncoderOptions":
        return replace(self, naming_strategy=NameCase.parse(strategy))

    def with_skip_sentinel(self, sentinel: str) -> "EncoderOptions":
        return replace(self, skip_sentinel=sentinel)

    def with_directive_key(self, key: str) -> "EncoderOptions":
        return replace(self, directive_key=key)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "querystring.log"


class QueryStringConfig:
    """
    Configuration manager for the querystring package.

    This class loads the encoder defaults and logging settings from a single
    JSON or YAML file. Environment variables take precedence over the file.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, the path in
                QUERYSTRING_CONFIG is used when set.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.encoder = self._create_encoder_options()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Optional[Path]:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)
        env_file = os.getenv(CONFIG_ENV_VAR)
        if env_file:
            return Path(env_file)
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if self.config_file is None:
            return {}
        try:
            if self.config_file.exists():
                with open(self.config_file, "r") as f:
                    if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                        config_data = yaml.safe_load(f) or {}
                    else:
                        config_data = json.load(f)
                logger.info(f"Loaded configuration from {self.config_file}")
                return config_data
            else:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
                return {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

    def _create_encoder_options(self) -> EncoderOptions:
        """Create encoder options from loaded data."""
        encoder_data = self._config_data.get("encoder", {})

        raw_strategy = os.getenv(
            "QUERYSTRING_NAMING_STRATEGY",
            encoder_data.get("naming_strategy", DEFAULT_NAMING_STRATEGY.value),
        )
        strategy = NameCase.parse(raw_strategy)
        if strategy is NameCase.NONE and str(raw_strategy).strip().lower() not in ("", "none"):
            logger.warning(f"Unknown naming strategy '{raw_strategy}', using snake")
            strategy = NameCase.SNAKE

        return EncoderOptions(
            naming_strategy=strategy,
            skip_sentinel=os.getenv(
                "QUERYSTRING_SKIP_SENTINEL",
                encoder_data.get("skip_sentinel", DEFAULT_SKIP_SENTINEL),
            ),
            directive_key=os.getenv(
                "QUERYSTRING_DIRECTIVE_KEY",
                encoder_data.get("directive_key", DEFAULT_DIRECTIVE_KEY),
            ),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=log_data.get("level", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "querystring.log"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as plain data."""
        return {
            "encoder": {
                "naming_strategy": self.encoder.naming_strategy.value,
                "skip_sentinel": self.encoder.skip_sentinel,
                "directive_key": self.encoder.directive_key,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self, path: Optional[str] = None) -> None:
        """Save current configuration to a JSON file."""
        target = Path(path) if path else self.config_file
        if target is None:
            raise ValueError("No configuration file path to save to")

        with open(target, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Configuration saved to {target}")


# Global configuration instance
_global_config: Optional[QueryStringConfig] = None


def get_config() -> QueryStringConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = QueryStringConfig()
    return _global_config


def set_config(config: Optional[QueryStringConfig]) -> None:
    """Set the global configuration instance; None resets it."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> QueryStringConfig:
    """Load configuration from a specific file."""
    return QueryStringConfig(config_file)


__all__ = [
    "EncoderOptions",
    "LoggingConfig",
    "QueryStringConfig",
    "get_config",
    "set_config",
    "load_config",
]
