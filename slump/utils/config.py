"""
Configuration System for slump.

This module provides a single configuration object covering the default
delimiters, engine rendering options and logging. Values come from a JSON
or YAML file, with environment variables taking precedence.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .logging import get_logger, setup_logging

logger = get_logger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


def _as_bool(value: Any) -> bool:
    # Quoted "false" / "no" in a config file must not read as True
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


@dataclass
class DelimiterConfig:
    """Default delimiter configuration."""

    left: str = "{"
    right: str = "}"


@dataclass
class RenderingConfig:
    """Template engine options."""

    autoescape: bool = False
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    enable_file_logging: bool = False
    log_file: str = "slump.log"


class SlumpConfig:
    """
    Configuration manager for slump.

    Sections are read from an optional JSON or YAML file. A missing file
    yields the defaults; a file that exists but cannot be parsed raises
    ConfigurationError.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, ``SLUMP_CONFIG`` is used.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.delimiters = self._create_delimiter_config()
        self.rendering = self._create_rendering_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Optional[Path]:
        if config_file:
            return Path(config_file)
        env_file = os.getenv("SLUMP_CONFIG")
        if env_file:
            return Path(env_file)
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if self.config_file is None:
            return {}
        if not self.config_file.exists():
            logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}", str(self.config_file)) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", str(self.config_file)
            )
        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._config_data.get(name, {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Configuration section '{name}' must be a mapping",
                str(self.config_file) if self.config_file else None,
            )
        return section

    def _create_delimiter_config(self) -> DelimiterConfig:
        """Create delimiter configuration from loaded data."""
        delims_data = self._section("delimiters")

        return DelimiterConfig(
            left=os.getenv("SLUMP_DELIMS_LEFT") or delims_data.get("left", "{"),
            right=os.getenv("SLUMP_DELIMS_RIGHT") or delims_data.get("right", "}"),
        )

    def _create_rendering_config(self) -> RenderingConfig:
        """Create rendering configuration from loaded data."""
        render_data = self._section("rendering")

        env_autoescape = os.getenv("SLUMP_AUTOESCAPE")
        if env_autoescape is not None:
            autoescape = _as_bool(env_autoescape)
        else:
            autoescape = _as_bool(render_data.get("autoescape", False))

        return RenderingConfig(
            autoescape=autoescape,
            trim_blocks=_as_bool(render_data.get("trim_blocks", False)),
            lstrip_blocks=_as_bool(render_data.get("lstrip_blocks", False)),
            keep_trailing_newline=_as_bool(render_data.get("keep_trailing_newline", True)),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level", "WARNING"),
            enable_file_logging=_as_bool(log_data.get("enable_file_logging", False)),
            log_file=log_data.get("log_file", "slump.log"),
        )

    def default_delimiters(self):
        """Return the configured default delimiters as a validated pair."""
        from ..template.types import Delimiters

        return Delimiters(self.delimiters.left, self.delimiters.right)

    def apply_logging(self) -> None:
        """Reconfigure the slump logger from the logging section."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(self.logging.level, log_file)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "delimiters": {
                "left": self.delimiters.left,
                "right": self.delimiters.right,
            },
            "rendering": {
                "autoescape": self.rendering.autoescape,
                "trim_blocks": self.rendering.trim_blocks,
                "lstrip_blocks": self.rendering.lstrip_blocks,
                "keep_trailing_newline": self.rendering.keep_trailing_newline,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self, path: Optional[str] = None) -> None:
        """Save current configuration to a JSON or YAML file."""
        target = Path(path) if path else self.config_file
        if target is None:
            raise ConfigurationError("No configuration file to save to")

        try:
            with open(target, "w") as f:
                if target.suffix.lower() in (".yaml", ".yml"):
                    yaml.safe_dump(self.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}", str(target)) from e
        logger.info(f"Configuration saved to {target}")


# Global configuration instance
_global_config: Optional[SlumpConfig] = None


def get_config() -> SlumpConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = SlumpConfig()
    return _global_config


def set_config(config: SlumpConfig) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Drop the global configuration so the next access reloads it."""
    global _global_config
    _global_config = None


def load_config(config_file: str) -> SlumpConfig:
    """Load configuration from a specific file."""
    return SlumpConfig(config_file)
