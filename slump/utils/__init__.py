"""
Utils package for slump.

This module provides the exception hierarchy, logging setup and
configuration shared by the rest of the package.
"""

from .exceptions import (
    SlumpError,
    EmptyTextError,
    TemplateParseError,
    TemplateExecutionError,
    DelimiterError,
    ConfigurationError,
    FormattedError,
)

from .config import (
    SlumpConfig,
    DelimiterConfig,
    RenderingConfig,
    LoggingConfig,
    get_config,
    set_config,
    reset_config,
    load_config,
)

from .logging import get_logger, setup_logging

__all__ = [
    # Exceptions
    "SlumpError",
    "EmptyTextError",
    "TemplateParseError",
    "TemplateExecutionError",
    "DelimiterError",
    "ConfigurationError",
    "FormattedError",

    # Configuration
    "SlumpConfig",
    "DelimiterConfig",
    "RenderingConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
]
