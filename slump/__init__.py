"""
slump: simple string templates.

Pairs a value store with template text and renders it through Jinja2 using
configurable single-brace delimiters, yielding formatted strings or
formatted errors.

Usage:
    import slump

    m = slump.new("Hello, {name}")
    m.set("name", "Gopher")
    print(m)

    raise slump.render_err("no such file or directory: {path}", {"path": path})
"""

__version__ = "0.1.0"
__author__ = "Slump Team"
__email__ = "slump@example.com"

from .values import MISSING, Values
from .message import Message, new, render_str, render_err
from .template import Delimiters, ValidationResult
from .utils.exceptions import (
    SlumpError,
    EmptyTextError,
    TemplateParseError,
    TemplateExecutionError,
    DelimiterError,
    ConfigurationError,
    FormattedError,
)
from .utils.config import SlumpConfig, get_config, set_config, load_config, reset_config

__all__ = [
    "MISSING",
    "Values",
    "Message",
    "new",
    "render_str",
    "render_err",
    "Delimiters",
    "ValidationResult",
    "SlumpError",
    "EmptyTextError",
    "TemplateParseError",
    "TemplateExecutionError",
    "DelimiterError",
    "ConfigurationError",
    "FormattedError",
    "SlumpConfig",
    "get_config",
    "set_config",
    "load_config",
    "reset_config",
]
