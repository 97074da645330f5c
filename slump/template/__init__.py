"""
Template engine integration.

Binds slump's delimiter pairs to Jinja2 environments and supplies the
functions callable from inside a template.
"""

from .types import Delimiters, ValidationResult, DEFAULT_LEFT, DEFAULT_RIGHT
from .renderer import JinjaTemplateRenderer, get_renderer
from .functions import template_functions

__all__ = [
    "Delimiters",
    "ValidationResult",
    "DEFAULT_LEFT",
    "DEFAULT_RIGHT",
    "JinjaTemplateRenderer",
    "get_renderer",
    "template_functions",
]
