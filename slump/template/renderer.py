"""
Template Rendering Engine.

This module adapts Jinja2 to slump's delimiter model. Each delimiter pair
gets its own Jinja2 environment whose variable markers are the pair's
markers, with undefined names treated as errors and a small library of
printf-style functions installed as globals.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, Optional

from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError

from ..utils.exceptions import TemplateExecutionError, TemplateParseError
from ..utils.logging import get_logger
from .functions import template_functions
from .types import Delimiters, ValidationResult

logger = get_logger(__name__)


class JinjaTemplateRenderer:
    """Jinja2-based renderer bound to one pair of delimiters."""

    def __init__(
        self,
        delimiters: Optional[Delimiters] = None,
        autoescape: bool = False,
        trim_blocks: bool = False,
        lstrip_blocks: bool = False,
        keep_trailing_newline: bool = True,
    ):
        """
        Initialize the template renderer.

        Args:
            delimiters: Markers around substitution expressions
            autoescape: HTML-escape substituted values
            trim_blocks: Drop the first newline after a block tag
            lstrip_blocks: Strip whitespace before a block tag
            keep_trailing_newline: Keep a trailing newline in the text
        """
        self.delimiters = delimiters or Delimiters.default()
        self._env = Environment(
            variable_start_string=self.delimiters.left,
            variable_end_string=self.delimiters.right,
            undefined=StrictUndefined,
            autoescape=autoescape,
            trim_blocks=trim_blocks,
            lstrip_blocks=lstrip_blocks,
            keep_trailing_newline=keep_trailing_newline,
        )
        self._env.globals.update(template_functions())

    @property
    def environment(self) -> Environment:
        return self._env

    def render(self, text: str, context: Mapping[str, Any]) -> str:
        """
        Parse ``text`` and execute it against ``context``.

        Args:
            text: Template source
            context: Substitution values keyed by name

        Returns:
            The rendered text

        Raises:
            TemplateParseError: If the text is not a valid template
            TemplateExecutionError: If substitution fails
        """
        try:
            template = self._env.from_string(text)
        except TemplateSyntaxError as e:
            logger.debug(f"Failed to parse template at line {e.lineno}: {e.message}")
            raise TemplateParseError(e.message or str(e), e.lineno, text) from e

        try:
            return template.render(dict(context))
        except TemplateError as e:
            logger.debug(f"Failed to execute template: {e}")
            raise TemplateExecutionError(str(e), text) from e
        except Exception as e:
            logger.debug(f"Template function failed: {e}")
            raise TemplateExecutionError(f"error calling template function: {e}", text) from e

    def validate_template(self, text: str) -> ValidationResult:
        """Check that ``text`` parses under this renderer's delimiters."""
        try:
            self._env.parse(text)
            return ValidationResult(
                is_valid=True,
                errors=(),
                metadata={"template_length": len(text)},
            )
        except TemplateSyntaxError as e:
            return ValidationResult(
                is_valid=False,
                errors=(e.message or str(e),),
                metadata={"template_length": len(text), "lineno": e.lineno},
            )


@lru_cache(maxsize=32)
def get_renderer(
    delimiters: Delimiters,
    autoescape: bool = False,
    trim_blocks: bool = False,
    lstrip_blocks: bool = False,
    keep_trailing_newline: bool = True,
) -> JinjaTemplateRenderer:
    """Return a shared renderer for the given settings, building it once."""
    logger.debug(f"Creating renderer for delimiters {delimiters.left!r} {delimiters.right!r}")
    return JinjaTemplateRenderer(
        delimiters,
        autoescape=autoescape,
        trim_blocks=trim_blocks,
        lstrip_blocks=lstrip_blocks,
        keep_trailing_newline=keep_trailing_newline,
    )
