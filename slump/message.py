"""
Formatted messages.

A ``Message`` pairs template text with its own value store. ``render`` is
the fallible operation; ``str(message)`` and ``error()`` never raise and
fall back to the error description when rendering fails.

Usage:
    m = slump.new("Hello, {name}")
    m.set("name", "Gopher")
    print(m)

Messages are meant for single-owner use. Mutating one from several
threads needs external locking.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .template.renderer import get_renderer
from .template.types import Delimiters, ValidationResult
from .utils.config import get_config
from .utils.exceptions import EmptyTextError, FormattedError, SlumpError
from .utils.logging import get_logger
from .values import MISSING, Values

logger = get_logger(__name__)


class Message:
    """Template text plus the values substituted into it."""

    def __init__(self, text: str = "", delimiters: Optional[Delimiters] = None):
        """
        Initialize a message with an empty value store.

        Args:
            text: Template source
            delimiters: Markers for this message; the configured default when None
        """
        self._text = text
        self._values = Values()
        self._delimiters = delimiters

    @property
    def delimiters(self) -> Delimiters:
        """Markers for this message, falling back to the configured default."""
        if self._delimiters is not None:
            return self._delimiters
        return get_config().default_delimiters()

    @delimiters.setter
    def delimiters(self, delimiters: Optional[Delimiters]) -> None:
        self._delimiters = delimiters

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    @property
    def values(self) -> Values:
        return self._values

    # Value store shortcuts

    def add(self, values: Optional[Mapping[str, Any]]) -> None:
        self._values.add(values)

    def set(self, key: str, value: Any) -> None:
        self._values.set(key, value)

    def get(self, key: str, default: Any = MISSING) -> Any:
        return self._values.get(key, default)

    def delete(self, key: str) -> None:
        self._values.delete(key)

    def clear(self) -> None:
        self._values.clear()

    def keys(self) -> List[str]:
        return self._values.keys()

    def count(self) -> int:
        return self._values.count()

    def has_values(self) -> bool:
        return self._values.has_values()

    def is_empty(self) -> bool:
        return self._values.is_empty()

    def render(self, delimiters: Optional[Delimiters] = None) -> str:
        """
        Render the text against the value store.

        Empty text is an error. Text with no values is returned as-is
        without being parsed, so plain messages never fail.

        Args:
            delimiters: Override the message's delimiters for this call

        Returns:
            The rendered text

        Raises:
            EmptyTextError: If the text is empty
            TemplateParseError: If the text is not a valid template
            TemplateExecutionError: If substitution fails
            DelimiterError: If the configured default delimiters are invalid
            ConfigurationError: If the configuration file cannot be loaded
        """
        if not self._text:
            raise EmptyTextError()

        if self._values.is_empty():
            logger.debug("No values set, returning text unchanged")
            return self._text

        rendering = get_config().rendering
        renderer = get_renderer(
            delimiters or self.delimiters,
            autoescape=rendering.autoescape,
            trim_blocks=rendering.trim_blocks,
            lstrip_blocks=rendering.lstrip_blocks,
            keep_trailing_newline=rendering.keep_trailing_newline,
        )
        return renderer.render(self._text, self._values)

    def validate(self) -> ValidationResult:
        """Check that the text parses under the message's delimiters."""
        return get_renderer(self.delimiters).validate_template(self._text)

    def string(self) -> str:
        """Render, returning the error description instead of raising."""
        try:
            return self.render()
        except SlumpError as e:
            return str(e)

    def error(self) -> str:
        """Same as ``string``; the description when used as an error."""
        return self.string()

    def as_error(self) -> FormattedError:
        """Return an exception whose message is the rendered text."""
        return FormattedError(self.string())

    def __str__(self) -> str:
        return self.string()

    def __repr__(self) -> str:
        return f"Message(text={self._text!r}, values={self._values!r})"


def new(text: str = "", delimiters: Optional[Delimiters] = None) -> Message:
    """Return a new message for ``text`` with no values."""
    return Message(text, delimiters)


def render_str(
    text: str,
    values: Optional[Mapping[str, Any]] = None,
    delimiters: Optional[Delimiters] = None,
) -> str:
    """
    Format ``text`` with ``values`` in one call.

    Never raises for template problems; the error description is returned
    in place of the formatted text.

        slump.render_str("Hello, {name}", {"name": "Gopher"})
    """
    m = Message(text, delimiters)
    m.add(values)
    return m.string()


def render_err(
    text: str,
    values: Optional[Mapping[str, Any]] = None,
    delimiters: Optional[Delimiters] = None,
) -> FormattedError:
    """
    Format ``text`` with ``values`` into an exception.

        raise slump.render_err("no such file or directory: {path}", {"path": path})
    """
    return FormattedError(render_str(text, values, delimiters))
