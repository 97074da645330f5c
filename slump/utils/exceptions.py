"""
Custom exception definitions.

This module defines the exception hierarchy for slump-specific errors.
Errors coming out of the template engine are wrapped into the parse or
execution kind and chained to the original engine exception.
"""

from typing import Optional


class SlumpError(Exception):
    """
    Base exception for all slump-related errors.

    This is the root exception class for all slump-specific errors,
    carrying a human-readable message plus optional structured context.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize slump error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class EmptyTextError(SlumpError):
    """Raised when a message has no template text to render."""

    def __init__(self, message: str = "text to format was not provided"):
        super().__init__(message)


class TemplateParseError(SlumpError):
    """
    Raised when template text is not valid under the active delimiters.

    The engine's diagnostic is kept verbatim in ``message``; the line
    number, when known, goes into ``details``.
    """

    def __init__(self, message: str, lineno: Optional[int] = None, source: str = ""):
        """
        Initialize parse error.

        Args:
            message: Diagnostic from the template engine
            lineno: Line of the template where parsing failed
            source: Template text that failed to parse
        """
        details = {}
        if lineno is not None:
            details['lineno'] = lineno

        super().__init__(message, details)
        self.lineno = lineno
        self.source = source


class TemplateExecutionError(SlumpError):
    """
    Raised when a parsed template fails while substituting values.

    Typical causes are a reference to a key that is not in the value
    store, or a template function called with bad arguments.
    """

    def __init__(self, message: str, source: str = ""):
        """
        Initialize execution error.

        Args:
            message: Diagnostic from the template engine
            source: Template text that was being executed
        """
        super().__init__(message)
        self.source = source


class DelimiterError(SlumpError):
    """Raised when a delimiter pair cannot be used with the engine."""

    def __init__(self, message: str, left: str = "", right: str = ""):
        super().__init__(message, {'left': left, 'right': right})
        self.left = left
        self.right = right


class ConfigurationError(SlumpError):
    """Raised when a configuration file cannot be read or is malformed."""

    def __init__(self, message: str, config_file: Optional[str] = None):
        details = {}
        if config_file is not None:
            details['config_file'] = config_file

        super().__init__(message, details)
        self.config_file = config_file


class FormattedError(SlumpError):
    """
    An error whose description is a formatted message.

    Returned by ``render_err`` and ``Message.as_error``. ``str()`` yields the
    formatted text exactly, so it can be raised wherever a plain error with
    a computed message is wanted.
    """

    def __str__(self) -> str:
        return self.message
