"""
Unit tests for the exception hierarchy.

Tests message formatting, details and the FormattedError adapter.
"""

import pytest

from slump.utils.exceptions import (
    ConfigurationError,
    DelimiterError,
    EmptyTextError,
    FormattedError,
    SlumpError,
    TemplateExecutionError,
    TemplateParseError,
)


class TestSlumpExceptions:
    """Test cases for custom exception classes."""

    def test_slump_error_basic(self):
        error = SlumpError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_slump_error_with_details(self):
        details = {"key1": "value1", "key2": 42}
        error = SlumpError("Test error", details)

        assert error.message == "Test error"
        assert error.details == details
        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_empty_text_error(self):
        error = EmptyTextError()
        assert str(error) == "text to format was not provided"
        assert isinstance(error, SlumpError)

    def test_parse_error(self):
        error = TemplateParseError("unexpected '}'", lineno=3, source="a\nb\n}")
        assert error.lineno == 3
        assert error.source == "a\nb\n}"
        assert str(error) == "unexpected '}' (lineno=3)"

    def test_parse_error_without_line(self):
        assert str(TemplateParseError("bad")) == "bad"

    def test_execution_error(self):
        error = TemplateExecutionError("'name' is undefined", source="{name}")
        assert str(error) == "'name' is undefined"
        assert error.source == "{name}"

    def test_delimiter_error(self):
        error = DelimiterError("bad pair", "<", "<")
        assert error.left == "<"
        assert error.right == "<"

    def test_configuration_error(self):
        error = ConfigurationError("broken", "slump.json")
        assert error.config_file == "slump.json"
        assert "config_file=slump.json" in str(error)

    def test_formatted_error_ignores_details(self):
        error = FormattedError("disk full", {"device": "sda"})
        assert str(error) == "disk full"

    def test_all_catchable_as_slump_error(self):
        for error in (
            EmptyTextError(),
            TemplateParseError("x"),
            TemplateExecutionError("x"),
            DelimiterError("x"),
            ConfigurationError("x"),
            FormattedError("x"),
        ):
            with pytest.raises(SlumpError):
                raise error
