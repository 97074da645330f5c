"""
Pytest configuration and shared fixtures for slump tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest

import slump
from slump.template.renderer import get_renderer
from slump.utils.config import reset_config


def pytest_configure(config):
    config.addinivalue_line("markers", "performance: render throughput tests")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate each test from slump environment variables and cached state."""
    for var in ("SLUMP_CONFIG", "SLUMP_DELIMS_LEFT", "SLUMP_DELIMS_RIGHT", "SLUMP_AUTOESCAPE"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    get_renderer.cache_clear()
    yield
    reset_config()
    get_renderer.cache_clear()


# Message fixtures
MESSAGE_CASES = [
    (
        "hello, {name}",
        {"name": "Gophers"},
        ["name"],
        "hello, Gophers",
    ),
    (
        "{lang} {version} is released",
        {"lang": "Go", "version": "1.7"},
        ["lang", "version"],
        "Go 1.7 is released",
    ),
    (
        "the type of {value} is float64",
        {"value": 3.14159265359},
        ["value"],
        "the type of 3.14159265359 is float64",
    ),
    (
        "the type of {printf(\"%.2f\", value)} is float64",
        {"value": 3.14},
        ["value"],
        "the type of 3.14 is float64",
    ),
]


@pytest.fixture(params=MESSAGE_CASES, ids=["name", "lang-version", "float", "printf"])
def message_case(request):
    """One (text, values, keys, want) rendering case."""
    return request.param


@pytest.fixture
def loaded_message(message_case):
    """A message populated from ``message_case``."""
    text, values, _, _ = message_case
    m = slump.new(text)
    m.add(values)
    return m
