"""
Unit tests for configuration loading.

Tests defaults, JSON and YAML files, environment overrides and the
global configuration accessors.
"""

import json
import logging

import pytest
import yaml

from slump.template import Delimiters
from slump.utils.config import (
    SlumpConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from slump.utils.exceptions import ConfigurationError, DelimiterError


class TestSlumpConfig:
    """Test configuration sources."""

    def test_defaults(self):
        config = SlumpConfig()
        assert config.config_file is None
        assert config.delimiters.left == "{"
        assert config.delimiters.right == "}"
        assert config.rendering.autoescape is False
        assert config.rendering.keep_trailing_newline is True
        assert config.logging.level == "WARNING"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = SlumpConfig(str(tmp_path / "absent.json"))
        assert config.default_delimiters() == Delimiters.default()

    def test_json_file(self, tmp_path):
        path = tmp_path / "slump.json"
        path.write_text(json.dumps({
            "delimiters": {"left": "<<", "right": ">>"},
            "rendering": {"autoescape": True},
        }))
        config = load_config(str(path))
        assert config.default_delimiters() == Delimiters("<<", ">>")
        assert config.rendering.autoescape is True

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "slump.yaml"
        path.write_text(yaml.safe_dump({
            "delimiters": {"left": "[[", "right": "]]"},
            "logging": {"level": "DEBUG"},
        }))
        config = load_config(str(path))
        assert config.delimiters.left == "[["
        assert config.logging.level == "DEBUG"

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "slump.yml"
        path.write_text("")
        config = load_config(str(path))
        assert config.delimiters.left == "{"

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "slump.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))
        assert exc_info.value.config_file == str(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "slump.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_non_mapping_section(self, tmp_path):
        path = tmp_path / "slump.json"
        path.write_text(json.dumps({"delimiters": "{}"}))
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_env_config_file(self, tmp_path, monkeypatch):
        path = tmp_path / "slump.json"
        path.write_text(json.dumps({"delimiters": {"left": "%(", "right": ")"}}))
        monkeypatch.setenv("SLUMP_CONFIG", str(path))
        config = SlumpConfig()
        assert config.config_file == path
        assert config.delimiters.left == "%("

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "slump.json"
        path.write_text(json.dumps({
            "delimiters": {"left": "<<", "right": ">>"},
            "rendering": {"autoescape": True},
        }))
        monkeypatch.setenv("SLUMP_DELIMS_LEFT", "${")
        monkeypatch.setenv("SLUMP_AUTOESCAPE", "no")
        config = load_config(str(path))
        assert config.delimiters.left == "${"
        assert config.delimiters.right == ">>"
        assert config.rendering.autoescape is False

    def test_invalid_delimiters_surface_on_use(self, tmp_path):
        path = tmp_path / "slump.json"
        path.write_text(json.dumps({"delimiters": {"left": "|", "right": "|"}}))
        config = load_config(str(path))
        with pytest.raises(DelimiterError):
            config.default_delimiters()

    def test_save_and_reload_json(self, tmp_path):
        config = SlumpConfig()
        config.delimiters.left = "<%"
        config.delimiters.right = "%>"
        path = tmp_path / "saved.json"
        config.save_config(str(path))

        reloaded = load_config(str(path))
        assert reloaded.to_dict() == config.to_dict()

    def test_save_yaml(self, tmp_path):
        path = tmp_path / "saved.yaml"
        SlumpConfig().save_config(str(path))
        data = yaml.safe_load(path.read_text())
        assert data["delimiters"] == {"left": "{", "right": "}"}

    def test_save_without_path(self):
        with pytest.raises(ConfigurationError):
            SlumpConfig().save_config()

    def test_quoted_booleans_in_yaml(self, tmp_path):
        path = tmp_path / "slump.yaml"
        path.write_text(
            "rendering:\n"
            "  autoescape: 'false'\n"
            "  trim_blocks: \"yes\"\n"
            "  keep_trailing_newline: \"no\"\n"
            "logging:\n"
            "  enable_file_logging: \"0\"\n"
        )
        config = load_config(str(path))
        assert config.rendering.autoescape is False
        assert config.rendering.trim_blocks is True
        assert config.rendering.keep_trailing_newline is False
        assert config.logging.enable_file_logging is False

    def test_apply_logging(self, tmp_path):
        path = tmp_path / "slump.json"
        path.write_text(json.dumps({"logging": {"level": "ERROR"}}))
        load_config(str(path)).apply_logging()
        assert logging.getLogger("slump").level == logging.ERROR
        SlumpConfig().apply_logging()
        assert logging.getLogger("slump").level == logging.WARNING


class TestGlobalConfig:
    """Test the process-wide configuration accessors."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config(self, tmp_path):
        config = SlumpConfig()
        set_config(config)
        assert get_config() is config

    def test_reset_config(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
