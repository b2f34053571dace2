"""Tests for configuration management."""

import json

import pytest
from pydantic import ValidationError

from taskshelf.config import Config, ConfigManager, get_config_manager


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.workspace.default_section_title == "Inbox"
    assert config.output.format == "table"
    assert config.logging.level == "INFO"
    assert config.logging.enabled is True


def test_config_manager_uses_isolated_dir(isolated_dirs):
    manager = ConfigManager(profile="test")
    assert manager.config_dir == isolated_dirs / "config"
    assert manager.config_file.name == "test.json"


def test_config_save_load(isolated_dirs):
    """Values written by one manager are read back by another."""
    manager = ConfigManager(profile="test")
    manager.set("output.format", "json")
    assert manager.get("output.format") == "json"

    reloaded = ConfigManager(profile="test")
    assert reloaded.get("output.format") == "json"
    assert "test" in reloaded.list_profiles()


def test_set_unknown_key_raises(isolated_dirs):
    manager = ConfigManager()
    with pytest.raises(KeyError):
        manager.set("output.colour", True)


def test_set_invalid_value_raises(isolated_dirs):
    manager = ConfigManager()
    with pytest.raises(ValidationError):
        manager.set("output.format", "xml")
    assert manager.get("output.format") == "table"


def test_reset_single_key(isolated_dirs):
    manager = ConfigManager()
    manager.set("workspace.default_section_title", "Start")
    manager.reset("workspace.default_section_title")
    assert manager.get("workspace.default_section_title") == "Inbox"


def test_reset_everything(isolated_dirs):
    manager = ConfigManager()
    manager.set("logging.level", "DEBUG")
    manager.reset()
    assert manager.config == Config()


def test_corrupted_file_falls_back_to_defaults(isolated_dirs):
    manager = ConfigManager()
    manager.config_file.write_text("{not json")
    assert manager.load_config() == Config()


def test_saved_file_is_json(isolated_dirs):
    manager = ConfigManager()
    manager.set("output.color", False)
    data = json.loads(manager.config_file.read_text())
    assert data["output"]["color"] is False


def test_get_config_manager_caches_per_profile(isolated_dirs):
    first = get_config_manager("default")
    assert get_config_manager("default") is first
    assert get_config_manager("other") is not first


def test_log_level_is_normalized(isolated_dirs):
    manager = ConfigManager()
    manager.set("logging.level", "debug")
    assert manager.get("logging.level") == "DEBUG"


def test_unknown_log_level_rejected(isolated_dirs):
    manager = ConfigManager()
    with pytest.raises(ValidationError):
        manager.set("logging.level", "verbose")
    assert manager.get("logging.level") == "INFO"


def test_unknown_log_level_in_file_falls_back_to_defaults(isolated_dirs):
    manager = ConfigManager()
    manager.config_file.write_text(json.dumps({"logging": {"level": "verbose"}}))
    assert manager.load_config() == Config()
