"""
Configuration Manager Tests
"""

import json

import pytest

from services.config_manager import DEFAULT_MAX_DIFF_BYTES, ConfigManager


def test_defaults_when_file_missing(config_dir):
    manager = ConfigManager.get_instance()

    assert manager.config_file == config_dir / "config.json"
    assert manager.get("server") == {"host": "0.0.0.0", "port": 8000}
    assert manager.max_diff_bytes() == DEFAULT_MAX_DIFF_BYTES


def test_singleton(config_dir):
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_save_and_reload(config_dir):
    ConfigManager.get_instance().save_config({"server": {"host": "127.0.0.1", "port": 9000}})
    ConfigManager.reset_instance()

    reloaded = ConfigManager.get_instance()

    assert reloaded.get("server") == {"host": "127.0.0.1", "port": 9000}
    assert json.loads((config_dir / "config.json").read_text())["server"]["port"] == 9000


def test_partial_file_is_filled_with_defaults(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps({"diff": {"maxDiffBytes": 512}}))

    config = ConfigManager.get_instance().get_config()

    assert config["diff"]["maxDiffBytes"] == 512
    assert config["server"]["port"] == 8000


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unreadable_file_falls_back_to_defaults(config_dir, content, capsys):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(content)

    manager = ConfigManager.get_instance()

    assert manager.max_diff_bytes() == DEFAULT_MAX_DIFF_BYTES
    assert "[ConfigManager]" in capsys.readouterr().out
