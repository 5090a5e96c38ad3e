import json

import pytest

from utils.config import BotConfig, ConfigManager


def test_missing_config_writes_defaults(tmp_path):
    path = tmp_path / "config.json"
    manager = ConfigManager(config_path=str(path))

    assert manager.config == BotConfig()
    assert json.loads(path.read_text(encoding="utf-8"))["max_dice_count"] == 1000


def test_load_existing_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_dice_count": 50, "log_level": "DEBUG", "guilds": {}}), encoding="utf-8")

    manager = ConfigManager(config_path=str(path))

    assert manager.config.max_dice_count == 50
    assert manager.config.log_level == "DEBUG"
    assert manager.config.command_prefix == "!"


def test_set_config_persists(tmp_path):
    path = tmp_path / "config.json"
    manager = ConfigManager(config_path=str(path))
    manager.set_config(BotConfig(command_prefix="?"))

    assert ConfigManager(config_path=str(path)).config.command_prefix == "?"


def test_invalid_dice_limit():
    with pytest.raises(ValueError):
        BotConfig(max_dice_count=0)


def test_dice_limit_below_digit_cap():
    assert BotConfig(max_dice_count=999_999_999).max_dice_count == 999_999_999
    with pytest.raises(ValueError):
        BotConfig(max_dice_count=1_000_000_000)
