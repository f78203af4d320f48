"""
Tests for history configuration loading.
"""

import json
import logging
import pytest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from selective_undo.errors import ConfigError
from selective_undo.common import HistoryConfig, DEFAULT_MAX_ACTIONS


def test_defaults():
    config = HistoryConfig()
    assert config.max_actions == DEFAULT_MAX_ACTIONS
    assert config.log_level == "WARNING"


@pytest.mark.parametrize("bad", [0, -3, "10", None])
def test_invalid_max_actions(bad):
    with pytest.raises(ValueError):
        HistoryConfig(max_actions=bad)


def test_invalid_log_level():
    with pytest.raises(ValueError):
        HistoryConfig(log_level="LOUD")


def test_log_level_is_normalized():
    assert HistoryConfig(log_level="debug").log_level == "DEBUG"


def test_save_and_load(tmp_path):
    path = str(tmp_path / "history.json")
    HistoryConfig(max_actions=12, log_level="INFO").save(path)

    loaded = HistoryConfig.load(path)
    assert loaded == HistoryConfig(max_actions=12, log_level="INFO")


def test_missing_file_gives_defaults(tmp_path):
    assert HistoryConfig.load(str(tmp_path / "nope.json")) == HistoryConfig()


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "history.json"
    path.write_text(json.dumps({"max_actions": 4, "theme": "dark"}))

    with caplog.at_level(logging.WARNING, logger="selective_undo"):
        config = HistoryConfig.load(str(path))
    assert config.max_actions == 4
    assert "theme" in caplog.text


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"max_actions": 0}'])
def test_bad_file_raises_config_error(tmp_path, content):
    path = tmp_path / "history.json"
    path.write_text(content)
    with pytest.raises(ConfigError):
        HistoryConfig.load(str(path))


def test_apply_log_level():
    HistoryConfig(log_level="ERROR").apply_log_level()
    assert logging.getLogger("selective_undo").level == logging.ERROR
    HistoryConfig().apply_log_level()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
