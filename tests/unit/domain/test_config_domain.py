from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from wordtracker.domain.config import (
    PERSISTED_KEYS,
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_app_state,
    save_config,
)
from wordtracker.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_INDEX_FILENAME


@pytest.fixture
def mock_user_data_dir(tmp_path):
    """
    Redirect the user data directory into tmp_path.
    Prevents tests from reading/writing to the real OS user folder.
    """
    config_dir = tmp_path / "WordTracker"
    config_dir.mkdir()

    with patch("wordtracker.domain.config.get_user_data_dir", return_value=str(config_dir)):
        yield config_dir


def test_default_config_shape():
    cfg = get_default_config()

    assert cfg["index_path"] == DEFAULT_INDEX_FILENAME
    assert cfg["report_scope"] == "source"
    assert cfg["mode"] == ""
    assert set(PERSISTED_KEYS) <= set(cfg)

    state = get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION
    assert set(state["settings"]) == set(PERSISTED_KEYS)


def test_load_fresh_state_returns_defaults(mock_user_data_dir):
    assert not (mock_user_data_dir / "config.json").exists()

    state = load_app_state()

    assert state == get_default_app_state()


@pytest.mark.parametrize("content", ["{ invalid json", "[1, 2, 3]", '{"settings": "nope"}'])
def test_load_corrupted_file_returns_defaults(mock_user_data_dir, content):
    (mock_user_data_dir / "config.json").write_text(content, encoding="utf-8")

    state = load_app_state()

    assert state == get_default_app_state()


def test_unknown_keys_are_ignored(mock_user_data_dir):
    payload = {"version": "0.9", "settings": {"index_path": "idx.json", "input_path": "x.txt"}}
    (mock_user_data_dir / "config.json").write_text(json.dumps(payload), encoding="utf-8")

    state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["settings"]["index_path"] == "idx.json"
    assert "input_path" not in state["settings"]


def test_save_config_persists_only_settings(mock_user_data_dir):
    cfg = get_default_config()
    cfg.update({"index_path": "shared.json", "report_scope": "all", "input_path": "one-off.txt"})

    assert save_config(cfg) is True

    stored = json.loads((mock_user_data_dir / "config.json").read_text(encoding="utf-8"))
    assert stored["settings"]["index_path"] == "shared.json"
    assert "input_path" not in stored["settings"]

    loaded = load_config()
    assert loaded["index_path"] == "shared.json"
    assert loaded["report_scope"] == "all"
    assert loaded["input_path"] == ""


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")

    with patch("wordtracker.domain.config.get_user_data_dir", return_value=str(blocker / "sub")):
        assert save_app_state(get_default_app_state()) is False
