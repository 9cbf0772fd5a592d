from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates data directory resolution, path normalization and parent
directory preparation.
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from wordtracker.infra.fs import ensure_parent_dir, get_user_data_dir, normalize_path

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """%LOCALAPPDATA% is used on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "WordTracker" in path


def test_get_user_data_dir_unix() -> None:
    """~/.wordtracker is used on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.wordtracker")


def test_get_user_data_dir_tolerates_read_only_home(caplog) -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/readonly"):
            with patch("os.makedirs", side_effect=PermissionError("read-only")):
                with caplog.at_level(logging.DEBUG, logger="wordtracker.infra.fs"):
                    assert get_user_data_dir().endswith(".wordtracker")

    assert any("read-only" in r.getMessage() for r in caplog.records)


def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/index.json", fallback="repository.json")
        assert path.endswith(os.path.join("my_folder", "index.json"))
        assert os.path.isabs(path)


def test_normalize_path_fallback() -> None:
    assert normalize_path("   ", fallback="repository.json") == os.path.abspath("repository.json")
    assert normalize_path(None, fallback="repository.json") == os.path.abspath("repository.json")

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_ensure_parent_dir_creates_hierarchy(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "file.json"

    parent = ensure_parent_dir(str(target))

    assert parent == str(target.parent)
    assert target.parent.is_dir()
    assert not target.exists()


def test_ensure_parent_dir_blocked_by_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(OSError):
        ensure_parent_dir(str(blocker / "file.json"))
