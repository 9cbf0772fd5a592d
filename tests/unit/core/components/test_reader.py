from __future__ import annotations

"""
Unit tests for the source reader component.
"""

from pathlib import Path

import pytest

from wordtracker.core.pipeline.components.reader import stream_file_content


def test_stream_yields_lines(tmp_path: Path) -> None:
    f = tmp_path / "in.txt"
    f.write_text("first\nsecond\n", encoding="utf-8")

    assert list(stream_file_content(str(f))) == ["first\n", "second\n"]


def test_invalid_bytes_are_replaced(tmp_path: Path) -> None:
    f = tmp_path / "in.txt"
    f.write_bytes(b"good \xff\xfe word\n")

    lines = list(stream_file_content(str(f)))
    assert len(lines) == 1
    assert lines[0].startswith("good ")
    assert lines[0].endswith(" word\n")


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        list(stream_file_content(str(tmp_path / "missing.txt")))
