from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: argument parsing, exit codes, stream output and the
persisted index shared by consecutive runs.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "wordtracker" / "main.py"


def run_cli(args: List[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and points HOME into the
    working directory so the real user configuration is never touched.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(cwd)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    (tmp_path / "a.txt").write_text("The quick fox\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("a lazy dog\nand a sly Fox\n", encoding="utf-8")
    return tmp_path


def test_consecutive_runs_share_the_index(workspace: Path) -> None:
    first = run_cli(["a.txt", "-pl", "--use-defaults"], cwd=workspace)
    assert first.returncode == 0, first.stderr
    assert "repository.json saved successfully." in first.stdout

    second = run_cli(["b.txt", "-pl", "--use-defaults", "--all-sources"], cwd=workspace)
    assert second.returncode == 0, second.stderr
    assert (
        "Key : ===fox===  found in file: a.txt on line(s): [1], b.txt on line(s): [2]"
        in second.stdout
    )

    document = json.loads((workspace / "repository.json").read_text(encoding="utf-8"))
    assert document["size"] == 8


def test_export_to_file(workspace: Path) -> None:
    result = run_cli(["a.txt", "-po", "-freport.txt", "--use-defaults"], cwd=workspace)

    assert result.returncode == 0, result.stderr
    assert "Report exported to report.txt" in result.stdout
    assert (workspace / "report.txt").read_text(encoding="utf-8").splitlines() == [
        "Key : ===fox===  found in file: a.txt on line(s): [1] (1 occurrence)",
        "Key : ===quick===  found in file: a.txt on line(s): [1] (1 occurrence)",
        "Key : ===the===  found in file: a.txt on line(s): [1] (1 occurrence)",
    ]


def test_missing_mode_is_a_usage_error(workspace: Path) -> None:
    result = run_cli(["a.txt"], cwd=workspace)

    assert result.returncode == 2
    assert "usage" in result.stderr.lower()


def test_missing_source_exit_code(workspace: Path) -> None:
    result = run_cli(["nope.txt", "-pf", "--use-defaults"], cwd=workspace)

    assert result.returncode == 2
    assert "Error reading input file" in result.stderr
    assert not (workspace / "repository.json").exists()
