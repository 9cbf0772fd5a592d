from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample sources.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_source(tmp_path: Path) -> Path:
    """Two-line source where 'cat' and 'dog' each appear once per line."""
    path = tmp_path / "s.txt"
    path.write_text("Cat dog.\nDog cat!\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_config_dict(tmp_path: Path, sample_source: Path) -> Dict[str, Any]:
    """
    Return a valid, complete run configuration pointing inside tmp_path.

    Reflects the structure defined in 'wordtracker.domain.config'.
    """
    return {
        "input_path": str(sample_source),
        "mode": "pl",
        "output_path": "",
        "index_path": str(tmp_path / "repository.json"),
        "report_scope": "source",
        "log_level": "INFO",
        "log_file": "",
    }
