from __future__ import annotations

"""
Domain-wide constants: report modes, report scopes and storage defaults.
"""

from typing import Dict, Tuple

# -----------------------------------------------------------------------------
# REPORT MODES
# -----------------------------------------------------------------------------
MODE_FILES = "pf"
MODE_LINES = "pl"
MODE_OCCURRENCES = "po"

REPORT_MODES: Tuple[str, ...] = (MODE_FILES, MODE_LINES, MODE_OCCURRENCES)

MODE_DESCRIPTIONS: Dict[str, str] = {
    MODE_FILES: "Show file names only.",
    MODE_LINES: "Show file names with line numbers.",
    MODE_OCCURRENCES: "Show file names, line numbers and total occurrences.",
}

# -----------------------------------------------------------------------------
# REPORT SCOPES
# -----------------------------------------------------------------------------
SCOPE_SOURCE = "source"
SCOPE_ALL = "all"

REPORT_SCOPES: Tuple[str, ...] = (SCOPE_SOURCE, SCOPE_ALL)

# -----------------------------------------------------------------------------
# STORAGE & CONFIG
# -----------------------------------------------------------------------------
DEFAULT_INDEX_FILENAME = "repository.json"
CONFIG_FILENAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"
