from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate an
indexing run's outcome between the pipeline engine and the CLI.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Failure categories carried by IndexingResult.error_kind
ERROR_CONFIG = "config"
ERROR_SOURCE = "source"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexingResult:
    """
    Unified result object of one indexing run.

    Attributes:
        ok: Flag indicating the source was indexed.
        error: Descriptive message in case of failure.
        error_kind: Failure category ('config' or 'source'), empty on success.
        input_path: Source file that was read.
        source_id: Identifier recorded for the source's occurrences.
        mode: Report mode used ('pf', 'pl', 'po').
        report_scope: 'source' or 'all'.
        index_path: Location of the persisted index.
        tokens_indexed: Word occurrences folded during this run.
        distinct_words: Distinct words in the index after this run.
        report: Rendered report text.
        saved: Whether the index was persisted.
        save_error: Reason the index could not be persisted.
    """
    ok: bool
    error: str
    error_kind: str

    input_path: str
    source_id: str
    mode: str
    report_scope: str
    index_path: str

    tokens_indexed: int = 0
    distinct_words: int = 0
    report: str = ""

    saved: bool = False
    save_error: Optional[str] = None

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, error_kind: str, cfg: Dict[str, Any]) -> IndexingResult:
    """
    Create a failed indexing result. Nothing was persisted.

    Args:
        error: Detailed error description.
        error_kind: Failure category.
        cfg: The configuration used during the failed run.
    """
    return IndexingResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        input_path=cfg.get("input_path", ""),
        source_id=cfg.get("input_path", ""),
        mode=cfg.get("mode", ""),
        report_scope=cfg.get("report_scope", ""),
        index_path=cfg.get("index_path", ""),
    )


def create_success_result(
        cfg: Dict[str, Any],
        tokens_indexed: int,
        distinct_words: int,
        report: str,
        saved: bool,
        save_error: Optional[str] = None,
) -> IndexingResult:
    """
    Create a successful indexing result.

    A failed save still yields a successful result: the in-memory index and
    its report are valid, only persistence is missing.
    """
    return IndexingResult(
        ok=True,
        error="",
        error_kind="",
        input_path=cfg.get("input_path", ""),
        source_id=cfg.get("input_path", ""),
        mode=cfg.get("mode", ""),
        report_scope=cfg.get("report_scope", ""),
        index_path=cfg.get("index_path", ""),
        tokens_indexed=tokens_indexed,
        distinct_words=distinct_words,
        report=report,
        saved=saved,
        save_error=save_error,
    )
