from __future__ import annotations

"""
Core indexing pipeline.

Coordinates one indexing run:
1. Validates configuration.
2. Loads the persisted index (or starts empty).
3. Streams the source through the tokenizer into the word index.
4. Persists the updated index.
5. Renders the report for the requested mode and scope.

A source that cannot be read aborts the run before anything is persisted.
A failed save is recorded in the result but does not abort the run.
"""

import logging
from typing import Any, Dict, Optional

from wordtracker.core.pipeline.components.formatter import render_report
from wordtracker.core.pipeline.components.reader import stream_file_content
from wordtracker.core.pipeline.validator import validate_config
from wordtracker.core.processing.tokenizer import iter_tokens
from wordtracker.core.services.store import IndexStore
from wordtracker.core.services.word_index import WordIndex
from wordtracker.domain.constants import SCOPE_ALL
from wordtracker.domain.pipeline_models import (
    ERROR_CONFIG,
    ERROR_SOURCE,
    IndexingResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_indexing(
        config: Optional[Dict[str, Any]],
        *,
        store: Optional[IndexStore] = None,
) -> IndexingResult:
    """
    Execute a full indexing run.

    Args:
        config: The configuration dictionary (raw or partial).
        store: Optional persistence service. Built from 'index_path' if omitted.

    Returns:
        IndexingResult: Status, counters, persistence outcome and report.
    """
    logger.info("Indexing run started.")

    # -------------------------------------------------------------------------
    # 1) Config Validation
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = cfg["input_path"]
    mode = cfg["mode"]

    if not input_path:
        msg = "No input file given."
        logger.error(msg)
        return create_error_result(msg, ERROR_CONFIG, cfg)
    if not mode:
        msg = "No report mode given."
        logger.error(msg)
        return create_error_result(msg, ERROR_CONFIG, cfg)

    # -------------------------------------------------------------------------
    # 2) Index Loading
    # -------------------------------------------------------------------------
    if store is None:
        store = IndexStore(cfg["index_path"])
    index = WordIndex(store.load())

    # -------------------------------------------------------------------------
    # 3) Source Indexing
    # -------------------------------------------------------------------------
    try:
        tokens = iter_tokens(stream_file_content(input_path), source=input_path)
        tokens_indexed = index.index_tokens(tokens)
    except OSError as e:
        msg = f"Error reading input file: {e}"
        logger.error(msg)
        return create_error_result(msg, ERROR_SOURCE, cfg)

    logger.info(
        f"Indexed {tokens_indexed} word occurrences from {input_path}. "
        f"Distinct words: {len(index)}."
    )

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    saved, save_error = store.save(index.tree)
    if not saved:
        logger.warning("Index not persisted. Continuing with in-memory results.")

    # -------------------------------------------------------------------------
    # 5) Report Rendering
    # -------------------------------------------------------------------------
    if cfg["report_scope"] == SCOPE_ALL:
        report = render_report(index.records(), mode)
    else:
        report = render_report(index.records_for_source(input_path), mode, source=input_path)

    return create_success_result(
        cfg,
        tokens_indexed=tokens_indexed,
        distinct_words=len(index),
        report=report,
        saved=saved,
        save_error=save_error,
    )
