from __future__ import annotations

"""
Index Persistence Service.

Saves and restores the whole word index tree as a single JSON document so
that indexing accumulates across independent runs. The document carries a
format tag and a schema version; records are written in pre-order, which
re-inserted into an empty tree rebuilds the exact same shape.

Designed to fail soft: a missing or unreadable index degrades to an empty
tree and a failed save is reported to the caller instead of raised.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Optional, Tuple

from wordtracker.core.tree.bst import OrderedTree
from wordtracker.domain.constants import DEFAULT_INDEX_FILENAME
from wordtracker.domain.occurrence import OccurrenceRecord
from wordtracker.infra.fs import ensure_parent_dir, normalize_path

logger = logging.getLogger(__name__)

FORMAT_TAG = "wordtracker-index"
SCHEMA_VERSION = 1


class IndexStore:
    """
    File-backed persistence for OrderedTree[OccurrenceRecord].
    """

    def __init__(self, path: str) -> None:
        """
        Args:
            path: Location of the persisted index file. User (~) and
                  environment variable shortcuts are expanded.
        """
        self._path = normalize_path(path, DEFAULT_INDEX_FILENAME)
        self.last_error: Optional[str] = None

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.isfile(self._path)

    # -------------------------------------------------------------------------
    # Load
    # -------------------------------------------------------------------------

    def load(self) -> OrderedTree[OccurrenceRecord]:
        """
        Restore the persisted tree.

        Returns:
            OrderedTree[OccurrenceRecord]: The stored tree, or an empty tree
            when nothing is stored or the stored document cannot be decoded.
        """
        self.last_error = None

        if not self.exists():
            logger.debug(f"IndexStore: No index at {self._path}. Starting fresh.")
            return OrderedTree()

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                document = json.load(f)
            tree = decode_tree(document)
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors.
            # Deeply nested garbage exhausts the decoder stack.
            self.last_error = str(e)
            logger.warning(f"IndexStore: Could not load index {self._path}: {e}. Starting fresh.")
            return OrderedTree()

        logger.info(f"IndexStore: Loaded {tree.size()} words from {self._path}")
        return tree

    # -------------------------------------------------------------------------
    # Save
    # -------------------------------------------------------------------------

    def save(self, tree: OrderedTree[OccurrenceRecord]) -> Tuple[bool, Optional[str]]:
        """
        Persist the full tree, replacing any previous content.

        The document is written to a temporary sibling file first and then
        moved over the target, so an interrupted save leaves the previous
        index intact. Non-ASCII text, including undecodable file names
        carried as surrogate escapes, is written as JSON \\u escapes.

        Args:
            tree: The tree to persist.

        Returns:
            Tuple[bool, Optional[str]]: (Success flag, Error message if any).
        """
        document = encode_tree(tree)
        tmp_path: Optional[str] = None

        try:
            parent = ensure_parent_dir(self._path)
            fd, tmp_path = tempfile.mkstemp(prefix=".wordtracker-", suffix=".tmp", dir=parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f)
            os.replace(tmp_path, self._path)
            tmp_path = None
        except (OSError, ValueError) as e:
            msg = f"Could not save index {self._path}: {e}"
            logger.error(f"IndexStore: {msg}")
            return False, msg
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.info(f"IndexStore: Saved {tree.size()} words to {self._path}")
        return True, None


# -----------------------------------------------------------------------------
# DOCUMENT CODEC
# -----------------------------------------------------------------------------

def encode_tree(tree: OrderedTree[OccurrenceRecord]) -> Dict[str, Any]:
    """Build the versioned JSON document for tree (records in pre-order)."""
    records: List[Dict[str, Any]] = [record.to_dict() for record in tree.preorder()]
    return {
        "format": FORMAT_TAG,
        "version": SCHEMA_VERSION,
        "size": len(records),
        "records": records,
    }


def decode_tree(document: Any) -> OrderedTree[OccurrenceRecord]:
    """
    Rebuild a tree from a document produced by encode_tree().

    Raises:
        ValueError: If the document is not a supported index document.
    """
    if not isinstance(document, dict):
        raise ValueError("Index document must be a JSON object.")
    if document.get("format") != FORMAT_TAG:
        raise ValueError(f"Unknown index format {document.get('format')!r}.")
    if document.get("version") != SCHEMA_VERSION:
        raise ValueError(f"Unsupported index version {document.get('version')!r}.")

    raw_records = document.get("records")
    if not isinstance(raw_records, list):
        raise ValueError("Index document has no record list.")

    tree: OrderedTree[OccurrenceRecord] = OrderedTree()
    for raw in raw_records:
        record = OccurrenceRecord.from_dict(raw)
        if not tree.add(record):
            raise ValueError(f"Duplicate word {record.word!r} in index document.")

    declared = document.get("size")
    if declared is not None and declared != tree.size():
        raise ValueError(f"Index declares {declared} records but holds {tree.size()}.")
    return tree
