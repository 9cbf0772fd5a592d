from __future__ import annotations

"""
Word Index Service.

Folds (word, source, line) triples into an OrderedTree of OccurrenceRecord.
The tree itself refuses duplicates; this layer decides between appending to
an existing record and inserting a new one.
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from wordtracker.core.tree.bst import OrderedTree
from wordtracker.domain.occurrence import OccurrenceRecord

logger = logging.getLogger(__name__)

Token = Tuple[str, str, int]


class WordIndex:
    """
    Query-then-append-or-insert aggregation over an OrderedTree.
    """

    def __init__(self, tree: Optional[OrderedTree[OccurrenceRecord]] = None) -> None:
        """
        Args:
            tree: Existing tree to extend (e.g. loaded from the IndexStore).
                  A fresh empty tree is used when omitted.
        """
        self._tree: OrderedTree[OccurrenceRecord] = tree if tree is not None else OrderedTree()

    @property
    def tree(self) -> OrderedTree[OccurrenceRecord]:
        return self._tree

    def __len__(self) -> int:
        return self._tree.size()

    def record(self, word: str, source: str, line: int) -> OccurrenceRecord:
        """
        Register one occurrence of word.

        Args:
            word: Normalized word.
            source: Source identifier.
            line: 1-based line number.

        Returns:
            OccurrenceRecord: The record that now holds the occurrence.
        """
        node = self._tree.search(OccurrenceRecord.probe(word))
        if node is not None:
            node.element.add_occurrence(source, line)
            return node.element

        created = OccurrenceRecord.first_seen(word, source, line)
        self._tree.add(created)
        return created

    def index_tokens(self, tokens: Iterable[Token]) -> int:
        """
        Register every triple of the stream, in order.

        Returns:
            int: Number of triples consumed.
        """
        count = 0
        for word, source, line in tokens:
            self.record(word, source, line)
            count += 1
        logger.debug(f"WordIndex: Folded {count} tokens. Distinct words: {len(self)}.")
        return count

    def lookup(self, word: str) -> Optional[OccurrenceRecord]:
        node = self._tree.search(OccurrenceRecord.probe(word))
        return node.element if node is not None else None

    def records(self) -> Iterator[OccurrenceRecord]:
        """All records in ascending word order."""
        return self._tree.inorder()

    def records_for_source(self, source: str) -> Iterator[OccurrenceRecord]:
        """Records with at least one occurrence in source, ascending."""
        return (r for r in self._tree.inorder() if r.appears_in(source))
