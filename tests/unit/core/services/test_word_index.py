from __future__ import annotations

"""
Unit tests for the WordIndex aggregation service.

Verifies:
1. Query-then-append-or-insert behaviour.
2. Per-source separation of line lists.
3. Source-scoped and full in-order record views.
"""

from wordtracker.core.processing.tokenizer import iter_tokens
from wordtracker.core.services.word_index import WordIndex
from wordtracker.core.tree.bst import OrderedTree
from wordtracker.domain.occurrence import OccurrenceRecord


def test_first_occurrence_inserts_record() -> None:
    index = WordIndex()
    record = index.record("fox", "a.txt", 1)

    assert len(index) == 1
    assert record.occurrences == {"a.txt": [1]}
    assert index.lookup("fox") is record


def test_repeated_word_appends_to_existing_record() -> None:
    index = WordIndex()
    first = index.record("fox", "a.txt", 1)
    second = index.record("fox", "a.txt", 4)

    assert first is second
    assert len(index) == 1
    assert index.lookup("fox").lines_for("a.txt") == [1, 4]


def test_other_records_are_untouched() -> None:
    index = WordIndex()
    index.record("cat", "a.txt", 1)
    index.record("dog", "a.txt", 1)
    index.record("dog", "a.txt", 2)

    assert index.lookup("cat").occurrences == {"a.txt": [1]}
    assert index.lookup("dog").occurrences == {"a.txt": [1, 2]}


def test_lookup_miss_returns_none() -> None:
    index = WordIndex()
    index.record("cat", "a.txt", 1)
    assert index.lookup("dog") is None


def test_two_line_text_scenario() -> None:
    index = WordIndex()
    count = index.index_tokens(iter_tokens(["Cat dog.\n", "Dog cat!\n"], "s.txt"))

    assert count == 4
    assert index.lookup("cat").occurrences == {"s.txt": [1, 2]}
    assert index.lookup("dog").occurrences == {"s.txt": [1, 2]}


def test_sources_stay_separate() -> None:
    index = WordIndex()
    index.record("fox", "a.txt", 2)
    index.record("fox", "b.txt", 5)

    fox = index.lookup("fox")
    assert fox.occurrences == {"a.txt": [2], "b.txt": [5]}


def test_extends_existing_tree() -> None:
    tree: OrderedTree[OccurrenceRecord] = OrderedTree()
    tree.add(OccurrenceRecord.first_seen("fox", "a.txt", 1))

    index = WordIndex(tree)
    index.record("fox", "b.txt", 3)

    assert index.tree is tree
    assert tree.size() == 1
    assert tree.get_root().element.occurrences == {"a.txt": [1], "b.txt": [3]}


def test_record_views_are_sorted() -> None:
    index = WordIndex()
    for word, source in [("to", "a"), ("be", "b"), ("or", "a"), ("not", "b")]:
        index.record(word, source, 1)

    assert [r.word for r in index.records()] == ["be", "not", "or", "to"]
    assert [r.word for r in index.records_for_source("a")] == ["or", "to"]
    assert [r.word for r in index.records_for_source("zzz")] == []
