from __future__ import annotations

"""
Word Occurrence Data Model.

Defines the element stored in the word index tree: a word together with the
line numbers where it was seen, grouped by source file. Ordering and equality
only ever look at the word, so a record can be located in the tree with a
bare probe carrying nothing but the word.
"""

from functools import total_ordering
from typing import Any, Dict, List, Optional


@total_ordering
class OccurrenceRecord:
    """
    Aggregated occurrences of one word.

    Attributes:
        word: Normalized word, the comparison key.
    """

    __slots__ = ("_word", "_occurrences")

    def __init__(self, word: str, occurrences: Optional[Dict[str, List[int]]] = None) -> None:
        """
        Args:
            word: Normalized, non-empty word.
            occurrences: Optional initial mapping of source id -> line numbers.

        Raises:
            ValueError: If word is not a non-empty string.
        """
        if not isinstance(word, str) or not word:
            raise ValueError(f"Word must be a non-empty string, received {word!r}.")
        self._word = word
        self._occurrences: Dict[str, List[int]] = {}
        for source, lines in (occurrences or {}).items():
            for line in lines:
                self.add_occurrence(source, line)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def first_seen(cls, word: str, source: str, line: int) -> "OccurrenceRecord":
        """Build a record seeded with a single occurrence."""
        record = cls(word)
        record.add_occurrence(source, line)
        return record

    @classmethod
    def probe(cls, word: str) -> "OccurrenceRecord":
        """Build an empty record used only to look a word up."""
        return cls(word)

    # -------------------------------------------------------------------------
    # Payload
    # -------------------------------------------------------------------------

    @property
    def word(self) -> str:
        return self._word

    @property
    def occurrences(self) -> Dict[str, List[int]]:
        """Copy of the source id -> line numbers mapping."""
        return {source: list(lines) for source, lines in self._occurrences.items()}

    def add_occurrence(self, source: str, line: int) -> None:
        """
        Append a line number to the list kept for source.

        Lines are stored in call order; no sorting or de-duplication.

        Raises:
            ValueError: If source is empty or line is not a positive int.
        """
        if not isinstance(source, str) or not source:
            raise ValueError(f"Source must be a non-empty string, received {source!r}.")
        if isinstance(line, bool) or not isinstance(line, int) or line < 1:
            raise ValueError(f"Line number must be a positive integer, received {line!r}.")
        self._occurrences.setdefault(source, []).append(line)

    def sources(self) -> List[str]:
        """Source ids in the order they were first seen."""
        return list(self._occurrences)

    def lines_for(self, source: str) -> List[int]:
        return list(self._occurrences.get(source, []))

    def appears_in(self, source: str) -> bool:
        return source in self._occurrences

    def count(self, source: Optional[str] = None) -> int:
        """Number of occurrences in source, or across all sources if None."""
        if source is not None:
            return len(self._occurrences.get(source, []))
        return sum(len(lines) for lines in self._occurrences.values())

    # -------------------------------------------------------------------------
    # Ordering (word only)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccurrenceRecord):
            return NotImplemented
        return self._word == other._word

    def __lt__(self, other: "OccurrenceRecord") -> bool:
        if not isinstance(other, OccurrenceRecord):
            return NotImplemented
        return self._word < other._word

    def __hash__(self) -> int:
        return hash(self._word)

    def __repr__(self) -> str:
        return f"OccurrenceRecord(word={self._word!r}, sources={len(self._occurrences)})"

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self._word, "occurrences": self.occurrences}

    @classmethod
    def from_dict(cls, data: Any) -> "OccurrenceRecord":
        """
        Rebuild a record from its to_dict() form.

        Raises:
            ValueError: If the structure or any field is malformed.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Record must be an object, received {type(data).__name__}.")

        occurrences = data.get("occurrences")
        if not isinstance(occurrences, dict):
            raise ValueError(f"Record {data.get('word')!r} has no occurrence mapping.")
        for source, lines in occurrences.items():
            if not isinstance(lines, list):
                raise ValueError(f"Lines for source {source!r} must be a list.")

        return cls(data.get("word"), occurrences)  # type: ignore[arg-type]
