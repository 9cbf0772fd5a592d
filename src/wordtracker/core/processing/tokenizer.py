from __future__ import annotations

"""
Word Tokenization.

Turns raw text lines into normalized word tokens: lower-cased runs of ASCII
letters, with apostrophes allowed inside a token during splitting and then
removed ("Don't" -> "dont"). Empty pieces are dropped.
"""

import re
from typing import Iterable, Iterator, List, Tuple

# Anything that is neither a letter nor an apostrophe separates tokens
_SEPARATOR_RE = re.compile(r"[^a-z']+")


def tokenize_line(line: str) -> List[str]:
    """
    Split one line of text into normalized words.

    Args:
        line: Raw text line (trailing newline allowed).

    Returns:
        List[str]: Words in order of appearance.
    """
    words: List[str] = []
    for piece in _SEPARATOR_RE.split(line.lower()):
        word = piece.replace("'", "")
        if word:
            words.append(word)
    return words


def iter_tokens(lines: Iterable[str], source: str) -> Iterator[Tuple[str, str, int]]:
    """
    Generate (word, source, line_number) triples over a stream of lines.

    Args:
        lines: Text lines, first line numbered 1.
        source: Source identifier attached to every triple.

    Yields:
        Tuple[str, str, int]: One triple per word occurrence.
    """
    for line_number, line in enumerate(lines, start=1):
        for word in tokenize_line(line):
            yield word, source, line_number
