from __future__ import annotations

"""
Report Formatting Component.

Renders index records as one text line each. Three detail levels are
supported: file names only, file names with line numbers, and file names
with line numbers plus the occurrence count.

Example (mode 'po'):
    Key : ===cat===  found in file: s.txt on line(s): [1, 2] (2 occurrences)
"""

from typing import Iterable, List, Optional

from wordtracker.domain.constants import MODE_FILES, MODE_OCCURRENCES, REPORT_MODES
from wordtracker.domain.occurrence import OccurrenceRecord

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_record(record: OccurrenceRecord, mode: str, source: Optional[str] = None) -> str:
    """
    Render a single record as one line (without trailing newline).

    Args:
        record: Record to render.
        mode: One of 'pf', 'pl', 'po'.
        source: Restrict the line to this source. All sources when None.

    Returns:
        str: The rendered line, or "" if the record has no occurrence in
             the requested source.

    Raises:
        ValueError: If mode is unknown.
    """
    if mode not in REPORT_MODES:
        raise ValueError(f"Unknown report mode '{mode}'. Expected one of {', '.join(REPORT_MODES)}.")

    if source is not None:
        if not record.appears_in(source):
            return ""
        sources = [source]
    else:
        sources = record.sources()

    if mode == MODE_FILES:
        detail = ", ".join(sources)
    else:
        detail = ", ".join(f"{s} on line(s): {record.lines_for(s)}" for s in sources)

    line = f"Key : ==={record.word}===  found in file: {detail}"

    if mode == MODE_OCCURRENCES:
        freq = sum(record.count(s) for s in sources)
        line += f" ({freq} occurrence{'s' if freq > 1 else ''})"

    return line


def render_report(
        records: Iterable[OccurrenceRecord],
        mode: str,
        source: Optional[str] = None,
) -> str:
    """
    Render many records, one line each, every line newline-terminated.

    Records absent from source (when given) are skipped.
    """
    lines: List[str] = []
    for record in records:
        formatted = format_record(record, mode, source)
        if formatted:
            lines.append(formatted + "\n")
    return "".join(lines)
