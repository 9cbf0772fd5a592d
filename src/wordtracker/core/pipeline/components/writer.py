from __future__ import annotations

"""
Report Output Component.

Handles the physical persistence of a rendered report.
"""

from wordtracker.infra.fs import ensure_parent_dir

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_report(output_path: str, text: str) -> None:
    """
    Create or overwrite output_path with text.

    Undecodable file names carried as surrogate escapes are written back
    as their original bytes.

    Args:
        output_path: Target file.
        text: Rendered report.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    ensure_parent_dir(output_path)
    with open(output_path, "w", encoding="utf-8", errors="surrogateescape") as out:
        out.write(text)
