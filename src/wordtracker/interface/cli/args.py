from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed argparse
namespace into configuration overrides understood by the pipeline.

Usage:
    wordtracker <input.txt> -pf|-pl|-po [-f<output.txt>]
"""

import argparse
from typing import Any, Dict

from wordtracker.domain.constants import (
    MODE_DESCRIPTIONS,
    MODE_FILES,
    MODE_LINES,
    MODE_OCCURRENCES,
    SCOPE_ALL,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WordTracker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wordtracker",
        description="Index the words of a text file into a persistent word/line repository.",
    )

    # --- Source ---
    p.add_argument(
        "input_path",
        help="Text file to index. Its path, as given, identifies the source in the index.",
    )

    # --- Report Mode (mandatory) ---
    modes = p.add_mutually_exclusive_group(required=True)
    for mode in (MODE_FILES, MODE_LINES, MODE_OCCURRENCES):
        modes.add_argument(
            f"-{mode}",
            dest="mode",
            action="store_const",
            const=mode,
            help=MODE_DESCRIPTIONS[mode],
        )

    # --- Output ---
    p.add_argument(
        "-f",
        dest="output_path",
        metavar="OUTPUT",
        default=None,
        help="Write the report to OUTPUT (e.g. -freport.txt) instead of the console.",
    )
    p.add_argument(
        "--all-sources",
        action="store_true",
        help="Report every indexed word and file, not only the current input file.",
    )

    # --- Persistence ---
    p.add_argument(
        "--index",
        dest="index_path",
        default=None,
        help="Persisted index file (default: repository.json).",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored user configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Remember the index, scope and logging settings of this run as user configuration.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset optional arguments map to None so they never mask stored settings.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "mode": args.mode,
        "output_path": args.output_path,
        "index_path": args.index_path,
        "log_file": args.log_file,
        "report_scope": SCOPE_ALL if args.all_sources else None,
        "log_level": "DEBUG" if args.debug else None,
    }
    return overrides
