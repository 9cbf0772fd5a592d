from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging initialization, merging of
configuration sources (defaults, stored settings, command-line overrides),
pipeline execution and report delivery to the console or a file.
"""

import sys
from typing import Any, Dict, List, Optional

from wordtracker.core.pipeline.components.writer import write_report
from wordtracker.core.pipeline.engine import run_indexing
from wordtracker.core.pipeline.validator import validate_config
from wordtracker.domain.config import get_default_config, load_config, save_config
from wordtracker.domain.pipeline_models import IndexingResult
from wordtracker.infra.logging import LoggingConfig, configure_logging, get_logger
from wordtracker.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code. 0 success (even if the index could not be
             saved), 1 report delivery or unexpected failure, 2 unreadable
             source or invalid configuration, 130 interrupted.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 3. Merge command-line overrides and normalize
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides), strict=False)

    # 4. Logging bootstrap (console on stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    )
    configure_logging(logging_conf)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config and not save_config(clean_conf):
        print("WARNING: Could not store user configuration.", file=sys.stderr)

    # 5. Pipeline execution phase
    try:
        result = run_indexing(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Indexing interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Indexing failed: {e}", exc_info=True)
        print(f"ERROR: Indexing failed: {e}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 2

    # 6. Output phase
    _report_persistence(result)
    return _deliver_report(result, clean_conf.get("output_path") or None)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Only known keys are merged.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _report_persistence(result: IndexingResult) -> None:
    if result.saved:
        print(_console_safe(f"{result.index_path} saved successfully."))
    else:
        print(f"WARNING: {result.save_error}", file=sys.stderr)


def _deliver_report(result: IndexingResult, output_path: Optional[str]) -> int:
    """
    Print the report, or write it to output_path.

    Returns:
        int: Exit code for the delivery step.
    """
    print(f"Displaying -{result.mode} format")

    if output_path is None:
        print(_console_safe(result.report), end="")
        print("Not exporting file.")
        return 0

    try:
        write_report(output_path, result.report)
    except OSError as e:
        logger.error(f"Error writing output file: {e}")
        print(f"ERROR: Error writing output file: {e}", file=sys.stderr)
        return 1

    print(_console_safe(f"Report exported to {output_path}"))
    return 0


def _console_safe(text: str) -> str:
    """Escape characters the console encoding cannot represent (e.g. surrogates)."""
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    return text.encode(encoding, errors="backslashreplace").decode(encoding)


if __name__ == "__main__":
    sys.exit(main())
