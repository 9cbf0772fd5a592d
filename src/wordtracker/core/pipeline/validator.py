from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the indexing pipeline: makes sure the configuration dictionary
conforms to the expected schema. Handles type coercion, choice validation and
default value injection so that the pipeline only ever sees clean values.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from wordtracker.domain.config import get_default_config
from wordtracker.domain.constants import REPORT_MODES, REPORT_SCOPES

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of
                falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          list of warnings produced.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a value outside its allowed choices.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Plain string fields
    string_fields = [
        "input_path", "output_path", "index_path", "log_file",
    ]
    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    # 3. Choice fields
    mode = _as_str(merged.get("mode"), "", "mode", warnings, strict).lower().lstrip("-")
    merged["mode"] = _as_choice(mode, REPORT_MODES, "", "mode", warnings, strict)

    scope = _as_str(merged.get("report_scope"), defaults["report_scope"], "report_scope", warnings, strict)
    merged["report_scope"] = _as_choice(
        scope.lower(), REPORT_SCOPES, defaults["report_scope"], "report_scope", warnings, strict
    )

    level = _as_str(merged.get("log_level"), defaults["log_level"], "log_level", warnings, strict)
    merged["log_level"] = _as_choice(
        level.upper(), _LOG_LEVELS, defaults["log_level"], "log_level", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: str,
        choices: Sequence[str],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Restrict a string to a closed set of values."""
    if value in choices or (value == "" and fallback == ""):
        return value

    msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
