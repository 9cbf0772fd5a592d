from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory, and produces the per-run configuration dictionary consumed by
the indexing pipeline. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from wordtracker.domain.constants import (
    CONFIG_FILENAME,
    CURRENT_CONFIG_VERSION,
    DEFAULT_INDEX_FILENAME,
    SCOPE_SOURCE,
)
from wordtracker.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# Keys that survive between runs. Everything else is per-invocation.
PERSISTED_KEYS = ("index_path", "report_scope", "log_level", "log_file")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration for one indexing run.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Run inputs
        "input_path": "",
        "mode": "",
        "output_path": "",

        # Persistence
        "index_path": DEFAULT_INDEX_FILENAME,

        # Reporting
        "report_scope": SCOPE_SOURCE,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the full structure stored in config.json.
    """
    defaults = get_default_config()
    return {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: defaults[k] for k in PERSISTED_KEYS},
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()
    config_file = get_config_path()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict) or not isinstance(data.get("settings", {}), dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    # Merge with defaults so keys added in newer versions exist
    state = default_state
    for key, value in data.get("settings", {}).items():
        if key in PERSISTED_KEYS:
            state["settings"][key] = value

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    config_file = get_config_path()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the run configuration: defaults overlaid with stored settings.
    """
    state = load_app_state()
    config = get_default_config()
    config.update(state.get("settings", {}))
    return config


def save_config(config: Dict[str, Any]) -> bool:
    """
    Store the persistable subset of config as the user's settings.
    """
    state = load_app_state()
    for key in PERSISTED_KEYS:
        if key in config:
            state["settings"][key] = config[key]
    return save_app_state(state)
