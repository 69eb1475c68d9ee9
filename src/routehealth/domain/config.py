from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last audit session using JSON in the user
data directory. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from routehealth.domain.constants import CURRENT_CONFIG_VERSION, MODE_CATEGORY
from routehealth.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILENAME = "config.json"

OUTPUT_TREE = "tree"
OUTPUT_OUTLINE = "outline"
OUTPUT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_TREE, OUTPUT_OUTLINE, OUTPUT_JSON)


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Discovery
        "workspace_path": os.getcwd(),
        "fallback_to_workspace": True,
        "projects": [],

        # Scanning
        "max_workers": 1,
        "extra_skip_dirs": [],

        # Presentation
        "tree_mode": MODE_CATEGORY,
        "output_format": OUTPUT_TREE,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the last saved session merged over defaults.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    defaults = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict) or not isinstance(data.get("last_session", {}), dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    defaults.update(data.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the provided config as the last session.

    Args:
        config: Configuration dictionary to save.
    """
    config_file = get_config_file()
    state = {"version": CURRENT_CONFIG_VERSION, "last_session": config}
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
