from __future__ import annotations

"""
Configuration Domain Management.

Persists viewer preferences as JSON in the user data directory and merges
them over the built-in defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from archivetree.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_MAX_EXPANDED_NODES,
    DEFAULT_ORIGIN,
    DEFAULT_TAB_SLUG,
)
from archivetree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Build the default viewer configuration.

    Returns:
        Dict[str, Any]: Fresh defaults.
    """
    return {
        # Navigation links
        "origin": DEFAULT_ORIGIN,
        "tab_slug": DEFAULT_TAB_SLUG,

        # Tree presentation
        "max_expanded_nodes": DEFAULT_MAX_EXPANDED_NODES,
        "expand_all": False,
        "show_urls": False,

        # Diagnostics
        "log_to_file": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the stored configuration merged over the defaults.

    Missing or corrupted files yield the defaults.
    """
    config = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    settings = data.get("settings", {})
    if isinstance(settings, dict):
        config.update({k: v for k, v in settings.items() if k in config})
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the configuration.

    Args:
        config: Settings to store; unknown keys are dropped.
    """
    defaults = get_default_config()
    state = {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: v for k, v in config.items() if k in defaults},
    }
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
