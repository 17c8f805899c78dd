from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (stored JSON, CLI overrides) into the
typed values the tree layer expects. Invalid values fall back to defaults
and produce a warning instead of an error.
"""

import logging
from typing import Any, Dict, List, Tuple

from archivetree.core.routing.slugs import is_valid_tab_slug
from archivetree.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("origin", "tab_slug"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings)

    for field in ("expand_all", "show_urls", "log_to_file"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings)

    merged["max_expanded_nodes"] = _as_non_negative_int(
        merged.get("max_expanded_nodes"), defaults["max_expanded_nodes"],
        "max_expanded_nodes", warnings,
    )

    # Route token must be one the router knows
    if not is_valid_tab_slug(merged["tab_slug"]):
        warnings.append(
            f"Unknown tab slug '{merged['tab_slug']}'. Using '{defaults['tab_slug']}'."
        )
        merged["tab_slug"] = defaults["tab_slug"]

    merged["origin"] = merged["origin"].rstrip("/")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str]) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    warnings.append(
        f"Invalid field '{field}': expected str, received {type(value).__name__}. Using fallback."
    )
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str]) -> bool:
    """Coerce common boolean spellings."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback
    if isinstance(value, (int, float)) and value in (0, 1):
        warnings.append(f"Field '{field}' converted from number {value} to bool.")
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    warnings.append(
        f"Invalid field '{field}': expected bool, received {type(value).__name__}. Using fallback."
    )
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str]) -> int:
    if value is None:
        return fallback
    if isinstance(value, bool):
        warnings.append(f"Invalid field '{field}': expected int, received bool. Using fallback.")
        return fallback
    try:
        number = int(value)
    except (TypeError, ValueError):
        warnings.append(f"Invalid field '{field}': '{value}' is not an integer. Using fallback.")
        return fallback
    if isinstance(value, float) and value != number:
        warnings.append(f"Field '{field}' truncated from {value} to {number}.")
    if number < 0:
        warnings.append(f"Field '{field}' cannot be negative. Clamped to 0.")
        return 0
    return number
