from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the table builder, the hierarchy
view and the interface layers: sentinels, route tokens and defaults.
"""

from typing import FrozenSet

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE SENTINELS
# -----------------------------------------------------------------------------

# Parent value reported for root rows (call-tree compatible).
ROOT_PARENT = -1

# Cache key standing in for "no parent" in the children cache.
ROOT_KEY = -1

DEFAULT_MAX_EXPANDED_NODES = 30

# -----------------------------------------------------------------------------
# NAVIGATION
# -----------------------------------------------------------------------------

DEFAULT_ORIGIN = "http://localhost:4242"
FROM_URL_ROUTE = "from-url"
DEFAULT_TAB_SLUG = "calltree"

TAB_SLUGS: FrozenSet[str] = frozenset({
    "calltree",
    "flame-graph",
    "stack-chart",
    "marker-chart",
    "marker-table",
    "network-chart",
    "js-tracer",
})

# Characters left unescaped by JavaScript's encodeURIComponent, beyond
# the alphanumerics and "_.-~" that urllib always keeps.
URI_COMPONENT_SAFE = "!~*'()"
