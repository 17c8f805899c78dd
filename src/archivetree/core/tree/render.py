from __future__ import annotations

"""
Archive Tree Renderer.

Converts the visible part of an ArchiveFileTree into ASCII lines using the
usual directory-listing connectors.
"""

from typing import Iterable, List, Optional, Set

from archivetree.core.tree.hierarchy import ArchiveFileTree
from archivetree.domain.table_models import IndexIntoArchiveTable

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_lines(
        tree: ArchiveFileTree,
        expanded: Iterable[IndexIntoArchiveTable],
        show_urls: bool = False,
) -> List[str]:
    """
    Render roots and the children of every expanded row.

    Rows with children get a trailing '/'. Collapsed rows with children are
    listed but not descended into. Order follows the table's discovery order.

    Args:
        tree: View to render.
        expanded: Rows whose children are visible.
        show_urls: Append the navigable URL of leaf rows.

    Returns:
        List[str]: Rendered lines.
    """
    lines: List[str] = []
    _render_level(tree, None, set(expanded), lines, "", show_urls)
    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_level(
        tree: ArchiveFileTree,
        parent: Optional[IndexIntoArchiveTable],
        expanded: Set[IndexIntoArchiveTable],
        lines: List[str],
        prefix: str,
        show_urls: bool,
) -> None:
    children = tree.get_children(parent)
    total = len(children)

    for i, index in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        data = tree.get_display_data(index)

        # Scenario A: Directory-like row
        if tree.has_children(index):
            lines.append(f"{prefix}{connector}{data.name}/")
            if index in expanded:
                new_prefix = prefix + ("    " if is_last else "│   ")
                _render_level(tree, index, expanded, lines, new_prefix, show_urls)
            continue

        # Scenario B: Leaf file
        if show_urls and data.url:
            lines.append(f"{prefix}{connector}{data.name}  <{data.url}>")
        else:
            lines.append(f"{prefix}{connector}{data.name}")
