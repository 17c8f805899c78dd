from __future__ import annotations

"""
Initial Expansion Heuristic.

Chooses which nodes start expanded when an archive is first shown, so that
the user sees some structure without being handed a wall of entries.
"""

from typing import List

from archivetree.core.tree.hierarchy import ArchiveFileTree
from archivetree.domain.constants import DEFAULT_MAX_EXPANDED_NODES
from archivetree.domain.table_models import IndexIntoArchiveTable


def procure_initial_expanded_nodes(
        tree: ArchiveFileTree,
        max_expanded_nodes: int = DEFAULT_MAX_EXPANDED_NODES,
) -> List[IndexIntoArchiveTable]:
    """
    Pick the rows to expand initially.

    Roots are always expanded. Their children are then expanded in order
    while the number of visible rows is below the limit. The limit is
    checked before each expansion, so the final count may exceed it.

    Args:
        tree: View over the archive table.
        max_expanded_nodes: Soft cap on visible rows.

    Returns:
        List[int]: Roots followed by the second-level rows chosen.
    """
    roots = tree.get_roots()

    children: List[IndexIntoArchiveTable] = []
    for index in roots:
        children.extend(tree.get_children(index))

    node_count = len(roots) + len(children)
    expansions = list(roots)
    for child_index in children:
        if node_count >= max_expanded_nodes:
            break
        sub_children = tree.get_children(child_index)
        if sub_children:
            expansions.append(child_index)
            node_count += len(sub_children)

    return expansions
