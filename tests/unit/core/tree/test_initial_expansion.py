from __future__ import annotations

"""
Unit tests for the Initial Expansion Heuristic.
"""

from archivetree.core.table.builder import build_archive_table
from archivetree.core.tree.expansion import procure_initial_expanded_nodes
from archivetree.core.tree.hierarchy import ArchiveFileTree


def _tree(paths):
    return ArchiveFileTree(build_archive_table(paths, {p: p for p in paths}), "x.zip")


def test_sample_tree_expands_nested_directory(sample_paths):
    tree = _tree(sample_paths)

    assert procure_initial_expanded_nodes(tree) == [0, 1]


def test_zero_budget_still_expands_roots(sample_paths):
    tree = _tree(sample_paths + ["z/y.txt"])

    assert procure_initial_expanded_nodes(tree, max_expanded_nodes=0) == tree.get_roots()


def test_budget_is_checked_before_expanding():
    """The count may overshoot: 'd1' is expanded although it adds five rows."""
    paths = [f"r/d1/f{i}" for i in range(5)] + [f"r/d2/f{i}" for i in range(5)]
    tree = _tree(paths)
    r, d1 = 0, 1

    assert procure_initial_expanded_nodes(tree, max_expanded_nodes=4) == [r, d1]


def test_leaf_candidates_do_not_consume_budget():
    tree = _tree(["r/x.txt", "r/d/f.txt"])
    # rows: 0 r, 1 r/x.txt, 2 r/d, 3 r/d/f.txt

    assert procure_initial_expanded_nodes(tree, max_expanded_nodes=4) == [0, 2]


def test_root_leaves_are_listed_as_expanded():
    tree = _tree(["top.txt", "dir/inner/file.txt"])

    assert procure_initial_expanded_nodes(tree) == [0, 1, 2]


def test_empty_tree():
    assert procure_initial_expanded_nodes(_tree([])) == []
