from __future__ import annotations

"""
Unit tests for the Archive Session lifecycle.

Verifies lazy view creation, reuse while open, and discarding of the view
(and its caches) when the container is replaced or closed.
"""

import pytest

from archivetree.core.services.session import ArchiveSession
from archivetree.domain.table_models import ArchiveEntry


def test_view_is_created_lazily_and_reused(sample_entries):
    session = ArchiveSession(sample_entries, "first.zip")

    assert session._tree is None
    tree = session.tree
    assert session.tree is tree
    assert tree.archive_url == "first.zip"
    assert tree.table is session.table


def test_replace_discards_view(sample_entries):
    session = ArchiveSession(sample_entries, "first.zip")
    old_tree = session.tree

    session.replace({"z.txt": ArchiveEntry(path="z.txt", is_dir=False)}, "second.zip")

    new_tree = session.tree
    assert new_tree is not old_tree
    assert not new_tree.has_same_node_ids(old_tree)
    assert new_tree.get_roots() == [0]
    assert new_tree.archive_url == "second.zip"


def test_close_releases_table(sample_entries):
    session = ArchiveSession(sample_entries, "first.zip")
    session.close()

    assert session.is_open is False
    assert session.max_depth() == 0
    with pytest.raises(RuntimeError):
        _ = session.tree


def test_initial_expansion_and_depth(sample_entries):
    session = ArchiveSession(sample_entries, "first.zip")

    assert session.initial_expansion() == [0, 1]
    assert session.max_depth() == 2
