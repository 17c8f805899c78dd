from __future__ import annotations

"""
Archive Session Service.

Owns the table and view for the container currently open. The table is built
once per loaded container; the view is created on first use and dropped
whenever the container is closed or replaced, which also drops its caches.
"""

import logging
from typing import List, Mapping, Optional

from archivetree.core.table.builder import create_archive_table, get_archive_max_depth
from archivetree.core.tree.expansion import procure_initial_expanded_nodes
from archivetree.core.tree.hierarchy import ArchiveFileTree
from archivetree.domain.constants import (
    DEFAULT_MAX_EXPANDED_NODES,
    DEFAULT_ORIGIN,
    DEFAULT_TAB_SLUG,
)
from archivetree.domain.table_models import (
    ArchiveEntry,
    ArchiveFileTable,
    IndexIntoArchiveTable,
)

logger = logging.getLogger(__name__)


class ArchiveSession:
    """
    Lifecycle holder for one open container.

    Single owner: callers on other threads must not share a session.
    """

    def __init__(
            self,
            entries: Mapping[str, ArchiveEntry],
            archive_url: str,
            origin: str = DEFAULT_ORIGIN,
            tab_slug: str = DEFAULT_TAB_SLUG,
    ) -> None:
        self._origin = origin
        self._tab_slug = tab_slug
        self._archive_url = archive_url
        self._table: Optional[ArchiveFileTable] = create_archive_table(entries)
        self._tree: Optional[ArchiveFileTree] = None
        logger.info(f"Archive session opened for {archive_url} ({self._table.length} rows).")

    @property
    def is_open(self) -> bool:
        return self._table is not None

    @property
    def archive_url(self) -> str:
        return self._archive_url

    @property
    def table(self) -> ArchiveFileTable:
        if self._table is None:
            raise RuntimeError("Archive session is closed.")
        return self._table

    @property
    def tree(self) -> ArchiveFileTree:
        """The view for the open container, created on first access."""
        table = self.table
        if self._tree is None:
            self._tree = ArchiveFileTree(
                table,
                self._archive_url,
                origin=self._origin,
                tab_slug=self._tab_slug,
            )
        return self._tree

    def max_depth(self) -> int:
        return get_archive_max_depth(self._table)

    def initial_expansion(
            self,
            max_expanded_nodes: int = DEFAULT_MAX_EXPANDED_NODES,
    ) -> List[IndexIntoArchiveTable]:
        return procure_initial_expanded_nodes(self.tree, max_expanded_nodes)

    def replace(self, entries: Mapping[str, ArchiveEntry], archive_url: str) -> None:
        """Load a different container, discarding the previous view."""
        self._table = create_archive_table(entries)
        self._archive_url = archive_url
        self._tree = None
        logger.info(f"Archive session replaced with {archive_url} ({self._table.length} rows).")

    def close(self) -> None:
        self._table = None
        self._tree = None
        logger.debug(f"Archive session closed for {self._archive_url}.")
