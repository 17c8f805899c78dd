from __future__ import annotations

"""
Archive Hierarchy View.

Wraps an ArchiveFileTable with the parent/child queries a tree widget needs.
Children lists and display records are derived lazily and memoized for the
lifetime of the view; the table itself is shared and never modified.
"""

import logging
from typing import Dict, List, Optional, Set
from urllib.parse import quote

from archivetree.core.routing.slugs import ensure_is_valid_tab_slug
from archivetree.domain.constants import (
    DEFAULT_ORIGIN,
    DEFAULT_TAB_SLUG,
    FROM_URL_ROUTE,
    ROOT_KEY,
    ROOT_PARENT,
    URI_COMPONENT_SAFE,
)
from archivetree.domain.table_models import (
    ArchiveDisplayData,
    ArchiveFileTable,
    IndexIntoArchiveTable,
)

logger = logging.getLogger(__name__)


class ArchiveFileTree:
    """
    Tree view over one archive table and the URL the archive was loaded from.

    Not safe for concurrent use: the caches are filled on read.
    """

    def __init__(
            self,
            table: ArchiveFileTable,
            archive_url: str,
            origin: str = DEFAULT_ORIGIN,
            tab_slug: str = DEFAULT_TAB_SLUG,
    ) -> None:
        """
        Args:
            table: Table produced by the builder.
            archive_url: Identifier of the container, embedded in leaf URLs.
            origin: Base origin of the viewer, e.g. "https://profiler.example".
            tab_slug: Route token used in leaf URLs.
        """
        self._table = table
        self._archive_url = archive_url
        self._origin = origin.rstrip("/")
        self._tab_slug = tab_slug
        self._parent_to_children: Dict[int, List[IndexIntoArchiveTable]] = {}
        self._display_data_by_index: Dict[IndexIntoArchiveTable, ArchiveDisplayData] = {}

        self._parent_to_children[ROOT_KEY] = self._compute_children(None)

    @property
    def table(self) -> ArchiveFileTable:
        return self._table

    @property
    def archive_url(self) -> str:
        return self._archive_url

    # -------------------------------------------------------------------------
    # STRUCTURE QUERIES
    # -------------------------------------------------------------------------

    def get_roots(self) -> List[IndexIntoArchiveTable]:
        return self.get_children(None)

    def get_children(
            self,
            index: Optional[IndexIntoArchiveTable],
    ) -> List[IndexIntoArchiveTable]:
        """
        Return the direct children of a row, or the roots for None.

        ROOT_PARENT (-1) is also accepted for the roots, so the value
        returned by get_parent can be passed straight back in.

        The first request for a parent scans the table once; the result is
        cached and returned as-is on later requests.
        """
        key = ROOT_KEY if index is None else index
        children = self._parent_to_children.get(key)
        if children is None:
            children = self._compute_children(index)
            self._parent_to_children[key] = children
        return children

    def index_all_children(self) -> None:
        """
        Fill the children cache for every row in a single pass.

        Lists already cached are kept. The new lists hold the same rows, in
        the same ascending order, as the per-parent scans would.
        """
        roots: List[IndexIntoArchiveTable] = []
        by_parent: Dict[int, List[IndexIntoArchiveTable]] = {
            i: [] for i in range(self._table.length)
        }
        for i, prefix in enumerate(self._table.prefix):
            (roots if prefix is None else by_parent[prefix]).append(i)

        by_parent[ROOT_KEY] = roots
        for key, children in by_parent.items():
            self._parent_to_children.setdefault(key, children)
        logger.debug(f"Indexed children for {self._table.length} rows.")

    def has_children(self, index: IndexIntoArchiveTable) -> bool:
        return len(self.get_children(index)) > 0

    def get_all_descendants(self, index: IndexIntoArchiveTable) -> Set[IndexIntoArchiveTable]:
        """
        Collect every row below the given one.

        Uses an explicit stack so very deep archives do not hit the
        recursion limit. The row itself is never included.
        """
        result: Set[IndexIntoArchiveTable] = set()
        stack = list(self.get_children(index))
        while stack:
            child = stack.pop()
            result.add(child)
            stack.extend(self.get_children(child))
        return result

    def get_parent(self, index: IndexIntoArchiveTable) -> IndexIntoArchiveTable:
        """Return the parent row, or ROOT_PARENT (-1) for a root."""
        self._check_index(index)
        prefix = self._table.prefix[index]
        return ROOT_PARENT if prefix is None else prefix

    def get_depth(self, index: IndexIntoArchiveTable) -> int:
        self._check_index(index)
        return self._table.depth[index]

    def has_same_node_ids(self, other: ArchiveFileTree) -> bool:
        """True when both views wrap the very same table instance."""
        return self._table is other._table

    # -------------------------------------------------------------------------
    # DISPLAY
    # -------------------------------------------------------------------------

    def get_display_data(self, index: IndexIntoArchiveTable) -> ArchiveDisplayData:
        """
        Return the cached display record for a row, deriving it on first use.

        Only rows without children get a URL; a directory holding a single
        file still has a child and stays non-navigable.

        Raises:
            InvalidTabSlugError: If the view was given an unknown tab slug.
            IndexError: If the row does not exist.
        """
        display_data = self._display_data_by_index.get(index)
        if display_data is None:
            self._check_index(index)
            url: Optional[str] = None
            if not self.has_children(index):
                url = self._build_file_url(self._table.path[index])

            display_data = ArchiveDisplayData(
                name=self._table.part_name[index],
                url=url,
                index=index,
            )
            self._display_data_by_index[index] = display_data
        return display_data

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _check_index(self, index: IndexIntoArchiveTable) -> None:
        """Reject rows outside the table, negative ones included."""
        if not 0 <= index < self._table.length:
            raise IndexError(f"Row {index} is outside the archive table.")

    def _compute_children(
            self,
            parent_index: Optional[IndexIntoArchiveTable],
    ) -> List[IndexIntoArchiveTable]:
        """Linear scan for rows whose prefix is the given parent."""
        prefix = self._table.prefix
        children = [i for i in range(self._table.length) if prefix[i] == parent_index]
        logger.debug(f"Computed {len(children)} children for parent {parent_index}.")
        return children

    def _build_file_url(self, path: str) -> str:
        return (
            f"{self._origin}/{FROM_URL_ROUTE}/"
            f"{_encode_uri_component(self._archive_url)}/"
            f"{ensure_is_valid_tab_slug(self._tab_slug)}"
            f"/?file={_encode_uri_component(path)}"
        )


def _encode_uri_component(value: str) -> str:
    """Percent-encode a value the way encodeURIComponent does."""
    return quote(value, safe=URI_COMPONENT_SAFE)
