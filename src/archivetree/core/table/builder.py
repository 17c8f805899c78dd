from __future__ import annotations

"""
Archive Table Builder.

Flattens the full entry paths of a container into a deduplicated columnar
table. Every distinct cumulative path becomes exactly one row, so paths that
share directories share the rows of those directories.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from archivetree.domain.table_models import (
    ArchiveEntry,
    ArchiveFileTable,
    IndexIntoArchiveTable,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_archive_table(entries: Mapping[str, ArchiveEntry]) -> ArchiveFileTable:
    """
    Build the table for a container listing.

    Directory entries are dropped first; their segments reappear implicitly
    as intermediate rows of the files they contain.

    Args:
        entries: Container listing keyed by full entry path, in listing order.
            The entry records themselves become the file handles of the table.

    Returns:
        ArchiveFileTable: The immutable table.
    """
    full_paths = [path for path, entry in entries.items() if not entry.is_dir]
    return build_archive_table(full_paths, entries)


def build_archive_table(
        full_paths: Iterable[str],
        lookup: Mapping[str, Any],
) -> ArchiveFileTable:
    """
    Assemble the table from ordered full paths in a single pass.

    Args:
        full_paths: File paths such as "profile_tresize/tresize/cycle_0.profile".
        lookup: Full path to file handle.

    Returns:
        ArchiveFileTable: The immutable table. Row order is discovery order.
    """
    prefix_col: List[Optional[IndexIntoArchiveTable]] = []
    path_col: List[str] = []
    part_name_col: List[str] = []
    file_col: List[Any] = []
    depth_col: List[int] = []

    # Shared across all full paths so common directories are reused.
    path_to_index: Dict[str, IndexIntoArchiveTable] = {}

    for full_path in full_paths:
        # Empty parts come from doubled, leading or trailing slashes.
        path_parts = [part for part in full_path.split("/") if part]

        path = ""
        prefix_index: Optional[IndexIntoArchiveTable] = None
        for i, path_part in enumerate(path_parts):
            path = f"{path}/{path_part}" if path else path_part

            existing_index = path_to_index.get(path)
            if existing_index is not None:
                prefix_index = existing_index
                continue

            index = len(path_col)
            prefix_col.append(prefix_index)
            path_col.append(path)
            part_name_col.append(path_part)
            depth_col.append(i)
            file_col.append(lookup.get(full_path) if i + 1 == len(path_parts) else None)

            path_to_index[path] = index
            prefix_index = index

    table = ArchiveFileTable(
        prefix=tuple(prefix_col),
        path=tuple(path_col),
        part_name=tuple(part_name_col),
        file=tuple(file_col),
        depth=tuple(depth_col),
        length=len(path_col),
    )
    logger.debug(
        f"Archive table built: {table.length} rows, "
        f"{sum(1 for p in table.prefix if p is None)} roots."
    )
    return table


def get_archive_max_depth(table: Optional[ArchiveFileTable]) -> int:
    """Return the deepest row depth, or 0 for a missing or empty table."""
    if table is None:
        return 0
    return max(table.depth, default=0)
