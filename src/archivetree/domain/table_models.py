from __future__ import annotations

"""
Archive Table Data Models.

Defines the columnar table produced from a flat archive listing, the
display record handed to renderers, and the entry record supplied by the
container decoder.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

# Row index into an ArchiveFileTable.
IndexIntoArchiveTable = int


# -----------------------------------------------------------------------------
# CONTAINER INPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ArchiveEntry:
    """
    One entry of a container listing.

    Attributes:
        path: Full entry path inside the container, '/' separated.
        is_dir: True when the container marks the entry as a directory.
        handle: Opaque decoder object used later to read the contents.
    """
    path: str
    is_dir: bool
    handle: Any = None


# -----------------------------------------------------------------------------
# COLUMNAR TABLE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ArchiveFileTable:
    """
    Hierarchical index over the file paths of a container.

    Each row is one unique path segment. Columns share the row index, which
    is the stable identity of that segment for the lifetime of the table.

    Attributes:
        prefix: Row index of the parent segment, or None for a root.
        path: Cumulative path up to and including the segment,
            e.g. "profile_tresize/tresize/cycle_0.profile".
        part_name: The segment itself, e.g. "cycle_0.profile".
        file: Entry handle for terminal segments, None for directories.
        depth: Zero-based nesting depth.
        length: Number of rows.
    """
    prefix: Tuple[Optional[IndexIntoArchiveTable], ...] = ()
    path: Tuple[str, ...] = ()
    part_name: Tuple[str, ...] = ()
    file: Tuple[Any, ...] = ()
    depth: Tuple[int, ...] = ()
    length: int = 0


# -----------------------------------------------------------------------------
# DISPLAY
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ArchiveDisplayData:
    """
    Per-node data consumed by tree renderers.

    Attributes:
        name: Segment name shown for the node.
        url: Navigable link for leaf files, None for nodes with children.
        index: Row index the data was derived from.
    """
    name: str
    url: Optional[str]
    index: IndexIntoArchiveTable
