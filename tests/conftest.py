from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts 'src' on the import path and provides the small archive listings
shared by the table, tree and CLI tests.
"""

import io
import os
import sys
import zipfile
from typing import Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from archivetree.domain.table_models import ArchiveEntry  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_paths() -> List[str]:
    """
    Three files sharing the 'a' directory.

    Expected rows: 0 a, 1 a/b, 2 a/b/c.txt, 3 a/b/d.txt, 4 a/e.txt
    """
    return ["a/b/c.txt", "a/b/d.txt", "a/e.txt"]


@pytest.fixture
def sample_entries(sample_paths) -> Dict[str, ArchiveEntry]:
    """Container listing for sample_paths including directory markers."""
    entries: Dict[str, ArchiveEntry] = {
        "a/": ArchiveEntry(path="a/", is_dir=True),
        "a/b/": ArchiveEntry(path="a/b/", is_dir=True),
    }
    for path in sample_paths:
        entries[path] = ArchiveEntry(path=path, is_dir=False, handle=f"handle:{path}")
    return entries


@pytest.fixture
def profile_zip_bytes() -> bytes:
    """A small zip resembling a set of captured profiling sessions."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr("profile_tresize/", "")
        zf.writestr("profile_tresize/tresize/cycle_0.profile", "{}")
        zf.writestr("profile_tresize/tresize/cycle_1.profile", "{}")
        zf.writestr("profile_tresize/README.txt", "notes")
        zf.writestr("summary.json", "{}")
    return buffer.getvalue()


@pytest.fixture
def profile_zip_path(tmp_path, profile_zip_bytes) -> str:
    path = tmp_path / "profiles.zip"
    path.write_bytes(profile_zip_bytes)
    return str(path)
