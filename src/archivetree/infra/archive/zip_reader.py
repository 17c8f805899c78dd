from __future__ import annotations

"""
Zip Container Adapter.

Reads the central directory of a zip file into ArchiveEntry records. File
contents are not decompressed here; the ZipInfo kept as the entry handle is
enough to read a member later.
"""

import io
import logging
import zipfile
from typing import BinaryIO, Dict, Union

from archivetree.domain.errors import ArchiveReadError
from archivetree.domain.table_models import ArchiveEntry

logger = logging.getLogger(__name__)

ZipSource = Union[str, bytes, BinaryIO]


def read_zip_entries(source: ZipSource) -> Dict[str, ArchiveEntry]:
    """
    List every entry of a zip container, in central-directory order.

    Args:
        source: Path to the zip, its raw bytes, or a binary file object.

    Returns:
        Dict[str, ArchiveEntry]: Entries keyed by full entry path.

    Raises:
        ArchiveReadError: If the source is missing or not a valid zip.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        with zipfile.ZipFile(source) as zf:
            infos = zf.infolist()
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveReadError(f"Invalid zip container: {e}") from e
    except OSError as e:
        raise ArchiveReadError(f"Cannot open zip container: {e}") from e

    entries: Dict[str, ArchiveEntry] = {}
    for info in infos:
        entries[info.filename] = ArchiveEntry(
            path=info.filename,
            is_dir=info.is_dir(),
            handle=info,
        )

    logger.debug(f"Read {len(entries)} zip entries.")
    return entries
