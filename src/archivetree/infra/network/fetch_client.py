from __future__ import annotations

import logging
from typing import Optional

import requests

from archivetree.domain.errors import ArchiveFetchError
from archivetree.infra.network.common import CHUNK_SIZE, DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

# Refuse containers above this size (bytes)
MAX_ARCHIVE_BYTES = 512 * 1024 * 1024


def fetch_archive_bytes(
        url: str,
        timeout: int = DEFAULT_TIMEOUT,
        max_bytes: Optional[int] = MAX_ARCHIVE_BYTES,
) -> bytes:
    """Download a remote container into memory using buffered streaming."""
    headers = {"User-Agent": USER_AGENT}
    logger.info(f"Fetching archive from: {url}")

    try:
        with requests.get(url, headers=headers, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            buffer = bytearray()
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if not chunk:
                    continue
                buffer.extend(chunk)
                if max_bytes is not None and len(buffer) > max_bytes:
                    raise ArchiveFetchError(
                        f"Archive at {url} exceeds the {max_bytes} byte limit."
                    )
    except requests.exceptions.Timeout as e:
        raise ArchiveFetchError(f"Timed out after {timeout}s fetching {url}") from e
    except requests.exceptions.RequestException as e:
        raise ArchiveFetchError(f"Failed to fetch {url}: {e}") from e

    logger.info(f"Network: Archive downloaded ({len(buffer) / 1024:.1f} KB).")
    return bytes(buffer)
