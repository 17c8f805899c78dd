from __future__ import annotations

USER_AGENT = "ArchiveTree-Client/1.0.0"
DEFAULT_TIMEOUT = 10
CHUNK_SIZE = 8192
