from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP clients used to acquire remote containers.
"""

from archivetree.infra.network.fetch_client import fetch_archive_bytes

__all__ = [
    "fetch_archive_bytes",
]
