from __future__ import annotations

"""
Domain Error Taxonomy.

The core performs no I/O, so the only error it raises itself is a caller
contract violation on the route token. The remaining classes are raised by
the infrastructure adapters that feed the core.
"""


class ArchiveTreeError(Exception):
    """Base class for every error raised by archivetree."""


class InvalidTabSlugError(ArchiveTreeError, ValueError):
    """Raised when a route token is not one of the recognised tab slugs."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Unrecognised tab slug: {slug!r}")
        self.slug = slug


class ArchiveReadError(ArchiveTreeError):
    """The container could not be opened or its listing could not be read."""


class ArchiveFetchError(ArchiveTreeError):
    """The remote container could not be downloaded."""
