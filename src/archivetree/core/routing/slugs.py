from __future__ import annotations

"""
Route Slug Validation.

Guards the closed set of tab slugs accepted by the viewer router.
"""

from archivetree.domain.constants import TAB_SLUGS
from archivetree.domain.errors import InvalidTabSlugError


def ensure_is_valid_tab_slug(slug: str) -> str:
    """
    Return the slug unchanged if the router recognises it.

    Raises:
        InvalidTabSlugError: If the slug is not a known tab.
    """
    if slug not in TAB_SLUGS:
        raise InvalidTabSlugError(slug)
    return slug


def is_valid_tab_slug(slug: str) -> bool:
    return slug in TAB_SLUGS
