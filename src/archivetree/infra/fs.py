from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user directory where configuration and logs are kept.
"""

import os

APP_DIR_NAME = "ArchiveTree"
UNIX_APP_DIR_NAME = ".archivetree"


def get_user_data_dir() -> str:
    """
    Resolve (and create) the OS-specific application data directory.

    - Windows: %LOCALAPPDATA%/ArchiveTree
    - Linux/Mac: ~/.archivetree

    Returns:
        str: Absolute path to the directory.
    """
    path = ""
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def is_remote_source(source: str) -> bool:
    """True when the source names an http(s) URL rather than a local file."""
    return source.lower().startswith(("http://", "https://"))
