from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Declares the command line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from archivetree.domain.constants import TAB_SLUGS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the archivetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="archivetree",
        description="Browse the file hierarchy of a zip archive.",
    )

    p.add_argument(
        "source",
        help="Path to a zip archive or an http(s) URL serving one.",
    )

    # --- Navigation links ---
    p.add_argument(
        "--origin",
        default=None,
        help="Base origin used to build file links.",
    )
    p.add_argument(
        "--tab",
        dest="tab_slug",
        default=None,
        help=f"Viewer tab opened by file links ({', '.join(sorted(TAB_SLUGS))}).",
    )

    # --- Tree presentation ---
    p.add_argument(
        "--max-expanded",
        dest="max_expanded_nodes",
        type=int,
        default=None,
        help="Soft cap on rows shown by the initial expansion.",
    )
    p.add_argument(
        "--expand-all",
        action="store_true",
        help="Expand every directory instead of the initial selection.",
    )
    p.add_argument(
        "--urls",
        dest="show_urls",
        action="store_true",
        help="Print the navigable link next to each file.",
    )

    # --- Output and configuration ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the tree as JSON.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective settings for later runs.",
    )
    p.add_argument(
        "--log-file",
        dest="log_to_file",
        action="store_true",
        help="Also write logs to the user data directory.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )

    return p

# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Map parsed arguments onto configuration keys.

    Flags that were not given map to None so they do not override stored
    settings.
    """
    overrides: Dict[str, Any] = {
        "origin": args.origin,
        "tab_slug": args.tab_slug,
        "max_expanded_nodes": args.max_expanded_nodes,
        "expand_all": True if args.expand_all else None,
        "show_urls": True if args.show_urls else None,
        "log_to_file": True if args.log_to_file else None,
    }
    return overrides
