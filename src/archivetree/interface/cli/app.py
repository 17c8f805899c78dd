from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Runs the CLI lifecycle: logging bootstrap, configuration resolution,
container loading (local file or URL), tree construction and output.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from archivetree.core.services.session import ArchiveSession
from archivetree.core.services.validator import validate_config
from archivetree.core.tree.render import render_tree_lines
from archivetree.domain.config import get_default_config, load_config, save_config
from archivetree.domain.errors import ArchiveTreeError
from archivetree.domain.table_models import ArchiveEntry
from archivetree.infra.archive.zip_reader import read_zip_entries
from archivetree.infra.fs import is_remote_source
from archivetree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from archivetree.infra.network import fetch_archive_bytes
from archivetree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Exit code (0 success, 1 unexpected failure, 2 unreadable input,
        130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Configuration hierarchy (defaults < stored < CLI)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=get_default_log_path() if conf["log_to_file"] else None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(conf)

    # 3. Container loading
    try:
        entries, archive_url = _load_entries(args.source)
    except ArchiveTreeError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 4. Tree construction and output
    try:
        session = ArchiveSession(
            entries,
            archive_url,
            origin=conf["origin"],
            tab_slug=conf["tab_slug"],
        )
        tree = session.tree
        if conf["expand_all"] or args.json_output:
            # Every row is queried below
            tree.index_all_children()
        if conf["expand_all"]:
            expanded = [i for i in range(session.table.length) if tree.has_children(i)]
        else:
            expanded = session.initial_expansion(conf["max_expanded_nodes"])

        if args.json_output:
            print(json.dumps(_build_json_report(session, expanded), ensure_ascii=False, indent=2))
        else:
            lines = render_tree_lines(tree, expanded, show_urls=conf["show_urls"])
            print(archive_url)
            for line in lines:
                print(line)
    except Exception as e:
        logger.critical(f"Failed to build archive tree: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides over known keys."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


def _load_entries(source: str) -> Tuple[Dict[str, ArchiveEntry], str]:
    """Read the container listing and resolve its identifier."""
    if is_remote_source(source):
        return read_zip_entries(fetch_archive_bytes(source)), source

    path = os.path.abspath(source)
    logger.info(f"Reading archive: {path}")
    return read_zip_entries(path), path


def _build_json_report(session: ArchiveSession, expanded: List[int]) -> Dict[str, Any]:
    """Serialize the table and the current expansion for machine consumers."""
    tree = session.tree
    table = session.table
    nodes = []
    for index in range(table.length):
        data = tree.get_display_data(index)
        nodes.append({
            "index": index,
            "path": table.path[index],
            "name": data.name,
            "depth": table.depth[index],
            "parent": tree.get_parent(index),
            "is_file": table.file[index] is not None,
            "url": data.url,
        })

    return {
        "archive": session.archive_url,
        "max_depth": session.max_depth(),
        "roots": tree.get_roots(),
        "expanded": expanded,
        "nodes": nodes,
    }

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
