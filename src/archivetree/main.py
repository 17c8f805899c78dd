from __future__ import annotations

"""
Main Entry Point.

Routes execution to the CLI and makes sure an unexpected crash is logged
before the process exits.
"""

import logging
import sys
import traceback
from typing import Any, List, Optional


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Log unhandled exceptions and print the trace to stderr."""
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("archivetree.supervisor").critical(
        f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}"
    )
    print(stack_trace, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    sys.excepthook = global_exception_handler

    from archivetree.interface.cli.app import main as cli_main
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
