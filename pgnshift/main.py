#!/usr/bin/env python3
# ==============================================================================
#  pgnshift - main.py
#  Purpose: command-line runner for PGN → CSV conversion
#           usage: pgnshift <input_pgn_file> <output_csv_file>
# ==============================================================================

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

# ------------------------------------------------------------------------------
# Paths & Imports
# ------------------------------------------------------------------------------

SRC_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SRC_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pgnshift.conversion.pgn_to_csv import ConversionError, convert_pgn_to_csv
from pgnshift.utils.config_utils import get_metrics_port
from pgnshift.utils.logging_utils import setup_logger
from pgnshift.utils.metrics import start_metrics_server

LOGGER = setup_logger("main")

USAGE = "Usage: {prog} <input_pgn_file> <output_csv_file>"

T = TypeVar("T")

# ------------------------------------------------------------------------------
# Stage Wrapper
# ------------------------------------------------------------------------------


def _stage(title: str, fn: Callable[[], T]) -> T:
    """
    Run a pipeline stage with start → finish logging and full stacktrace on error.
    """
    LOGGER.info("%s – started", title)
    try:
        result = fn()
        LOGGER.info("%s – finished", title)
        return result
    except ConversionError:
        raise
    except Exception:  # pragma: no cover
        LOGGER.exception("%s – failed", title)
        raise


# ------------------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    """Convert one PGN file to CSV; return the process exit code."""
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "pgnshift"
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 2:
        LOGGER.error(USAGE.format(prog=prog))
        return 1

    input_file, output_file = args

    try:
        port = get_metrics_port()
    except RuntimeError as exc:
        LOGGER.error("Error: %s", exc)
        return 1
    if port:
        start_metrics_server(port)

    try:
        count = _stage(
            "PGN → CSV conversion",
            lambda: convert_pgn_to_csv(input_file, output_file),
        )
    except ConversionError as exc:
        LOGGER.error("Error: %s", exc)
        return 1

    LOGGER.info(
        "Successfully converted %d games from %s to %s", count, input_file, output_file
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
