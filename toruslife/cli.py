"""Command-line entry point: ``toruslife PATH``."""

import sys
import logging
import argparse
from typing import List, Optional

from .errors import LoadError
from .loader import load_grid
from .runner import RunConfig, run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toruslife",
        description="Conway's Game of Life on a wrap-around grid, drawn in the terminal")
    parser.add_argument("path", help="Initial-state file ('.' dead, '#' alive, one row per line)")
    parser.add_argument("--interval", type=float, default=0.1, help="Seconds between generations")
    parser.add_argument("--dead-glyph", default=None,
                        help="Character drawn for dead cells (default: space, or '.' with --show-next)")
    parser.add_argument("--show-next", action="store_true",
                        help="Draw the staging buffer (previous generation) instead of the current one")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity (stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, load the grid and run until interrupted.

    Returns:
        Process exit status: 1 on load failure, 130 on interrupt
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    dead_glyph = args.dead_glyph
    if dead_glyph is None:
        dead_glyph = "." if args.show_next else " "

    try:
        config = RunConfig(interval=args.interval, dead_glyph=dead_glyph, show_next=args.show_next)
    except ValueError as e:
        parser.error(str(e))

    try:
        grid = load_grid(args.path)
    except LoadError as e:
        logger.error(f"Failed to load initial state: {e}")
        return 1

    try:
        run(grid, config)
    except KeyboardInterrupt:
        logger.info(f"Interrupted after {grid.generation} generations")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
