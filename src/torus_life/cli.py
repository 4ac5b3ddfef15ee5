"""Command line entry point.

Usage: torus-life <file_path>

Loads the pattern file onto a 20x40 torus and animates it on stdout
until interrupted.
"""

import argparse
import os
import sys
import logging
from typing import List, Optional

from .config import DEFAULT_CONFIG, SimulationConfig
from .core.grid import LifeGrid
from .display import TerminalDisplay
from .errors import PatternLoadError, UsageError
from .pattern_loader import load_cell_group
from .runner import run

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        raise UsageError(message)


def _discard_stdout() -> None:
    """Point stdout at devnull so the exit-time flush cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (AttributeError, OSError):
        # stdout is not backed by a file descriptor
        sys.stdout = open(os.devnull, "w")
    finally:
        os.close(devnull)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="torus-life",
        description="Conway's Game of Life on a toroidal grid",
        add_help=False
    )
    parser.add_argument("file_path", help="Pattern file with one 'row col' pair per line")
    return parser


def main(argv: Optional[List[str]] = None,
         config: SimulationConfig = DEFAULT_CONFIG) -> int:
    """Run the simulation from command line arguments.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)
        config: Grid dimensions and pacing

    Returns:
        Process exit status
    """
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    try:
        group = load_cell_group(args.file_path, config.height, config.width)
    except PatternLoadError as e:
        logger.debug(f"Pattern load failed: {e!r}")
        print(f"error, {e}", file=sys.stderr)
        return 1

    grid = LifeGrid(config.height, config.width, config.alive_char, config.dead_char)
    grid.set_cell_group(group, True)

    try:
        run(grid, TerminalDisplay(sys.stdout), config.delay_seconds)
    except KeyboardInterrupt:
        logger.info(f"Interrupted at generation {grid.generation}")
        return 0
    except BrokenPipeError as e:
        _discard_stdout()
        print(f"error, {e}", file=sys.stderr)
        return 1

    return 0
