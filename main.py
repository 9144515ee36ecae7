"""
CORNERS PUZZLE - Main Entry Point
=================================
Generate -> Present -> Validate

Runs one puzzle instance headless against an in-memory host.

Usage:
    # Generate a puzzle and print the solution
    python main.py --seed 0 --serial-digit 7 --solve

    # Show the maze the manual is built from
    python main.py --seed 0 --serial-digit 7 --show-maze

    # Replay presses (corner names or indices 0-3)
    python main.py --seed 0 --serial-digit 7 --presses TL,BR,TR,BL
"""

import argparse
import logging
import sys
from typing import List, Optional

from corners.core.definitions import CORNER_NAMES, parse_corner
from corners.core.errors import CornersError
from corners.pipeline import CornersConfig, CornersModule, RecordingHost
from corners.simulation.validator import DuplicateStrike, MismatchStrike, Success
from corners.utils.graph_utils import render_maze, tag_grids

logger = logging.getLogger(__name__)


class _ImmediateReset:
    def cancel(self) -> None:
        pass


def immediate_scheduler(delay, callback):
    """Run the light reset immediately; the CLI has no display to animate."""
    callback()
    return _ImmediateReset()


def parse_presses(text: str) -> List[int]:
    return [parse_corner(token) for token in text.split(',') if token.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Corners puzzle generator and validator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--seed', type=int, default=0, help='Rule seed')
    parser.add_argument('--serial-digit', type=int, required=True,
                        help='Last digit of the serial number (0-9)')
    parser.add_argument('--presses', type=str, default=None,
                        help='Comma-separated corner presses, e.g. TL,BR,TR,BL')
    parser.add_argument('--show-maze', action='store_true', help='Print the generated maze and its tag grids')
    parser.add_argument('--solve', action='store_true', help='Print the solution order')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    host = RecordingHost()
    module = CornersModule(
        host,
        CornersConfig(rule_seed=args.seed, serial_last_digit=args.serial_digit),
        scheduler=immediate_scheduler,
    )

    try:
        puzzle = module.start()
        presses = parse_presses(args.presses) if args.presses else []
    except (CornersError, ValueError) as e:
        logger.error(f"Puzzle setup failed: {e}")
        return 2

    if args.show_maze:
        print(render_maze(module.maze))
        print()
        digits, colors = tag_grids(module.maze)
        print(f"Serial digits:\n{digits}")
        print(f"Corner colours:\n{colors}")
        print()

    print("Clamps: " + " ".join(puzzle.assignment.describe()))
    if args.solve:
        print(f"Solution: {puzzle.describe()} (path length {puzzle.total_length}, "
              f"{puzzle.attempts} attempt{'s' if puzzle.attempts != 1 else ''})")

    for corner in presses:
        outcome = module.press(corner)
        if isinstance(outcome, (DuplicateStrike, MismatchStrike)):
            print(f"{CORNER_NAMES[corner]}: {outcome.describe()}")
        elif isinstance(outcome, Success):
            print(f"{CORNER_NAMES[corner]}: Module solved.")
        else:
            print(f"{CORNER_NAMES[corner]}: {type(outcome).__name__}")

    if presses:
        print(f"Strikes: {host.strikes}, solved: {host.solved}")
    return 0 if not presses or host.solved else 1


if __name__ == '__main__':
    sys.exit(main())
