"""
Command-line interface for playing against the engine.
"""

import argparse
import logging
from typing import List, Optional

from mnk_solver.api import play_game
from mnk_solver.core.types import InvalidDimensions, Mark
from mnk_solver.selection import STRATEGIES
from mnk_solver.utils.config import (
    Config,
    DEFAULT_COLS,
    DEFAULT_MOVE_DELAY,
    DEFAULT_ROWS,
    DEFAULT_STRATEGY,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play K-in-a-row on an R x C board against a minimax engine"
    )
    parser.add_argument(
        "--rows", "-r",
        type=int,
        default=DEFAULT_ROWS,
        help=f"Board rows (default: {DEFAULT_ROWS})",
    )
    parser.add_argument(
        "--cols", "-c",
        type=int,
        default=DEFAULT_COLS,
        help=f"Board columns (default: {DEFAULT_COLS})",
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=list(STRATEGIES.keys()),
        default=DEFAULT_STRATEGY,
        help=f"Engine move selection (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--human", "-H",
        choices=["X", "O", "none"],
        default="X",
        help="Side played by the human; 'none' lets the engine play itself (default: X)",
    )
    parser.add_argument(
        "--delay", "-d",
        type=float,
        default=DEFAULT_MOVE_DELAY,
        help=f"Seconds to wait before an engine move is shown (default: {DEFAULT_MOVE_DELAY})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log search statistics",
    )
    return parser.parse_args(argv)


def parse_human(human: str) -> Optional[Mark]:
    """Map the --human choice to a Mark (None for engine self-play)."""
    if human == "none":
        return None
    return Mark.from_symbol(human)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(
            rows=args.rows,
            cols=args.cols,
            strategy=args.strategy,
            human_mark=parse_human(args.human),
            move_delay=args.delay,
        )
    except (InvalidDimensions, ValueError) as e:
        print(f"error: {e}")
        return 2

    if config.strategy == "minimax" and config.cells >= 16:
        logging.getLogger(__name__).warning(
            "Exhaustive search on %dx%d may take a very long time", config.rows, config.cols
        )

    try:
        outcome = play_game(config)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    print("\n" + "=" * 40)
    print("GAME OVER" if outcome is not None else "QUIT")
    print("=" * 40)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
