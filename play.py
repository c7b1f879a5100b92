"""Play N×N tic-tac-toe in the terminal, two humans taking turns."""
import argparse
import sys
from typing import List, Optional

from ttt import config
from ttt.game import Game
from ttt.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play N×N tic-tac-toe in the terminal",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--size", type=int, default=config.BOARD_SIZE,
                        help="Board size N (the board is N×N)")
    parser.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL.upper(),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Diagnostic log level (logs go to stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, format_style=config.LOG_FORMAT)

    try:
        config.set_board(args.size)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    game = Game()
    try:
        game.run()
    except EOFError:
        logger.error("Input stream closed while waiting for a move")
        print("Error: failed to read line.")
        return 1
    except KeyboardInterrupt:
        print("\nGame interrupted by user.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
