"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import curses
import locale
import logging
import sys

from console_snake.config import GameConfig
from console_snake.game import SnakeGame
from console_snake.loop import run_game
from console_snake.terminal import (
    CursesDisplay,
    CursesKeyboard,
    TerminalTooSmallError,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-snake",
        description="Play snake in the terminal with the arrow keys.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of discarding them.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _configure_logging(log_file: str | None, level: str) -> None:
    # Anything written to stderr would corrupt the curses screen.
    if log_file is None:
        logging.basicConfig(level=logging.CRITICAL)
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _play(stdscr: curses.window, config: GameConfig) -> int:
    display = CursesDisplay(stdscr, config.width, config.height)
    keyboard = CursesKeyboard(stdscr)
    return run_game(SnakeGame(config), display, keyboard)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``console-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file, args.log_level)

    config = GameConfig(seed=args.seed)
    locale.setlocale(locale.LC_ALL, "")
    try:
        score = curses.wrapper(_play, config)
    except TerminalTooSmallError as exc:
        print(f"console-snake: {exc}", file=sys.stderr)  # noqa: T201
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130
    logger.info("Game finished with score %d.", score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
