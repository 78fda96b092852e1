"""Fixed-rate frame loop driving a game to completion."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from console_snake.controls import Keyboard, poll_direction
from console_snake.game import SnakeGame
from console_snake.render import BoardRenderer, Display

logger = logging.getLogger(__name__)


def run_frame(
    game: SnakeGame,
    renderer: BoardRenderer,
    keyboard: Keyboard,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run one render -> input poll -> update cycle, paced to the frame interval."""
    started = clock()
    renderer.render(game)
    direction = poll_direction(
        keyboard, game.direction, game.config.input_budget, clock=clock,
    )
    game.steer(direction)
    game.update()

    remaining = game.config.frame_interval - (clock() - started)
    if remaining > 0:
        sleep(remaining)


def run_game(
    game: SnakeGame,
    display: Display,
    keyboard: Keyboard,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Play *game* until the snake dies and return the final score."""
    renderer = BoardRenderer(display)
    logger.info(
        "Starting %dx%d game with score %d.",
        game.width, game.height, game.score,
    )
    while not game.game_over:
        run_frame(game, renderer, keyboard, clock=clock, sleep=sleep)

    renderer.render_game_over(game)
    if game.config.game_over_hold > 0:
        sleep(game.config.game_over_hold)
    return game.score
