"""Console Snake — a turn-based terminal snake game."""

from console_snake.config import GameConfig
from console_snake.controls import Key, poll_direction, resolve_key
from console_snake.game import SnakeGame
from console_snake.loop import run_game
from console_snake.position import Direction, Position
from console_snake.render import BoardRenderer, Color
from console_snake.snake import Snake

__all__ = [
    "BoardRenderer",
    "Color",
    "Direction",
    "GameConfig",
    "Key",
    "Position",
    "Snake",
    "SnakeGame",
    "poll_direction",
    "resolve_key",
    "run_game",
]
