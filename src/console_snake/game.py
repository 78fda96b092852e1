"""Single-player game state and its per-frame update step."""

from __future__ import annotations

import logging

import numpy as np

from console_snake.config import GameConfig
from console_snake.position import Direction, Position
from console_snake.snake import Snake

logger = logging.getLogger(__name__)

# Random draws tried before falling back to scanning the free cells.
_MAX_SPAWN_ATTEMPTS = 64


class SnakeGame:
    """Owns the snake, the food and the score for one game.

    Each call to :meth:`update` advances the game by one frame and returns
    the updated state dictionary. The game has two states: running and
    over; once :attr:`game_over` is set it never clears.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.width = self.config.width
        self.height = self.config.height
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )

        self.snake = Snake(Position(self.width // 2, self.height // 2))
        self.direction = Direction.RIGHT
        self.score = self.config.initial_score
        self.tick = 0
        self.game_over = False
        self.food: Position | None = None
        self.spawn_food()

    def steer(self, direction: Direction) -> None:
        """Set the heading used by the next update."""
        self.direction = direction

    def is_collision(self, position: Position) -> bool:
        """Check whether the head would die on *position*.

        Border cells are walls, so the playable area is the interior
        ``1..width-2`` by ``1..height-2``.
        """
        if position.x <= 0 or position.x >= self.width - 1:
            return True
        if position.y <= 0 or position.y >= self.height - 1:
            return True
        return self.snake.occupies(position)

    def update(self) -> dict:
        """Advance the game by one frame.

        Returns the full game state as a serializable dict.
        """
        if self.game_over:
            return self.get_state()

        new_head = self.snake.head.move(self.direction)
        if self.is_collision(new_head):
            self._end_game()
            return self.get_state()

        self.snake.move_to(new_head)
        if new_head == self.food:
            self.score += 1
            self.spawn_food()

        while len(self.snake) > self.score:
            self.snake.remove_tail()

        self.tick += 1
        return self.get_state()

    def spawn_food(self) -> Position | None:
        """Place food on a random interior cell not covered by the snake.

        Sets :attr:`food` to ``None`` when every interior cell is occupied.
        """
        for _ in range(_MAX_SPAWN_ATTEMPTS):
            candidate = Position(
                int(self.rng.integers(1, self.width - 1)),
                int(self.rng.integers(1, self.height - 1)),
            )
            if not self.snake.occupies(candidate):
                self.food = candidate
                break
        else:
            self.food = self._pick_free_cell()

        if self.food is None:
            logger.warning("No free cells left for food at tick %d.", self.tick)
        else:
            logger.debug("Food spawned at (%d, %d).", self.food.x, self.food.y)
        return self.food

    def free_cells(self) -> np.ndarray:
        """Return an ``(n, 2)`` array of unoccupied interior ``(x, y)`` cells."""
        free = np.zeros((self.height, self.width), dtype=bool)
        free[1:-1, 1:-1] = True
        for seg in self.snake:
            free[seg.y, seg.x] = False
        ys, xs = np.nonzero(free)
        return np.column_stack((xs, ys))

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "game_over": self.game_over,
            "direction": self.direction.name,
            "width": self.width,
            "height": self.height,
            "food": self.food.to_list() if self.food is not None else None,
            "snake": self.snake.to_dict(),
        }

    def _pick_free_cell(self) -> Position | None:
        cells = self.free_cells()
        if len(cells) == 0:
            return None
        x, y = cells[self.rng.integers(len(cells))]
        return Position(int(x), int(y))

    def _end_game(self) -> None:
        """Mark the game as over."""
        self.game_over = True
        logger.info("Snake died at tick %d with score %d.", self.tick, self.score)
