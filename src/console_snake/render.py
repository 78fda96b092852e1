"""Drawing the board onto an abstract character display."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from console_snake.game import SnakeGame

GLYPH = "■"


class Color(enum.Enum):
    """Foreground colours used to tell board elements apart."""

    BORDER = "border"
    SNAKE_BODY = "snake_body"
    SNAKE_HEAD = "snake_head"
    FOOD = "food"
    TEXT = "text"


class Display(Protocol):
    """Character-cell output capability addressed by column ``x`` and row ``y``."""

    def clear(self) -> None: ...

    def draw(self, x: int, y: int, glyph: str, color: Color) -> None: ...

    def write(self, x: int, y: int, text: str, color: Color) -> None: ...

    def refresh(self) -> None: ...


class BoardRenderer:
    """Renders a :class:`SnakeGame` frame by frame onto a :class:`Display`."""

    def __init__(self, display: Display, glyph: str = GLYPH) -> None:
        self.display = display
        self.glyph = glyph

    def render(self, game: SnakeGame) -> None:
        """Redraw the whole board: border, snake, then food."""
        self.display.clear()
        self._draw_border(game.width, game.height)
        self._draw_snake(game)
        if game.food is not None:
            self.display.draw(game.food.x, game.food.y, self.glyph, Color.FOOD)
        self.display.refresh()

    def render_game_over(self, game: SnakeGame) -> None:
        """Write the final score line near the middle of the board."""
        self.display.write(
            game.width // 5,
            game.height // 2,
            f"Game over, Score: {game.score}",
            Color.TEXT,
        )
        self.display.refresh()

    def _draw_border(self, width: int, height: int) -> None:
        for x in range(width):
            self.display.draw(x, 0, self.glyph, Color.BORDER)
            self.display.draw(x, height - 1, self.glyph, Color.BORDER)
        for y in range(height):
            self.display.draw(0, y, self.glyph, Color.BORDER)
            self.display.draw(width - 1, y, self.glyph, Color.BORDER)

    def _draw_snake(self, game: SnakeGame) -> None:
        # Head last so it stays visible over a body segment.
        for seg in list(game.snake)[1:]:
            self.display.draw(seg.x, seg.y, self.glyph, Color.SNAKE_BODY)
        head = game.snake.head
        self.display.draw(head.x, head.y, self.glyph, Color.SNAKE_HEAD)
