"""Arrow-key handling and the timed per-frame input poll."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from typing import Protocol

from console_snake.position import Direction

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    """Directional keys recognised by the game."""

    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"


KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.ARROW_UP: Direction.UP,
    Key.ARROW_DOWN: Direction.DOWN,
    Key.ARROW_LEFT: Direction.LEFT,
    Key.ARROW_RIGHT: Direction.RIGHT,
}


class Keyboard(Protocol):
    """Input capability polled by the game loop."""

    def poll(self, timeout: float) -> Key | None:
        """Wait up to *timeout* seconds for a key; ``None`` once it elapses."""
        ...


def is_reversal(current: Direction, candidate: Direction) -> bool:
    """Return True if *candidate* would turn the head back into its neck."""
    return candidate is current.opposite


def resolve_key(current: Direction, key: Key) -> Direction | None:
    """Map *key* to the direction it requests while heading *current*.

    Returns ``None`` when the press is rejected as a neck-reversal.
    """
    candidate = KEY_DIRECTIONS[key]
    if is_reversal(current, candidate):
        return None
    return candidate


class DirectionGate:
    """Latches the first accepted direction change within one frame."""

    def __init__(self, current: Direction) -> None:
        self.direction = current
        self.pressed = False

    def press(self, key: Key) -> bool:
        """Offer a key press. Returns True if it changed the latched direction."""
        if self.pressed:
            return False
        requested = resolve_key(self.direction, key)
        if requested is None:
            return False
        self.direction = requested
        self.pressed = True
        return True


def poll_direction(
    keyboard: Keyboard,
    current: Direction,
    budget: float,
    clock: Callable[[], float] = time.monotonic,
) -> Direction:
    """Collect key presses for *budget* seconds and return the new direction.

    Every press arriving inside the window is consumed, but only the first
    accepted one takes effect.
    """
    gate = DirectionGate(current)
    deadline = clock() + budget
    while True:
        remaining = deadline - clock()
        if remaining <= 0:
            break
        key = keyboard.poll(remaining)
        if key is None:
            break
        if gate.press(key):
            logger.debug("Direction %s -> %s", current.name, gate.direction.name)
    return gate.direction
