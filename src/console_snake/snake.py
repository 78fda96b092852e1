"""Snake body representation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from console_snake.position import Position


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The body never
    becomes empty.
    """

    def __init__(self, start: Position) -> None:
        self.body: deque[Position] = deque([start])

    @property
    def head(self) -> Position:
        """Return the head segment."""
        return self.body[0]

    def move_to(self, new_head: Position) -> None:
        """Push *new_head* onto the front of the body."""
        self.body.appendleft(new_head)

    def remove_tail(self) -> None:
        """Drop the last segment unless it is the only one left."""
        if len(self.body) > 1:
            self.body.pop()

    def occupies(self, position: Position) -> bool:
        """Check whether any segment lies on *position*."""
        return position in self.body

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [seg.to_list() for seg in self.body]}
