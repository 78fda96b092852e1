"""Shared fakes for the display, keyboard and clock capabilities."""

from __future__ import annotations

import pytest

from console_snake.controls import Key
from console_snake.render import Color


class FakeClock:
    """Manually advanced monotonic clock that doubles as ``sleep``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedKeyboard:
    """Returns queued keys, each taking *step* seconds to arrive.

    Once the queue is empty (or the next key would arrive after the timeout)
    the poll waits out the full timeout and returns ``None``.
    """

    def __init__(
        self,
        keys: list[Key] | None = None,
        clock: FakeClock | None = None,
        step: float = 0.0,
    ) -> None:
        self.keys = list(keys or [])
        self.clock = clock
        self.step = step
        self.polls: list[float] = []

    def poll(self, timeout: float) -> Key | None:
        self.polls.append(timeout)
        if not self.keys or self.step > timeout:
            self._advance(timeout)
            return None
        self._advance(self.step)
        return self.keys.pop(0)

    def _advance(self, seconds: float) -> None:
        if self.clock is not None:
            self.clock.now += seconds


class RecordingDisplay:
    """Keeps the last glyph drawn per cell plus an ordered call log."""

    def __init__(self) -> None:
        self.cells: dict[tuple[int, int], tuple[str, Color]] = {}
        self.texts: list[tuple[int, int, str, Color]] = []
        self.calls: list[str] = []

    def clear(self) -> None:
        self.cells.clear()
        self.calls.append("clear")

    def draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        self.cells[(x, y)] = (glyph, color)
        self.calls.append("draw")

    def write(self, x: int, y: int, text: str, color: Color) -> None:
        self.texts.append((x, y, text, color))
        self.calls.append("write")

    def refresh(self) -> None:
        self.calls.append("refresh")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()
