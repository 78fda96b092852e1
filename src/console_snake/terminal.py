"""curses-backed display and keyboard."""

from __future__ import annotations

import curses
import logging
import math
import time
from collections.abc import Callable

from console_snake.controls import Key
from console_snake.render import Color

logger = logging.getLogger(__name__)

# Colour pair numbers start at 1; pair 0 is reserved by curses.
_COLOR_PAIRS: dict[Color, tuple[int, int]] = {
    Color.BORDER: (1, curses.COLOR_WHITE),
    Color.SNAKE_BODY: (2, curses.COLOR_GREEN),
    Color.SNAKE_HEAD: (3, curses.COLOR_RED),
    Color.FOOD: (4, curses.COLOR_CYAN),
    Color.TEXT: (5, curses.COLOR_WHITE),
}

CURSES_KEYS: dict[int, Key] = {
    curses.KEY_UP: Key.ARROW_UP,
    curses.KEY_DOWN: Key.ARROW_DOWN,
    curses.KEY_LEFT: Key.ARROW_LEFT,
    curses.KEY_RIGHT: Key.ARROW_RIGHT,
}


class TerminalTooSmallError(RuntimeError):
    """Raised when the terminal cannot fit the board."""

    def __init__(self, needed: tuple[int, int], actual: tuple[int, int]) -> None:
        self.needed = needed
        self.actual = actual
        super().__init__(
            f"Terminal is {actual[0]}x{actual[1]} but the board needs "
            f"{needed[0]}x{needed[1]} (columns x rows)."
        )


class CursesDisplay:
    """Draws onto a curses window using one colour pair per :class:`Color`."""

    def __init__(self, stdscr: curses.window, width: int, height: int) -> None:
        rows, cols = stdscr.getmaxyx()
        if cols < width or rows < height:
            raise TerminalTooSmallError((width, height), (cols, rows))
        self.stdscr = stdscr
        self._last_cell = (cols - 1, rows - 1)

        curses.curs_set(0)
        self._attrs: dict[Color, int] = {color: 0 for color in Color}
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for color, (pair, foreground) in _COLOR_PAIRS.items():
                curses.init_pair(pair, foreground, -1)
                self._attrs[color] = curses.color_pair(pair)
        else:
            logger.info("Terminal has no colour support; drawing monochrome.")
        self._attrs[Color.SNAKE_HEAD] |= curses.A_BOLD

    def clear(self) -> None:
        self.stdscr.erase()

    def draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        self._put(x, y, glyph, self._attrs[color])

    def write(self, x: int, y: int, text: str, color: Color) -> None:
        self._put(x, y, text, self._attrs[color])

    def refresh(self) -> None:
        self.stdscr.refresh()

    def _put(self, x: int, y: int, text: str, attr: int) -> None:
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # curses reports an error after writing the bottom-right cell
            # because the cursor cannot advance past it.
            if (x + len(text) - 1, y) != self._last_cell:
                raise


class CursesKeyboard:
    """Reads arrow keys from a curses window with a bounded wait."""

    def __init__(
        self,
        stdscr: curses.window,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stdscr = stdscr
        self._clock = clock
        stdscr.keypad(True)

    def poll(self, timeout: float) -> Key | None:
        """Return the next arrow key pressed within *timeout* seconds.

        Other keys are discarded without ending the wait.
        """
        deadline = self._clock() + timeout
        while True:
            remaining = deadline - self._clock()
            if remaining <= 0:
                return None
            self.stdscr.timeout(max(1, math.ceil(remaining * 1000)))
            code = self.stdscr.getch()
            if code == -1:
                return None
            key = CURSES_KEYS.get(code)
            if key is not None:
                return key
