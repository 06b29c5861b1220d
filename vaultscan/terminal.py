"""Curses terminal session, screen rectangles and colour attributes."""

from __future__ import annotations

import curses
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Rect:
    """A rectangular screen region in cells."""

    x: int
    y: int
    width: int
    height: int

    def inner(self) -> Rect:
        """Return the region inside a one-cell border."""
        width = max(self.width - 2, 0)
        height = max(self.height - 2, 0)
        return Rect(
            self.x + (1 if self.width > 0 else 0),
            self.y + (1 if self.height > 0 else 0),
            width,
            height,
        )


class Color(Enum):
    """Named foreground colours used by the dashboard."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"


# Colour -> (pair number, extra attribute); filled while a session is active.
_PAIRS: dict[Color, tuple[int, int]] = {}

_BASE = {
    Color.BLACK: curses.COLOR_BLACK,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.BLUE: curses.COLOR_BLUE,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.CYAN: curses.COLOR_CYAN,
    Color.GRAY: curses.COLOR_WHITE,
}

_BY_BITS = {
    (False, False, False): Color.BLACK,
    (True, False, False): Color.RED,
    (False, True, False): Color.GREEN,
    (True, True, False): Color.YELLOW,
    (False, False, True): Color.BLUE,
    (True, False, True): Color.MAGENTA,
    (False, True, True): Color.CYAN,
    (True, True, True): Color.WHITE,
}


def _nearest(rgb: tuple[int, int, int]) -> Color:
    red, green, blue = rgb
    return _BY_BITS[(red >= 128, green >= 128, blue >= 128)]


def _color_specs() -> dict[Color, tuple[int, int]]:
    bright = curses.COLORS >= 16
    specs = {color: (fg, 0) for color, fg in _BASE.items()}
    specs[Color.WHITE] = (15 if bright else curses.COLOR_WHITE, 0)
    specs[Color.DARK_GRAY] = (8, 0) if bright else (curses.COLOR_WHITE, curses.A_DIM)
    return specs


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    for number, (color, (fg, extra)) in enumerate(_color_specs().items(), start=1):
        if number >= curses.COLOR_PAIRS:
            break
        try:
            curses.init_pair(number, fg, background)
        except curses.error:
            continue
        _PAIRS[color] = (number, extra)


def color_attr(color: Color | tuple[int, int, int], bold: bool = False) -> int:
    """Return the curses attribute for ``color``; RGB triples map to the nearest colour."""
    named = color if isinstance(color, Color) else _nearest(color)
    attr = 0
    spec = _PAIRS.get(named)
    if spec is not None:
        number, extra = spec
        attr = curses.color_pair(number) | extra
    if bold:
        attr |= curses.A_BOLD
    return attr


def put_text(window: Any, area: Rect, row: int, text: str, attr: int = 0) -> int:
    """Write ``text`` on ``row`` of ``area``, clipped to its width.

    Returns the number of characters written; rows outside the area write nothing.
    """
    if row < 0 or row >= area.height or area.width <= 0:
        return 0
    clipped = text[: area.width]
    if not clipped:
        return 0
    # Writing into the bottom-right cell raises even though the text is drawn.
    with suppress(curses.error):
        window.addnstr(area.y + row, area.x, clipped, area.width, attr)
    return len(clipped)


class TerminalGuard:
    """Context manager that owns the curses screen for one dashboard session.

    Entering starts curses with no echo, cbreak input, keypad keys, a hidden
    cursor and colour pairs; leaving restores the terminal even on errors.
    """

    def __init__(self) -> None:
        self.window: Any = None

    def __enter__(self) -> Any:
        window = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            window.keypad(True)
            with suppress(curses.error):
                curses.curs_set(0)
            _init_colors()
        except BaseException:
            self._restore(window)
            raise
        self.window = window
        return window

    def __exit__(self, *args: object) -> None:
        if self.window is not None:
            self._restore(self.window)
            self.window = None

    @staticmethod
    def _restore(window: Any) -> None:
        _PAIRS.clear()
        with suppress(curses.error):
            curses.curs_set(1)
        with suppress(curses.error):
            window.keypad(False)
        with suppress(curses.error):
            curses.nocbreak()
        with suppress(curses.error):
            curses.echo()
        with suppress(curses.error):
            curses.endwin()