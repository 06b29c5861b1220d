"""Top-level screen layout: header, body and footer stacked vertically."""

from __future__ import annotations

from typing import Any

from . import body, footer, header
from .state import AppState
from .terminal import Rect

FOOTER_HEIGHT = 2


def viewport_height(height: int) -> int:
    """Return the number of list rows visible in the body for a terminal ``height``."""
    return max(height - (header.preferred_height() + FOOTER_HEIGHT), 0) and max(
        height - (header.preferred_height() + FOOTER_HEIGHT) - 2, 0
    )


def root_areas(area: Rect) -> tuple[Rect, Rect, Rect]:
    """Split ``area`` into header, body and footer regions."""
    header_h = min(header.preferred_height(), area.height)
    footer_h = min(FOOTER_HEIGHT, area.height - header_h)
    body_h = area.height - header_h - footer_h
    return (
        Rect(area.x, area.y, area.width, header_h),
        Rect(area.x, area.y + header_h, area.width, body_h),
        Rect(area.x, area.y + header_h + body_h, area.width, footer_h),
    )


def draw(window: Any, state: AppState, tick: int) -> None:
    """Redraw the whole dashboard on ``window``."""
    height, width = window.getmaxyx()
    header_area, body_area, footer_area = root_areas(Rect(0, 0, width, height))
    window.erase()
    header.render(window, state, header_area, tick)
    body.render(window, state, body_area)
    footer.render(window, state, footer_area, tick)
    window.refresh()