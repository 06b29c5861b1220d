"""Footer panel: selection status line and key binding hint."""

from __future__ import annotations

from typing import Any

from .state import AppState
from .terminal import Color, Rect, color_attr, put_text
from .textutil import spinner_ascii

HINT = "Left/Right/TAB switch view | e/i/f | Up/Down select | q quit"


def status_text(state: AppState, tick: int) -> str:
    """Return the status line for the active list."""
    active = state.active_list()
    if not active.items:
        if active.done:
            return "No findings in current view (DONE)"
        return f"Scanning current view {spinner_ascii(tick)}"
    phase = "DONE" if active.done else "SCANNING"
    spinner = "" if active.done else spinner_ascii(tick)
    return (
        f"Selected {active.selected + 1}/{len(active)} | "
        f"Scroll {active.scroll + 1} | {phase} {spinner}"
    )


def render(window: Any, state: AppState, area: Rect, tick: int) -> None:
    """Draw the status line and the hint line into ``area``."""
    done = state.active_list().done
    put_text(
        window,
        area,
        0,
        status_text(state, tick),
        color_attr(Color.GREEN if done else Color.DARK_GRAY),
    )
    put_text(window, area, 1, HINT, color_attr(Color.DARK_GRAY))