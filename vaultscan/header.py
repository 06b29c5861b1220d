"""Header panel: scan target, finding counters, scanner status and the tab bar."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .state import AppState, Tab
from .terminal import Color, Rect, color_attr, put_text
from .textutil import elide_middle, spinner_ascii

# No logo art file is bundled, so the header shows the plain fallback.
_HEADER_ART = "Vault"

LOGO_MAX_LINES = 6
LEFT_MIN_WIDTH = 60
TOP_INFO_LINES = 6
TABS_LINES = 2

_HOTKEYS_TEXT = "[E] ENV  [I] IDES  [F] FILES  [TAB] NEXT  [Q] QUIT"
_TAB_DIVIDER = " │ "
_ACCENTS = {Tab.ENV: Color.GREEN, Tab.IDES: Color.MAGENTA, Tab.FILES: Color.CYAN}
_TAB_ORDER = (Tab.ENV, Tab.FILES, Tab.IDES)


def logo_lines() -> list[str]:
    """Return the logo art lines shown on the right, at most six."""
    parsed = [line.rstrip("\r") for line in _HEADER_ART.splitlines()]
    if not parsed:
        parsed = ["Vault"]
    return parsed[:LOGO_MAX_LINES]


def _logo_max_width() -> int:
    return max((len(line) for line in logo_lines()), default=0)


def preferred_height() -> int:
    """Return the header height in rows, borders included."""
    return max(len(logo_lines()), TOP_INFO_LINES) + TABS_LINES + 2


def accent_color(tab: Tab) -> Color:
    """Return the accent colour of ``tab``."""
    return _ACCENTS[tab]


def tab_title(label: str, count: int, done: bool, tick: int) -> str:
    """Return the tab bar title for one view."""
    if done:
        return f" {label} ({count}) ✓ "
    return f" {label} ({count}) {spinner_ascii(tick)} "


def _titles(state: AppState, tick: int) -> list[str]:
    lists = {Tab.ENV: state.env, Tab.FILES: state.files, Tab.IDES: state.ides}
    return [
        tab_title(tab.name, len(lists[tab]), lists[tab].done, tick) for tab in _TAB_ORDER
    ]


def tabs_width(state: AppState, tick: int) -> int:
    """Return the width needed by the three tab titles and their dividers."""
    return sum(len(title) for title in _titles(state, tick)) + len(_TAB_DIVIDER) * 2


def hotkeys_width() -> int:
    """Return the width of the hotkey hint strip."""
    return len(_HOTKEYS_TEXT)


def _put_spans(window: Any, area: Rect, row: int, spans: Sequence[tuple[str, int]]) -> None:
    column = 0
    for text, attr in spans:
        if column >= area.width:
            break
        column += put_text(
            window,
            Rect(area.x + column, area.y, area.width - column, area.height),
            row,
            text,
            attr,
        )


def _draw_border(window: Any, area: Rect, attr: int) -> Rect:
    width, height = area.width, area.height
    if width <= 0 or height <= 0:
        return area.inner()
    middle = "─" * max(width - 2, 0)
    put_text(window, area, 0, ("╭" + middle + "╮") if width >= 2 else "╭", attr)
    if height >= 2:
        put_text(window, area, height - 1, ("╰" + middle + "╯") if width >= 2 else "╰", attr)
    right_edge = Rect(area.x + width - 1, area.y, 1, height)
    for row in range(1, height - 1):
        put_text(window, area, row, "│", attr)
        if width >= 2:
            put_text(window, right_edge, row, "│", attr)
    return area.inner()


def render(window: Any, state: AppState, area: Rect, tick: int) -> None:
    """Draw the whole header into ``area``."""
    accent = accent_color(state.tab)
    inner = _draw_border(window, area, color_attr(accent))
    if inner.width == 0 or inner.height == 0:
        return

    top_h = max(inner.height - 2, 0)
    top = Rect(inner.x, inner.y, inner.width, top_h)
    separator = Rect(inner.x, inner.y + top_h, inner.width, min(1, inner.height))
    bottom = Rect(inner.x, inner.y + top_h + 1, inner.width, 1 if inner.height >= 2 else 0)

    logo_width = min(_logo_max_width(), max(top.width - LEFT_MIN_WIDTH, 0))
    left = Rect(top.x, top.y, top.width - logo_width, top.height)
    logo_area = Rect(top.x + left.width, top.y, logo_width, top.height)

    if logo_area.width > 0:
        logo_attr = color_attr(accent, bold=True)
        for row, line in enumerate(logo_lines()):
            aligned = line.rjust(logo_area.width)[-logo_area.width :]
            put_text(window, logo_area, row, aligned, logo_attr)

    _render_path_label(window, left, 0, accent)
    _render_path_value(window, state, left, 1)
    _render_separator(window, left, 2)
    _render_results(window, state, left, 3, accent)
    _render_separator(window, left, 4)
    _render_status(window, state, left, 5)
    _render_separator(window, separator, 0)
    _render_bottom_row(window, state, bottom, tick, accent)


def _render_path_label(window: Any, area: Rect, row: int, accent: Color) -> None:
    _put_spans(
        window,
        area,
        row,
        [("◆ ", color_attr(accent)), ("SCAN TARGET", color_attr(Color.DARK_GRAY, bold=True))],
    )


def _render_path_value(window: Any, state: AppState, area: Rect, row: int) -> None:
    path = elide_middle(state.scan_path, max(area.width - 3, 8))
    _put_spans(window, area, row, [("  ", 0), (path, color_attr(Color.WHITE, bold=True))])


def _render_separator(window: Any, area: Rect, row: int) -> None:
    line = "╶" + "─" * max(area.width - 2, 0) + "╴"
    put_text(window, area, row, line, color_attr(Color.DARK_GRAY))


def _badge(label: str, count: int, color: Color) -> list[tuple[str, int]]:
    return [
        (f" {label} ", color_attr(color, bold=True)),
        (f" {count} ", color_attr(color, bold=True)),
    ]


def _render_results(window: Any, state: AppState, area: Rect, row: int, accent: Color) -> None:
    total = len(state.env) + len(state.ides) + len(state.files)
    dim = color_attr(Color.DARK_GRAY)
    spans = [("  FINDINGS  ", dim)]
    spans += _badge("ENV", len(state.env), Color.GREEN)
    spans.append(("  ", 0))
    spans += _badge("FILES", len(state.files), Color.CYAN)
    spans.append(("  ", 0))
    spans += _badge("IDES", len(state.ides), Color.MAGENTA)
    spans += [("  │  TOTAL  ", dim), (str(total), color_attr(accent, bold=True))]
    _put_spans(window, area, row, spans)


def _chip(done: bool) -> tuple[str, int]:
    if done:
        return ("✓ DONE ", color_attr(Color.GREEN, bold=True))
    return ("⟳ SCAN ", color_attr(Color.YELLOW, bold=True))


def _render_status(window: Any, state: AppState, area: Rect, row: int) -> None:
    label = color_attr(Color.GRAY)
    spans = [("  STATUS  ", color_attr(Color.DARK_GRAY))]
    for name, source in (("ENV", state.env), ("FILES", state.files), ("IDES", state.ides)):
        if name != "ENV":
            spans.append(("   ", 0))
        spans += [(f"{name} ", label), _chip(source.done)]
    _put_spans(window, area, row, spans)


def _render_hotkeys(window: Any, area: Rect, accent: Color) -> None:
    key_attr = color_attr(accent, bold=True)
    dim = color_attr(Color.DARK_GRAY)
    spans: list[tuple[str, int]] = [("  ", 0)]
    for key, text in (("E", " ENV  "), ("F", " FILES  "), ("I", " IDES  "), ("TAB", " NEXT  "), ("Q", " QUIT")):
        spans += [(f"[{key}]", key_attr), (text, dim)]
    _put_spans(window, area, 0, spans)


def _render_bottom_row(window: Any, state: AppState, area: Rect, tick: int, accent: Color) -> None:
    if area.height <= 0 or area.width <= 0:
        return
    tab_width = min(tabs_width(state, tick), area.width)
    side_width = max(min(hotkeys_width(), (area.width - tab_width) // 2), 1)
    side_width = min(side_width, area.width)
    middle_width = max(area.width - 2 * side_width, 0)
    _render_hotkeys(window, Rect(area.x, area.y, side_width, area.height), accent)
    _render_tabs(
        window, state, Rect(area.x + side_width, area.y, middle_width, area.height), tick, accent
    )


def _render_tabs(window: Any, state: AppState, area: Rect, tick: int, accent: Color) -> None:
    tab_width = min(tabs_width(state, tick), area.width)
    tabs_area = Rect(area.x + (area.width - tab_width) // 2, area.y, tab_width, area.height)
    selected = color_attr(accent, bold=True) | _reverse()
    normal = color_attr(Color.DARK_GRAY)
    spans: list[tuple[str, int]] = []
    for index, (tab, title) in enumerate(zip(_TAB_ORDER, _titles(state, tick))):
        if index:
            spans.append((_TAB_DIVIDER, normal))
        spans.append((title, selected if tab is state.tab else normal))
    _put_spans(window, tabs_area, 0, spans)


def _reverse() -> int:
    import curses

    return curses.A_REVERSE