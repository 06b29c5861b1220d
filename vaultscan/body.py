"""Main panel: the findings list and the side cards with details and counts."""

from __future__ import annotations

import curses
from collections.abc import Sequence
from functools import cache
from typing import Any, TypeVar

from .models import KeyMatch
from .patterns import get_patterns
from .state import AppState, Tab
from .terminal import Color, Rect, color_attr, put_text

T = TypeVar("T")

_ACCENTS = {Tab.ENV: Color.GREEN, Tab.IDES: Color.MAGENTA, Tab.FILES: Color.CYAN}
_TITLES = {
    Tab.ENV: "ENV Findings",
    Tab.IDES: "IDES Findings",
    Tab.FILES: "FILES (hardcoded)",
}
_SCOPES = {Tab.ENV: "ENV", Tab.IDES: "IDES", Tab.FILES: "FILES"}
_HIGHLIGHT_SYMBOL = "▸ "

Colour = Color | tuple[int, int, int]


@cache
def _pattern_meta() -> tuple[tuple[str, str, tuple[int, int, int]], ...]:
    """Name, short name and colour of every pattern, computed once."""
    return tuple((p.name, p.short_name, p.color) for p in get_patterns())


def provider_color(provider: str) -> Colour:
    """Return the RGB colour of the first pattern named within ``provider``, else gray."""
    for name, _short, color in _pattern_meta():
        if name in provider:
            return color
    return Color.GRAY


def _provider_attr(provider: str) -> int:
    color = provider_color(provider)
    return color_attr(color, bold=not isinstance(color, Color))


def provider_counts(items: Sequence[KeyMatch]) -> list[tuple[str, Colour, int]]:
    """Count matches per provider.

    Returns ``(short_name, colour, count)`` for every pattern in registry
    order, followed by an ``"Other"`` entry for unrecognised providers.
    """
    meta = _pattern_meta()
    counts = {name: 0 for name, _short, _color in meta}
    other = 0
    for item in items:
        owner = next((name for name, _s, _c in meta if name in item.provider), None)
        if owner is None:
            other += 1
        else:
            counts[owner] += 1
    bars: list[tuple[str, Colour, int]] = [
        (short, color, counts[name]) for name, short, color in meta
    ]
    bars.append(("Other", Color.GRAY, other))
    return bars


def match_line(match: KeyMatch) -> str:
    """Format one match as ``[provider] path:line  key``."""
    return f"[{match.provider}] {match.file_path}:{match.line_number}  {match.key}"


def visible_window(items: Sequence[T], scroll: int, height: int) -> list[T]:
    """Return the items shown in a viewport of ``height`` rows starting at ``scroll``."""
    start = min(max(scroll, 0), len(items))
    end = min(start + max(height, 0), len(items))
    return list(items[start:end])


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


def _draw_box(window: Any, area: Rect, title: str, title_attr: int, border_attr: int) -> Rect:
    """Draw a rounded border with a title on its top edge; return the inner region."""
    width, height = area.width, area.height
    if width <= 0 or height <= 0:
        return area.inner()
    if width >= 2:
        top = "╭" + "─" * (width - 2) + "╮"
        bottom = "╰" + "─" * (width - 2) + "╯"
    else:
        top = bottom = "╭"
    put_text(window, area, 0, top, border_attr)
    if height >= 2:
        put_text(window, area, height - 1, bottom, border_attr)
    right_edge = Rect(area.x + width - 1, area.y, 1, height)
    for row in range(1, height - 1):
        put_text(window, area, row, "│", border_attr)
        if width >= 2:
            put_text(window, right_edge, row, "│", border_attr)
    if title and width > 2:
        put_text(window, Rect(area.x + 1, area.y, width - 2, 1), 0, title, title_attr)
    return area.inner()


def _card(window: Any, area: Rect, title: str) -> Rect:
    return _draw_box(
        window, area, title, color_attr(Color.WHITE, bold=True), color_attr(Color.DARK_GRAY)
    )


def render(window: Any, state: AppState, area: Rect) -> None:
    """Draw the findings list (two thirds) and the side cards (one third) into ``area``."""
    left_width = area.width * 67 // 100
    render_left = Rect(area.x, area.y, left_width, area.height)
    render_right = Rect(area.x + left_width, area.y, area.width - left_width, area.height)
    _render_findings(window, state, render_left)
    _render_side_panel(window, state, render_right)


def _render_findings(window: Any, state: AppState, area: Rect) -> None:
    active = state.active_list()
    accent = _ACCENTS[state.tab]
    items = active.items
    inner = _draw_box(
        window,
        area,
        f" {_TITLES[state.tab]}  [{len(items)} items] ",
        color_attr(Color.WHITE, bold=True),
        color_attr(accent),
    )

    start = min(active.scroll, len(items))
    visible = visible_window(items, active.scroll, inner.height)
    if not visible:
        put_text(window, inner, 0, "Waiting for results...", color_attr(Color.DARK_GRAY))
        return

    in_view = min(max(active.selected - start, 0), len(visible) - 1)
    highlight = color_attr(accent, bold=True) | curses.A_REVERSE
    padding = " " * len(_HIGHLIGHT_SYMBOL)
    for row, match in enumerate(visible):
        line = match_line(match)
        if row == in_view:
            put_text(window, inner, row, (_HIGHLIGHT_SYMBOL + line).ljust(inner.width), highlight)
            continue
        base = color_attr(Color.WHITE if row % 2 == 0 else Color.GRAY)
        provider = f"[{match.provider}]"
        _put_spans(
            window,
            inner,
            row,
            [(padding, base), (provider, _provider_attr(match.provider)), (line[len(provider):], base)],
        )


def _render_side_panel(window: Any, state: AppState, area: Rect) -> None:
    selected_h = min(9, area.height)
    stats_h = min(6, area.height - selected_h)
    providers_h = area.height - selected_h - stats_h
    _render_selected_card(window, state, Rect(area.x, area.y, area.width, selected_h))
    _render_stats_card(window, state, Rect(area.x, area.y + selected_h, area.width, stats_h))
    _render_provider_card(
        window, state, Rect(area.x, area.y + selected_h + stats_h, area.width, providers_h)
    )


def _render_selected_card(window: Any, state: AppState, area: Rect) -> None:
    inner = _card(window, area, " Selected Item ")
    active = state.active_list()
    if not active.items:
        put_text(window, inner, 0, "No selected item", color_attr(Color.DARK_GRAY))
        return

    item = active.items[min(active.selected, len(active.items) - 1)]
    plain = 0
    fields = [
        ("Scope: ", _SCOPES[state.tab], color_attr(Color.CYAN, bold=True)),
        ("Provider: ", item.provider, _provider_attr(item.provider)),
        ("File: ", str(item.file_path), plain),
        ("Line: ", str(item.line_number), plain),
        ("Key: ", item.key, plain),
    ]
    label_attr = color_attr(Color.GRAY)
    row = 0
    for label, value, attr in fields:
        if row >= inner.height or inner.width <= 0:
            break
        room = max(inner.width - len(label), 0)
        _put_spans(window, inner, row, [(label, label_attr), (value[:room], attr)])
        row += 1
        rest = value[room:].strip()
        while rest and row < inner.height:
            put_text(window, inner, row, rest[: inner.width], attr)
            rest = rest[inner.width :].strip()
            row += 1


def _render_stats_card(window: Any, state: AppState, area: Rect) -> None:
    inner = _card(window, area, " Scan Summary ")
    active = state.active_list()
    put_text(window, inner, 0, f"Total findings {len(active)}", color_attr(Color.WHITE))
    status, color = ("DONE", Color.GREEN) if active.done else ("RUNNING", Color.YELLOW)
    _put_spans(
        window,
        inner,
        1,
        [("Scanner: ", color_attr(Color.GRAY)), (status, color_attr(color, bold=True))],
    )


def _render_provider_card(window: Any, state: AppState, area: Rect) -> None:
    inner = _card(window, area, " Providers ")
    if inner.width <= 0 or inner.height <= 0:
        return

    bars = provider_counts(state.active_list().items)
    peak = max([1, *(count for _label, _color, count in bars)])
    if inner.width >= 50:
        bar_width = 5
    elif inner.width >= 40:
        bar_width = 4
    else:
        bar_width = 3

    label_row = inner.height - 1
    chart_rows = label_row
    value_attr = color_attr(Color.WHITE, bold=True)
    for index, (label, color, count) in enumerate(bars):
        offset = index * (bar_width + 1)
        if offset + bar_width > inner.width:
            break
        column = Rect(inner.x + offset, inner.y, bar_width, inner.height)
        put_text(window, column, label_row, label[:bar_width].center(bar_width), color_attr(Color.GRAY))
        if chart_rows <= 0:
            continue
        filled = count * chart_rows // peak
        bar_attr = color_attr(color)
        for level in range(filled):
            put_text(window, column, label_row - 1 - level, "█" * bar_width, bar_attr)
        put_text(window, column, label_row - 1, str(count).center(bar_width), value_attr)