"""Small text helpers shared by the dashboard panels."""

from __future__ import annotations

_SPINNER_FRAMES = ("-", "\\", "|", "/")


def spinner_ascii(tick: int) -> str:
    """Return the spinner frame for animation step ``tick``."""
    return _SPINNER_FRAMES[tick % len(_SPINNER_FRAMES)]


def elide_middle(text: str, max_len: int) -> str:
    """Shorten ``text`` to ``max_len`` characters by replacing its middle with ``...``.

    Text that already fits is returned unchanged. When ``max_len`` is 3 or
    less the result is that many dots.
    """
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return "." * max_len
    head = (max_len - 3) // 2
    tail = (max_len - 3) - head
    return f"{text[:head]}...{text[len(text) - tail:]}"