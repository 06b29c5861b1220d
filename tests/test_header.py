from pathlib import Path

from vaultscan import header
from vaultscan.models import KeyMatch
from vaultscan.state import AppState, Tab
from vaultscan.terminal import Color, Rect


class FakeWindow:
    def __init__(self):
        self.writes = []

    def addnstr(self, y, x, text, n, attr=0):
        self.writes.append((y, x, text[:n], attr))

    def text(self):
        return "\n".join(w[2] for w in self.writes)


def _match(n=1):
    return KeyMatch(Path("a.env"), n, "OpenAI API Key", "****", True)


def test_tab_title_done_and_running():
    assert header.tab_title("ENV", 3, True, 0) == " ENV (3) ✓ "
    assert header.tab_title("FILES", 0, False, 1) == " FILES (0) \\ "


def test_accent_colors():
    assert header.accent_color(Tab.ENV) is Color.GREEN
    assert header.accent_color(Tab.IDES) is Color.MAGENTA
    assert header.accent_color(Tab.FILES) is Color.CYAN


def test_hotkeys_width_matches_hint():
    assert header.hotkeys_width() == len("[E] ENV  [I] IDES  [F] FILES  [TAB] NEXT  [Q] QUIT")


def test_tabs_width_grows_with_count_digits():
    state = AppState(scan_path=".")
    before = header.tabs_width(state, 0)
    for n in range(10):
        state.push_env(_match(n), 5)
    assert header.tabs_width(state, 0) == before + 1


def test_logo_and_preferred_height():
    lines = header.logo_lines()
    assert lines == ["Vault"]
    assert header.preferred_height() == 10


def test_render_shows_info_and_tabs():
    state = AppState(scan_path="/srv/project")
    state.push_env(_match(), 5)
    window = FakeWindow()
    header.render(window, state, Rect(0, 0, 140, header.preferred_height()), 0)
    text = window.text()
    assert "SCAN TARGET" in text
    assert "/srv/project" in text
    assert "FINDINGS" in text
    assert " ENV (1) - " in text
    assert "Vault" in text
    assert all(0 <= w[0] < header.preferred_height() for w in window.writes)


def test_render_tiny_area_only_draws_border():
    window = FakeWindow()
    header.render(window, AppState(scan_path="."), Rect(0, 0, 2, 2), 0)
    text = window.text()
    assert "SCAN TARGET" not in text
    assert "╭" in text