import pytest

from vaultscan import layout
from vaultscan.footer import HINT
from vaultscan.state import AppState
from vaultscan.terminal import Rect


class FakeWindow:
    def __init__(self, height, width):
        self.size = (height, width)
        self.writes = []
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.erased += 1

    def refresh(self):
        self.refreshed += 1

    def addnstr(self, y, x, text, n, attr=0):
        self.writes.append((y, x, text[:n], attr))


def test_viewport_small_terminal_is_zero():
    assert layout.viewport_height(0) == 0
    assert layout.viewport_height(5) == 0


@pytest.mark.parametrize("height", [30, 40, 77])
def test_viewport_matches_body_inner_height(height):
    _, body_area, _ = layout.root_areas(Rect(0, 0, 100, height))
    assert layout.viewport_height(height) == body_area.height - 2
    assert layout.viewport_height(height + 1) == layout.viewport_height(height) + 1


@pytest.mark.parametrize("height", [0, 3, 11, 12, 50])
def test_root_areas_tile_the_screen(height):
    top, middle, bottom = layout.root_areas(Rect(0, 0, 80, height))
    assert top.height + middle.height + bottom.height == height
    assert middle.y == top.y + top.height
    assert bottom.y == middle.y + middle.height
    assert all(part.height >= 0 for part in (top, middle, bottom))


def test_footer_keeps_two_rows_on_large_screen():
    _, _, bottom = layout.root_areas(Rect(0, 0, 80, 40))
    assert bottom.height == layout.FOOTER_HEIGHT
    assert bottom.y + bottom.height == 40


def test_draw_renders_all_panels():
    window = FakeWindow(30, 140)
    layout.draw(window, AppState(scan_path="/srv/app"), 0)
    texts = [w[2] for w in window.writes]
    assert any("SCAN TARGET" in t for t in texts)
    assert "Waiting for results..." in texts
    assert HINT in texts
    assert window.erased == 1 and window.refreshed == 1
    assert all(0 <= w[0] < 30 for w in window.writes)