"""Navigation and selection state for the dashboard.

Keys given to :meth:`AppState.handle_key` are names: a single character such
as ``"q"`` or ``"E"``, ``"ctrl+c"``, or one of ``"esc"``, ``"left"``,
``"right"``, ``"tab"``, ``"up"``, ``"down"``, ``"pageup"``, ``"pagedown"``,
``"home"`` and ``"end"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .models import KeyMatch


class Tab(Enum):
    """The view shown in the main panel."""

    ENV = "env"
    IDES = "ides"
    FILES = "files"


class AppAction(Enum):
    """What the event loop should do after a key press."""

    NONE = "none"
    EXIT = "exit"


_NEXT_TAB = {Tab.ENV: Tab.FILES, Tab.FILES: Tab.IDES, Tab.IDES: Tab.ENV}
_PREV_TAB = {after: before for before, after in _NEXT_TAB.items()}


@dataclass
class ListState:
    """A growing list of matches with a selection and a scroll offset.

    While ``follow_tail`` is set, newly pushed items move the selection to the
    latest entry.
    """

    items: list[KeyMatch] = field(default_factory=list)
    done: bool = False
    selected: int = 0
    scroll: int = 0
    follow_tail: bool = True

    def __len__(self) -> int:
        return len(self.items)

    def set_done(self) -> None:
        """Mark the scanner feeding this list as finished."""
        self.done = True

    def push(self, match: KeyMatch, viewport_h: int) -> None:
        """Append a match, following the tail when enabled."""
        if self.follow_tail:
            self.selected = len(self.items)
        elif not self.items:
            self.selected = 0
        self.items.append(match)
        self._ensure_visible(viewport_h)

    def home(self, viewport_h: int) -> None:
        """Select the first item and stop following the tail."""
        self.selected = 0
        self.follow_tail = False
        self._ensure_visible(viewport_h)

    def end(self, viewport_h: int) -> None:
        """Select the last item and resume following the tail."""
        if self.items:
            self.selected = len(self.items) - 1
        self.follow_tail = True
        self._ensure_visible(viewport_h)

    def move_selection(self, delta: int, viewport_h: int) -> None:
        """Move the selection by ``delta`` rows, clamped to the list."""
        if not self.items:
            return
        last = len(self.items) - 1
        self.selected = max(0, min(self.selected + delta, last))
        self.follow_tail = self.selected == last
        self._ensure_visible(viewport_h)

    def page(self, delta_pages: int, viewport_h: int) -> None:
        """Move the selection by whole pages of ``viewport_h`` rows."""
        self.move_selection(delta_pages * max(viewport_h, 1), viewport_h)

    def _ensure_visible(self, viewport_h: int) -> None:
        if viewport_h == 0 or not self.items:
            self.scroll = 0
            self.selected = 0
            return
        self.selected = min(self.selected, len(self.items) - 1)
        if self.selected < self.scroll:
            self.scroll = self.selected
        elif self.selected >= self.scroll + viewport_h:
            self.scroll = self.selected + 1 - viewport_h


@dataclass
class AppState:
    """All state the dashboard renders: the scan path, active tab and three lists."""

    scan_path: str
    tab: Tab = Tab.ENV
    env: ListState = field(default_factory=ListState)
    ides: ListState = field(default_factory=ListState)
    files: ListState = field(default_factory=ListState)

    def active_list(self) -> ListState:
        """Return the list shown by the active tab."""
        if self.tab is Tab.ENV:
            return self.env
        if self.tab is Tab.IDES:
            return self.ides
        return self.files

    def push_env(self, match: KeyMatch, viewport_h: int) -> None:
        self.env.push(match, viewport_h)

    def push_ide(self, match: KeyMatch, viewport_h: int) -> None:
        self.ides.push(match, viewport_h)

    def push_file(self, match: KeyMatch, viewport_h: int) -> None:
        self.files.push(match, viewport_h)

    def set_env_done(self) -> None:
        self.env.set_done()

    def set_ide_done(self) -> None:
        self.ides.set_done()

    def set_files_done(self) -> None:
        self.files.set_done()

    def handle_key(self, key: str, viewport_h: int) -> AppAction:
        """Apply a key press and tell the event loop whether to exit."""
        if key in ("ctrl+c", "esc", "q", "Q"):
            return AppAction.EXIT

        if key == "left":
            self.tab = _PREV_TAB[self.tab]
        elif key in ("right", "tab"):
            self.tab = _NEXT_TAB[self.tab]
        elif key in ("e", "E"):
            self.tab = Tab.ENV
        elif key in ("i", "I"):
            self.tab = Tab.IDES
        elif key in ("f", "F"):
            self.tab = Tab.FILES
        elif key == "up":
            self.active_list().move_selection(-1, viewport_h)
        elif key == "down":
            self.active_list().move_selection(1, viewport_h)
        elif key == "pageup":
            self.active_list().page(-1, viewport_h)
        elif key == "pagedown":
            self.active_list().page(1, viewport_h)
        elif key == "home":
            self.active_list().home(viewport_h)
        elif key == "end":
            self.active_list().end(viewport_h)
        return AppAction.NONE