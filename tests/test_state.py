from pathlib import Path

import pytest

from vaultscan.models import KeyMatch
from vaultscan.state import AppAction, AppState, ListState, Tab


def make_match(n):
    return KeyMatch(
        file_path=Path(f"/project/file{n}.txt"),
        line_number=n + 1,
        provider="OpenAI API Key",
        key="****",
        hardcoded=True,
    )


def filled(count, viewport_h):
    ls = ListState()
    for n in range(count):
        ls.push(make_match(n), viewport_h)
    return ls


def assert_visible(ls, viewport_h):
    assert ls.scroll <= ls.selected < ls.scroll + viewport_h
    assert ls.selected < len(ls.items)


def test_push_follows_tail():
    ls = filled(10, 3)
    assert ls.selected == len(ls.items) - 1
    assert ls.follow_tail
    assert_visible(ls, 3)


def test_move_up_stops_following():
    ls = filled(10, 3)
    ls.move_selection(-1, 3)
    assert not ls.follow_tail
    held = ls.selected
    ls.push(make_match(99), 3)
    assert ls.selected == held
    assert_visible(ls, 3)


def test_moving_back_to_last_resumes_following():
    ls = filled(5, 3)
    ls.move_selection(-1, 3)
    ls.move_selection(1, 3)
    assert ls.follow_tail
    assert ls.selected == len(ls.items) - 1


def test_move_selection_clamps():
    ls = filled(5, 3)
    fresh = ListState()
    ls.move_selection(-100, 3)
    assert ls.selected == fresh.selected
    assert ls.scroll == fresh.scroll
    ls.move_selection(100, 3)
    assert ls.selected == len(ls.items) - 1
    assert_visible(ls, 3)


def test_move_on_empty_list_is_ignored():
    ls = ListState()
    ls.move_selection(5, 3)
    assert ls.selected == ListState().selected
    assert ls.follow_tail


def test_page_moves_by_viewport():
    ls = filled(20, 4)
    before = ls.selected
    ls.page(-1, 4)
    assert ls.selected == before - 4
    assert_visible(ls, 4)
    ls.page(1, 4)
    assert ls.selected == before
    assert ls.follow_tail


def test_home_and_end():
    ls = filled(8, 3)
    fresh = ListState()
    ls.home(3)
    assert (ls.selected, ls.scroll) == (fresh.selected, fresh.scroll)
    assert not ls.follow_tail
    ls.end(3)
    assert ls.selected == len(ls.items) - 1
    assert ls.follow_tail
    assert_visible(ls, 3)


def test_zero_viewport_resets_position():
    ls = filled(4, 0)
    fresh = ListState()
    assert (ls.selected, ls.scroll) == (fresh.selected, fresh.scroll)
    assert len(ls) == 4


@pytest.mark.parametrize("viewport_h", [1, 2, 5])
def test_invariant_after_mixed_operations(viewport_h):
    ls = ListState()
    for n in range(12):
        ls.push(make_match(n), viewport_h)
        if n % 3 == 0:
            ls.move_selection(-2, viewport_h)
        if n % 4 == 1:
            ls.page(-1, viewport_h)
        assert_visible(ls, viewport_h)


def test_set_done():
    ls = ListState()
    ls.set_done()
    assert ls.done


def test_app_state_defaults_to_env():
    state = AppState("/project")
    assert state.tab is Tab.ENV
    assert state.active_list() is state.env


def test_push_routes_to_lists():
    state = AppState("/project")
    state.push_env(make_match(0), 5)
    state.push_ide(make_match(1), 5)
    state.push_ide(make_match(2), 5)
    state.push_file(make_match(3), 5)
    assert [len(state.env), len(state.ides), len(state.files)] == [1, 2, 1]


def test_done_flags_route_to_lists():
    state = AppState("/project")
    state.set_ide_done()
    assert (state.env.done, state.ides.done, state.files.done) == (False, True, False)
    state.set_env_done()
    state.set_files_done()
    assert state.env.done and state.files.done


def test_next_tab_cycle():
    state = AppState("/project")
    seen = []
    for _ in range(3):
        assert state.handle_key("right", 5) is AppAction.NONE
        seen.append(state.tab)
    assert seen == [Tab.FILES, Tab.IDES, Tab.ENV]


def test_prev_tab_cycle():
    state = AppState("/project")
    seen = []
    for _ in range(3):
        state.handle_key("left", 5)
        seen.append(state.tab)
    assert seen == [Tab.IDES, Tab.FILES, Tab.ENV]


def test_tab_key_advances():
    state = AppState("/project")
    state.handle_key("tab", 5)
    assert state.tab is Tab.FILES


@pytest.mark.parametrize(
    "key, tab",
    [("e", Tab.ENV), ("E", Tab.ENV), ("i", Tab.IDES), ("I", Tab.IDES), ("f", Tab.FILES), ("F", Tab.FILES)],
)
def test_direct_tab_keys(key, tab):
    state = AppState("/project", tab=Tab.IDES if tab is not Tab.IDES else Tab.ENV)
    assert state.handle_key(key, 5) is AppAction.NONE
    assert state.tab is tab


@pytest.mark.parametrize("key", ["q", "Q", "esc", "ctrl+c"])
def test_exit_keys(key):
    assert AppState("/project").handle_key(key, 5) is AppAction.EXIT


def test_plain_c_does_not_exit():
    assert AppState("/project").handle_key("c", 5) is AppAction.NONE


def test_navigation_only_touches_active_list():
    state = AppState("/project")
    for n in range(6):
        state.push_env(make_match(n), 3)
        state.push_file(make_match(n), 3)
    state.handle_key("f", 3)
    state.handle_key("up", 3)
    assert state.files.selected == len(state.files.items) - 2
    assert state.env.selected == len(state.env.items) - 1
    state.handle_key("home", 3)
    assert state.files.selected == state.files.scroll
    assert not state.files.follow_tail
    state.handle_key("end", 3)
    assert state.files.follow_tail
    state.handle_key("pageup", 3)
    assert state.files.selected == len(state.files.items) - 1 - 3
    state.handle_key("pagedown", 3)
    state.handle_key("down", 3)
    assert state.files.selected == len(state.files.items) - 1
    assert state.env.follow_tail