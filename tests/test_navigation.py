import curses

import pytest

from gitcurses.menus import build_menus
from gitcurses.navigation import Action, MenuNavigator
from gitcurses.scrolling import OutputView

ENTER = ord("\n")
ESC = 27
TAB = ord("\t")


def _menus():
    return build_menus(
        {
            "menus": [
                {
                    "name": "Git",
                    "items": [
                        {"label": "Status", "command": "status", "description": "Show status"},
                        {"label": "Switch Branch", "command": "checkout", "description": "Switch"},
                    ],
                },
                {
                    "name": "Branch",
                    "items": [
                        {"label": "Merge", "command": "merge", "description": "Merge a branch"},
                    ],
                },
                {"name": "Help", "items": []},
            ]
        }
    )


@pytest.fixture
def nav():
    view = OutputView(3)
    view.set_text("a\nb\nc\nd\ne\n")
    return MenuNavigator(_menus(), view)


def test_right_and_left_cycle_menus(nav):
    assert nav.handle_key(curses.KEY_RIGHT) == Action(redraw_menu=True)
    assert nav.selected_menu == 1
    nav.handle_key(curses.KEY_LEFT)
    nav.handle_key(curses.KEY_LEFT)
    assert nav.selected_menu == len(nav.menus) - 1


def test_right_ignored_while_submenu_open(nav):
    nav.handle_key(ENTER)
    assert nav.handle_key(curses.KEY_RIGHT) == Action()
    assert nav.selected_menu == 0


def test_enter_opens_submenu_and_refreshes_branches(nav):
    action = nav.handle_key(ENTER)
    assert action.refresh_branches and action.redraw_menu
    assert nav.show_submenu
    assert nav.selected_submenu == 0


def test_enter_on_help_menu_runs_help(nav):
    nav.handle_key(curses.KEY_LEFT)
    assert nav.handle_key(ENTER).command == "help"
    assert not nav.show_submenu


def test_enter_on_item_runs_its_command(nav):
    nav.handle_key(ENTER)
    action = nav.handle_key(ENTER)
    assert action.command == "status"
    assert not nav.show_submenu


def test_dynamic_submenu_checkout(nav):
    nav.menus[0].items[1].dynamic_items = ["main", "dev"]
    nav.handle_key(ENTER)
    nav.handle_key(curses.KEY_DOWN)
    assert nav.current_item().label == "Switch Branch"
    nav.handle_key(ENTER)
    assert nav.show_dynamic
    nav.handle_key(curses.KEY_DOWN)
    assert nav.selected_dynamic == 1
    action = nav.handle_key(ENTER)
    assert action.command == "checkout dev"
    assert not nav.show_dynamic and not nav.show_submenu


def test_dynamic_selection_wraps_upward(nav):
    nav.menus[0].items[1].dynamic_items = ["main", "dev"]
    nav.handle_key(ENTER)
    nav.handle_key(curses.KEY_DOWN)
    nav.handle_key(ENTER)
    nav.handle_key(curses.KEY_UP)
    assert nav.selected_dynamic == 1


def test_escape_closes_dynamic_then_submenu(nav):
    nav.menus[0].items[0].dynamic_items = ["main"]
    nav.handle_key(ENTER)
    nav.handle_key(ENTER)
    assert nav.show_dynamic
    nav.handle_key(ESC)
    assert not nav.show_dynamic and nav.show_submenu
    nav.handle_key(ESC)
    assert not nav.show_submenu
    assert nav.handle_key(ESC) == Action()


def test_submenu_moves_reset_dynamic(nav):
    nav.menus[0].items[0].dynamic_items = []
    nav.handle_key(ENTER)
    nav.handle_key(curses.KEY_UP)
    assert nav.selected_submenu == 1
    assert not nav.show_dynamic


def test_description_only_with_open_submenu(nav):
    assert nav.current_description() == ""
    nav.handle_key(ENTER)
    assert nav.current_description() == "Show status"


def test_tab_toggles_scroll_mode(nav):
    nav.handle_key(TAB)
    assert not nav.menu_active
    nav.handle_key(TAB)
    assert nav.menu_active


def test_scrolling_keys(nav):
    nav.handle_key(TAB)
    assert nav.handle_key(ord("j")).redraw_output
    assert nav.view.position == 1
    nav.handle_key(ord("G"))
    assert nav.view.position == len(nav.view.lines) - nav.view.height
    assert nav.handle_key(ord("j")) == Action()
    nav.handle_key(ord("g"))
    assert nav.view.position == len(nav.view.lines) - nav.view.height
    nav.handle_key(ord("g"))
    assert nav.view.position == 0


def test_g_sequence_broken_by_other_key(nav):
    nav.handle_key(TAB)
    nav.handle_key(ord("G"))
    nav.handle_key(ord("g"))
    nav.handle_key(ord("x"))
    nav.handle_key(ord("g"))
    assert nav.view.position == len(nav.view.lines) - nav.view.height


def test_scroll_keys_ignored_in_menu_mode(nav):
    assert nav.handle_key(ord("j")) == Action()
    assert nav.view.position == 0
    assert nav.handle_key(curses.KEY_NPAGE) == Action()


def test_arrows_and_pages_scroll_when_output_focused(nav):
    nav.handle_key(TAB)
    nav.handle_key(curses.KEY_NPAGE)
    assert nav.view.position == len(nav.view.lines) - nav.view.height
    nav.handle_key(curses.KEY_UP)
    assert nav.view.position == len(nav.view.lines) - nav.view.height - 1
    nav.handle_key(curses.KEY_PPAGE)
    assert nav.view.position == 0
    assert nav.handle_key(curses.KEY_UP) == Action()


def test_input_requests(nav):
    assert nav.handle_key(ord("i")).read_input
    nav.handle_key(TAB)
    assert not nav.handle_key(ord("I")).read_input
    assert nav.handle_key(ENTER).read_input


def test_empty_menus_are_inert():
    nav = MenuNavigator([], OutputView(3))
    assert nav.handle_key(curses.KEY_RIGHT) == Action()
    assert nav.handle_key(ENTER) == Action()
    assert nav.current_item() is None
    assert nav.current_description() == ""