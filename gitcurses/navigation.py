"""Keyboard navigation of the menu bar, its drop-down menus and the output view."""

from __future__ import annotations

import curses
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from gitcurses.dialog import KEY_ENTER, KEY_ESCAPE, KEY_TAB
from gitcurses.menus import Menu, MenuItem, menu_description
from gitcurses.scrolling import OutputView

HELP_MENU = "Help"


@dataclass(frozen=True)
class Action:
    """What the screen has to do after a key press."""

    redraw_menu: bool = False
    redraw_output: bool = False
    read_input: bool = False
    refresh_branches: bool = False
    command: Optional[str] = None


class MenuNavigator:
    """Tracks menu selection and scroll mode, and turns keys into actions.

    While ``menu_active`` is true the arrow keys move through the menus;
    otherwise they and the vi-style keys scroll ``view``.
    """

    def __init__(self, menus: Sequence[Menu], view: OutputView) -> None:
        self.menus = menus
        self.view = view
        self.menu_active = True
        self.selected_menu = 0
        self.show_submenu = False
        self.selected_submenu = 0
        self.show_dynamic = False
        self.selected_dynamic = 0
        self._g_pressed = False

    # -- state queries -------------------------------------------------

    def _menu(self) -> Optional[Menu]:
        if 0 <= self.selected_menu < len(self.menus):
            return self.menus[self.selected_menu]
        return None

    def current_item(self) -> Optional[MenuItem]:
        """Return the highlighted item of the selected menu, if it has one."""
        menu = self._menu()
        if menu is None or not 0 <= self.selected_submenu < len(menu.items):
            return None
        return menu.items[self.selected_submenu]

    def _dynamic_items(self) -> list[str]:
        item = self.current_item()
        return item.dynamic_items if item is not None else []

    def current_description(self) -> str:
        """Return the description of the highlighted item while a submenu is open."""
        if not self.show_submenu:
            return ""
        menu = self._menu()
        item = self.current_item()
        if menu is None or item is None:
            return ""
        return menu_description(self.menus, menu.name, item.label)

    @property
    def _scrolling(self) -> bool:
        return not self.menu_active and not self.show_submenu and not self.show_dynamic

    # -- key handling --------------------------------------------------

    def handle_key(self, key: int) -> Action:
        """Apply one key press and return what has to be redrawn or run."""
        if key == KEY_TAB:
            self._g_pressed = False
            self.menu_active = not self.menu_active
            return Action(redraw_menu=True)
        if key in (ord("i"), ord("I")):
            return Action(read_input=self.menu_active)
        if key in (curses.KEY_LEFT, curses.KEY_RIGHT):
            return self._move_menu(-1 if key == curses.KEY_LEFT else 1)
        if key == ord("g"):
            return self._handle_g()
        if key == ord("G"):
            self._g_pressed = False
            if self._scrolling:
                self.view.to_bottom()
                return Action(redraw_output=True)
            return Action()
        if key in (ord("j"), ord("J")):
            self._g_pressed = False
            return Action(redraw_output=self._scrolling and self.view.line_down())
        if key in (ord("k"), ord("K")):
            self._g_pressed = False
            return Action(redraw_output=self._scrolling and self.view.line_up())
        if key in (curses.KEY_UP, curses.KEY_DOWN):
            return self._move_vertical(-1 if key == curses.KEY_UP else 1)
        if key == KEY_ENTER:
            return self._handle_enter()
        if key == KEY_ESCAPE:
            return self._handle_escape()
        if key == curses.KEY_PPAGE:
            if self.menu_active:
                return Action()
            self.view.page_up()
            return Action(redraw_output=True)
        if key == curses.KEY_NPAGE:
            if self.menu_active:
                return Action()
            self.view.page_down()
            return Action(redraw_output=True)
        self._g_pressed = False
        return Action()

    def _move_menu(self, step: int) -> Action:
        if self.show_submenu or not self.menu_active or not self.menus:
            return Action()
        self.selected_menu = (self.selected_menu + step) % len(self.menus)
        return Action(redraw_menu=True)

    def _handle_g(self) -> Action:
        if not self._scrolling:
            return Action()
        if self._g_pressed:
            self._g_pressed = False
            self.view.to_top()
            return Action(redraw_output=True)
        self._g_pressed = True
        return Action()

    def _move_vertical(self, step: int) -> Action:
        dynamic = self._dynamic_items()
        if self.show_dynamic and self.menu_active and dynamic:
            self.selected_dynamic = (self.selected_dynamic + step) % len(dynamic)
            return Action(redraw_menu=True)
        if self.show_submenu and self.menu_active:
            menu = self._menu()
            if menu is None or not menu.items:
                return Action()
            self.selected_submenu = (self.selected_submenu + step) % len(menu.items)
            self.show_dynamic = False
            return Action(redraw_menu=True)
        if not self.menu_active:
            moved = self.view.line_up() if step < 0 else self.view.line_down()
            return Action(redraw_output=moved)
        return Action()

    def _handle_enter(self) -> Action:
        if not self.menu_active:
            # Enter in scroll mode starts typing a command.
            return Action(read_input=not self.show_submenu)

        dynamic = self._dynamic_items()
        if not self.show_submenu:
            menu = self._menu()
            if menu is None:
                return Action()
            if menu.name == HELP_MENU:
                return Action(command="help")
            self.show_submenu = True
            self.selected_submenu = 0
            return Action(redraw_menu=True, refresh_branches=True)
        if not self.show_dynamic and dynamic:
            self.show_dynamic = True
            self.selected_dynamic = 0
            return Action(redraw_menu=True)
        item = self.current_item()
        if self.show_dynamic and dynamic and item is not None:
            command = f"{item.command} {dynamic[self.selected_dynamic]}"
            self.show_dynamic = False
            self.show_submenu = False
            return Action(redraw_menu=True, command=command)
        if item is None:
            return Action()
        self.show_submenu = False
        return Action(redraw_menu=True, command=item.command)

    def _handle_escape(self) -> Action:
        if not self.menu_active:
            return Action()
        if self.show_dynamic:
            self.show_dynamic = False
            self.selected_dynamic = 0
            return Action(redraw_menu=True)
        if self.show_submenu:
            self.show_submenu = False
            self.selected_submenu = 0
            return Action(redraw_menu=True)
        return Action()