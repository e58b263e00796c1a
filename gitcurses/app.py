"""The full-screen terminal front end: menu bar, output pane, command line and status bar."""

from __future__ import annotations

import argparse
import curses
from collections.abc import Sequence
from typing import Optional

from gitcurses.commands import CommandDispatcher, ExitRequested
from gitcurses.dialog import Dialog
from gitcurses.githandler import GitCommandHandler
from gitcurses.menus import help_text, load_help, load_menus, refresh_branch_items
from gitcurses.navigation import Action, MenuNavigator
from gitcurses.scrolling import OutputView

MENU_HEIGHT = 3
INPUT_HEIGHT = 3
STATUS_HEIGHT = 1
SUBMENU_WIDTH = 20
DYNAMIC_SUBMENU_WIDTH = 30
INPUT_LIMIT = 255
PROMPT = "git> "

_PAIR_GREEN = 1
_PAIR_YELLOW = 2
_PAIR_MENU = 3
_PAIR_SELECTED = 4
_PAIR_STATUS = 5


def _put(window, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _put_char(window, y: int, x: int, char: int) -> None:
    try:
        window.addch(y, x, char)
    except curses.error:
        pass


class GitCursesApp:
    """Interactive git front end drawn on a curses screen.

    Windows are created when ``run`` starts, so the application state
    (menus, help, navigation, command dispatch) can be built without a terminal.
    """

    def __init__(
        self,
        screen,
        handler: Optional[GitCommandHandler] = None,
        menus_path: str = "menus.json",
        help_path: str = "help.json",
    ) -> None:
        self.screen = screen
        self.handler = handler if handler is not None else GitCommandHandler()
        self.menus = load_menus(menus_path)
        self.help_data = load_help(help_path)
        refresh_branch_items(self.menus, self.handler.get_local_branches())
        self.view = OutputView(0)
        self.navigator = MenuNavigator(self.menus, self.view)
        self.dialog = Dialog(screen)
        self.dispatcher = CommandDispatcher(self.handler, self.dialog.show, self._help)
        self.history: list[str] = []
        self._colors = False
        self._menu_win = None
        self._output_win = None
        self._input_win = None
        self._status_win = None

    def _help(self) -> str:
        return help_text(self.help_data)

    def status_text(self) -> str:
        """Return the right-hand status bar text: ``branch (state)``."""
        branch = self.handler.current_branch()
        status = self.handler.repository_status()
        return f"{branch} ({status})"

    # -- terminal setup ---------------------------------------------------

    def _init_terminal(self) -> None:
        curses.noecho()
        curses.cbreak()
        self.screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            try:
                curses.start_color()
                curses.init_pair(_PAIR_GREEN, curses.COLOR_GREEN, curses.COLOR_BLACK)
                curses.init_pair(_PAIR_YELLOW, curses.COLOR_YELLOW, curses.COLOR_BLACK)
                curses.init_pair(_PAIR_MENU, curses.COLOR_CYAN, curses.COLOR_BLACK)
                curses.init_pair(_PAIR_SELECTED, curses.COLOR_WHITE, curses.COLOR_BLUE)
                curses.init_pair(_PAIR_STATUS, curses.COLOR_BLACK, curses.COLOR_WHITE)
                self._colors = True
            except curses.error:
                self._colors = False

    def _color(self, pair: int) -> int:
        return curses.color_pair(pair) if self._colors else 0

    def _create_windows(self) -> None:
        max_y, max_x = self.screen.getmaxyx()
        output_height = max(3, max_y - MENU_HEIGHT - INPUT_HEIGHT - STATUS_HEIGHT)

        self._menu_win = curses.newwin(MENU_HEIGHT, max_x, 0, 0)
        self._output_win = curses.newwin(output_height, max_x, MENU_HEIGHT, 0)
        self._output_win.scrollok(True)
        self._input_win = curses.newwin(INPUT_HEIGHT, max_x, MENU_HEIGHT + output_height, 0)
        self._status_win = curses.newwin(
            STATUS_HEIGHT, max_x, MENU_HEIGHT + output_height + INPUT_HEIGHT, 0
        )
        self._status_win.bkgd(" ", self._color(_PAIR_STATUS))
        for window in (self._menu_win, self._output_win, self._input_win, self._status_win):
            window.keypad(True)

        self.view.resize(output_height - 2)

    def _draw_all(self) -> None:
        self.screen.clear()
        self.screen.refresh()
        self._draw_menu()
        self._display_output()
        self._input_win.erase()
        self._input_win.box()
        self._input_win.refresh()
        self._update_status()
        curses.doupdate()

    def _resize(self) -> None:
        self._create_windows()
        self._draw_all()

    # -- drawing -----------------------------------------------------------

    def _draw_menu(self) -> None:
        nav = self.navigator
        menu_win = self._menu_win
        menu_win.erase()
        menu_win.box()
        x = 2
        submenu_x = 2
        for index, menu in enumerate(self.menus):
            selected = index == nav.selected_menu
            attr = self._color(_PAIR_SELECTED if selected else _PAIR_MENU)
            _put(menu_win, 1, x, menu.name, attr)
            if index < nav.selected_menu:
                submenu_x += len(menu.name) + 2
            x += len(menu.name) + 2

        # Repaint the windows underneath so closed popups disappear.
        for window in (self._output_win, self._input_win, self._status_win):
            window.touchwin()
            window.refresh()
        menu_win.refresh()

        item = nav.current_item()
        if nav.show_submenu and 0 <= nav.selected_menu < len(self.menus):
            labels = [entry.label for entry in self.menus[nav.selected_menu].items]
            self._draw_popup(labels, nav.selected_submenu, SUBMENU_WIDTH,
                             MENU_HEIGHT, submenu_x)
        if nav.show_dynamic and item is not None and item.dynamic_items:
            self._draw_popup(
                item.dynamic_items,
                nav.selected_dynamic,
                DYNAMIC_SUBMENU_WIDTH,
                MENU_HEIGHT + nav.selected_submenu + 1,
                submenu_x + SUBMENU_WIDTH,
            )
        curses.doupdate()

    def _draw_popup(self, labels: Sequence[str], selected: int, width: int,
                    y: int, x: int) -> None:
        try:
            popup = curses.newwin(len(labels) + 2, width, y, x)
        except curses.error:
            return
        popup.bkgd(" ", self._color(_PAIR_MENU))
        popup.box()
        for row, label in enumerate(labels):
            pair = _PAIR_SELECTED if row == selected else _PAIR_MENU
            _put(popup, row + 1, 1, label[: width - 2], self._color(pair))
        popup.refresh()

    def _display_output(self, text: Optional[str] = None) -> None:
        if text is not None:
            self.view.set_text(text)
        window = self._output_win
        window.erase()
        window.box()
        height, width = window.getmaxyx()
        content_width = max(0, width - 3)
        for row, line in enumerate(self.view.visible_lines()):
            _put(window, row + 1, 1, line[:content_width])

        thumb = self.view.scrollbar()
        if thumb is not None:
            for y in range(1, height - 1):
                _put_char(window, y, width - 2, curses.ACS_VLINE)
            offset, length = thumb
            for step in range(length):
                _put_char(window, 1 + offset + step, width - 2, curses.ACS_BLOCK)
        window.refresh()

    def _update_status(self) -> None:
        window = self._status_win
        window.erase()
        _, max_x = window.getmaxyx()
        text = self.status_text()
        _put(window, 0, 2, self.navigator.current_description())
        _put(window, 0, max(0, max_x - len(text) - 2), text)
        window.refresh()

    # -- input and commands ------------------------------------------------

    def _read_input(self) -> str:
        window = self._input_win
        window.erase()
        window.box()
        _put(window, 1, 1, PROMPT)
        window.refresh()
        curses.echo()
        try:
            raw = window.getstr(1, 1 + len(PROMPT), INPUT_LIMIT)
        except curses.error:
            raw = b""
        finally:
            curses.noecho()
        command = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else str(raw)
        if command:
            self.history.append(command)
        return command

    def _execute(self, command: str) -> None:
        output = self.dispatcher.dispatch(command)
        if command.lower() == "help":
            self._display_output(output or "")
            self._update_status()
            return
        if output is None:
            self._draw_menu()
            self._update_status()
            return
        self._display_output(output)
        self._update_status()
        self._draw_menu()

    def _apply(self, action: Action) -> None:
        if action.refresh_branches:
            refresh_branch_items(self.menus, self.handler.get_local_branches())
        if action.read_input:
            command = self._read_input()
            if command:
                self._execute(command)
            self._draw_menu()
        if action.command:
            self._execute(action.command)
        if action.redraw_menu:
            self._draw_menu()
            self._update_status()
            curses.doupdate()
        elif action.redraw_output:
            self._display_output()

    def _active_window(self):
        return self._menu_win if self.navigator.menu_active else self._output_win

    def run(self) -> None:
        """Run the interactive loop until the user enters ``exit``."""
        self._init_terminal()
        self._create_windows()
        self._draw_all()
        try:
            while True:
                key = self._active_window().getch()
                if key == curses.KEY_MOUSE:
                    continue
                if key == curses.KEY_RESIZE:
                    self._resize()
                    continue
                self._apply(self.navigator.handle_key(key))
        except ExitRequested:
            return


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gitcurses", description="A terminal menu interface for git."
    )
    parser.add_argument("--menus", default="menus.json",
                        help="JSON file describing the menu bar")
    parser.add_argument("--help-file", dest="help_file", default="help.json",
                        help="JSON file holding the help sections")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    def _start(screen) -> None:
        GitCursesApp(screen, GitCommandHandler(), args.menus, args.help_file).run()

    curses.wrapper(_start)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())