"""A modal single-line text input dialog with OK and Cancel buttons."""

from __future__ import annotations

import curses
import enum
from dataclasses import dataclass

KEY_TAB = ord("\t")
KEY_ENTER = ord("\n")
KEY_ESCAPE = 27
KEY_DELETE = 127


@dataclass(frozen=True)
class DialogResult:
    confirmed: bool
    input: str


class Focus(enum.IntEnum):
    INPUT = 0
    OK = 1
    CANCEL = 2

    def next(self) -> Focus:
        return Focus((self + 1) % len(Focus))

    def previous(self) -> Focus:
        return Focus((self - 1) % len(Focus))


class InputDialogState:
    """Editing state of the dialog, driven by key codes."""

    def __init__(self, default_value: str = "", max_length: int = 50) -> None:
        self.text = default_value
        self.cursor = len(default_value)
        self.max_length = max_length
        self.focus = Focus.INPUT
        self.done = False
        self.confirmed = False

    def handle_key(self, key: int) -> bool:
        """Apply one key press; return whether the dialog is finished."""
        if key == KEY_TAB:
            self.focus = self.focus.next()
        elif key == curses.KEY_BTAB:
            self.focus = self.focus.previous()
        elif key == KEY_ENTER:
            if self.focus is Focus.OK and self.text:
                self.confirmed = True
                self.done = True
            elif self.focus is Focus.CANCEL:
                self.done = True
        elif key == KEY_ESCAPE:
            self.done = True
        elif key in (curses.KEY_BACKSPACE, KEY_DELETE):
            if self.focus is Focus.INPUT and self.cursor > 0:
                self.text = self.text[: self.cursor - 1] + self.text[self.cursor:]
                self.cursor -= 1
        elif (
            self.focus is Focus.INPUT
            and 32 <= key <= 126
            and len(self.text) < self.max_length
        ):
            self.text = self.text[: self.cursor] + chr(key) + self.text[self.cursor:]
            self.cursor += 1
        return self.done

    def result(self) -> DialogResult:
        return DialogResult(self.confirmed, self.text)


def _put(window, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


class Dialog:
    """Centred input dialog drawn over a curses screen."""

    def __init__(self, screen, width: int = 60, height: int = 7) -> None:
        self.screen = screen
        self.width = width
        self.height = height

    def show(self, title: str, prompt: str, default_value: str = "") -> DialogResult:
        max_y, max_x = self.screen.getmaxyx()
        start_y = (max_y - self.height) // 2
        start_x = (max_x - self.width) // 2

        window = curses.newwin(self.height, self.width, start_y, start_x)
        window.box()
        window.keypad(True)
        input_window = window.derwin(3, self.width - 4, 3, 2)
        input_window.box()
        window.refresh()
        input_window.refresh()

        state = InputDialogState(default_value)
        while not state.done:
            self._draw(window, input_window, title, prompt, state)
            state.handle_key(window.getch())

        del input_window, window
        self.screen.touchwin()
        self.screen.refresh()
        return state.result()

    @staticmethod
    def _draw(window, input_window, title: str, prompt: str,
              state: InputDialogState) -> None:
        window.erase()
        window.box()
        _put(window, 0, 2, f" {title} ")
        _put(window, 2, 2, prompt)

        input_window.erase()
        input_window.box()
        if state.focus is Focus.INPUT:
            input_window.attron(curses.A_DIM)
            input_window.box()
            input_window.attroff(curses.A_DIM)
        _put(input_window, 1, 1, state.text)
        try:
            input_window.move(1, state.cursor + 1)
        except curses.error:
            pass
        input_window.refresh()

        for offset, (focus, label) in enumerate(
            ((Focus.OK, "OK"), (Focus.CANCEL, "Cancel"))
        ):
            attr = curses.A_REVERSE if state.focus is focus else 0
            _put(window, 5, 15 + offset * 20, f"[ {label} ]", attr)
        window.refresh()