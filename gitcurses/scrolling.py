"""A scrollable view over lines of command output."""

from __future__ import annotations


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class OutputView:
    """Holds output lines and the scroll position of a window ``height`` lines tall."""

    def __init__(self, height: int) -> None:
        self.height = max(0, height)
        self.lines: list[str] = []
        self.position = 0

    @property
    def _max_position(self) -> int:
        return max(0, len(self.lines) - self.height)

    def _move_to(self, position: int) -> bool:
        new = min(max(0, position), self._max_position)
        changed = new != self.position
        self.position = new
        return changed

    def set_text(self, text: str) -> None:
        """Replace the content, keeping the scroll position where it still fits."""
        self.lines = _split_lines(text)
        self._move_to(self.position)

    def resize(self, height: int) -> None:
        self.height = max(0, height)
        self._move_to(self.position)

    def line_up(self) -> bool:
        return self._move_to(self.position - 1)

    def line_down(self) -> bool:
        return self._move_to(self.position + 1)

    def page_up(self) -> bool:
        return self._move_to(self.position - self.height)

    def page_down(self) -> bool:
        return self._move_to(self.position + self.height)

    def to_top(self) -> bool:
        return self._move_to(0)

    def to_bottom(self) -> bool:
        return self._move_to(self._max_position)

    def visible_lines(self) -> list[str]:
        return self.lines[self.position:self.position + self.height]

    def scrollbar(self) -> tuple[int, int] | None:
        """Return ``(offset, length)`` of the scrollbar thumb, or None if all fits."""
        total = len(self.lines)
        if total <= self.height:
            return None
        length = max(1, int(self.height * (self.height / total)))
        offset = (self.position * (self.height - length)) // (total - self.height)
        return offset, length