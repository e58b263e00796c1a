"""Turning menu and typed commands into git invocations, asking for input where needed."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, Protocol

from gitcurses.dialog import DialogResult

Ask = Callable[[str, str], DialogResult]
HelpProvider = Callable[[], str]


class ExitRequested(Exception):
    """Raised when the user asks to leave the application."""


class _Handler(Protocol):
    def execute_command(self, command: str) -> str: ...


# Commands that ask for one value, which is substituted into a git command line.
_PROMPTED: dict[str, tuple[str, str, str]] = {
    "commit": ("Commit Message", "Please provide a commit message:", 'commit -m "{0}"'),
    "add": ("Add Files", "Enter file(s) to add (use * for all):", "add {0}"),
    "branch": ("Create Branch", "Enter new branch name:", "branch {0}"),
    "checkout": ("Checkout", "Enter branch name to checkout:", "checkout {0}"),
    "merge": ("Merge", "Enter branch name to merge:", "merge {0}"),
    "push": ("Push", "Enter remote and branch (e.g., origin main):", "push {0}"),
    "pull": ("Pull", "Enter remote and branch (e.g., origin main):", "pull {0}"),
    "reset": ("Reset", "Enter commit hash or HEAD~n:", "reset {0}"),
    "revert": ("Revert", "Enter commit hash to revert:", "revert {0}"),
    "cherry-pick": ("Cherry-pick", "Enter commit hash to cherry-pick:", "cherry-pick {0}"),
    "rebase": ("Rebase", "Enter branch to rebase onto:", "rebase {0}"),
    "remote remove": ("Remove Remote", "Enter remote name to remove:", "remote remove {0}"),
    "show": ("Show Commit", "Enter commit hash:", "show {0}"),
    "blame": ("Blame", "Enter file path:", "blame {0}"),
    "clean": (
        "Clean",
        "Enter -f to force, -d for directories, -x for ignored files:",
        "clean {0}",
    ),
    "clone": ("Clone", "Enter repository URL:", "clone {0}"),
}

# Commands run straight away with a fixed git command line.
_DIRECT: dict[str, str] = {
    "stash pop": "stash pop",
    "stash list": "stash list",
    "remote -v": "remote -v",
    "log": "log --oneline --graph --all",
    "status": "status",
    "diff": "diff",
    "init": "init",
}


class CommandDispatcher:
    """Runs a command chosen from the menu or typed by the user.

    ``ask(title, prompt)`` shows an input dialog and returns its result;
    ``help_provider()`` returns the help text.
    """

    def __init__(self, handler: _Handler, ask: Ask, help_provider: HelpProvider) -> None:
        self.handler = handler
        self.ask = ask
        self.help_provider = help_provider

    def _prompt(self, title: str, prompt: str) -> Optional[str]:
        result = self.ask(title, prompt)
        return result.input if result.confirmed else None

    def dispatch(self, command: str) -> Optional[str]:
        """Run ``command`` and return the text to show, or None if a dialog was cancelled.

        Raises ExitRequested for the ``exit`` command.
        """
        cmd = command.lower()

        if cmd == "exit":
            raise ExitRequested()
        if cmd == "help":
            return self.help_provider()

        if cmd in _PROMPTED:
            title, prompt, template = _PROMPTED[cmd]
            value = self._prompt(title, prompt)
            if value is None:
                return None
            return self.handler.execute_command(template.format(value))

        if cmd in _DIRECT:
            return self.handler.execute_command(_DIRECT[cmd])

        if cmd == "tag":
            return self._tag()
        if cmd == "remote add":
            return self._remote_add()
        if cmd == "stash":
            return self._stash()
        if cmd == "fetch":
            return self._fetch()

        return self.handler.execute_command(command)

    def _tag(self) -> Optional[str]:
        name = self._prompt("Create Tag", "Enter tag name:")
        if name is None:
            return None
        message = self._prompt("Tag Message", "Enter tag message:")
        if message is None:
            return None
        return self.handler.execute_command(f'tag -a {name} -m "{message}"')

    def _remote_add(self) -> Optional[str]:
        name = self._prompt("Remote Name", "Enter remote name (e.g., origin):")
        if name is None:
            return None
        url = self._prompt("Remote URL", "Enter remote URL:")
        if url is None:
            return None
        return self.handler.execute_command(f"remote add {name} {url}")

    def _stash(self) -> Optional[str]:
        message = self._prompt("Stash", "Enter stash message (optional):")
        if message is None:
            return None
        if not message:
            return self.handler.execute_command("stash")
        return self.handler.execute_command(f'stash push -m "{message}"')

    def _fetch(self) -> Optional[str]:
        remote = self._prompt("Fetch", "Enter remote name (optional):")
        if remote is None:
            return None
        if not remote:
            return self.handler.execute_command("fetch --all")
        return self.handler.execute_command(f"fetch {remote}")