"""Running git commands and summarising repository state."""

from __future__ import annotations

import subprocess
from collections.abc import Callable

Runner = Callable[[str], str]

HELP_TEXT = (
    "Available commands:\n"
    "  status    - Show working tree status\n"
    "  branch    - List branches\n"
    "  log       - Show commit logs\n"
    "  add       - Add file contents to index\n"
    "  commit    - Record changes to repository\n"
    "  push      - Update remote refs\n"
    "  pull      - Fetch and integrate changes\n"
    "  help      - Show this help message\n"
    "  exit      - Exit the application\n"
)


class GitCommandError(RuntimeError):
    """Raised when a git command cannot be started."""


def shell_runner(command: str) -> str:
    """Run a command line through the shell and return its standard output."""
    try:
        completed = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise GitCommandError(f"could not start command: {exc}") from exc
    return completed.stdout


class GitCommandHandler:
    """Runs git commands and keeps track of the repository's local branches."""

    def __init__(self, runner: Runner = shell_runner) -> None:
        self._runner = runner
        self.local_branches: list[str] = []
        self.update_local_branches()

    def run_git(self, command: str) -> str:
        """Run ``git <command>`` and return its output."""
        return self._runner(f"git {command}")

    def get_local_branches(self) -> list[str]:
        """Return the names of local branches, or an empty list on failure."""
        try:
            output = self.run_git("branch --format='%(refname:short)'")
        except Exception:
            return []
        return [line for line in output.splitlines() if line]

    def update_local_branches(self) -> None:
        self.local_branches = self.get_local_branches()

    def current_branch(self) -> str:
        try:
            output = self.run_git("branch --show-current")
        except Exception:
            return "unknown"
        if not output:
            return "detached HEAD"
        return output[:-1]

    def repository_status(self) -> str:
        try:
            output = self.run_git("status --porcelain")
        except Exception:
            return "Error"
        return "Modified" if output else "Clean"

    def execute_command(self, command: str) -> str:
        """Run a user command and return it echoed together with its output."""
        cmd = command.lower()
        if cmd == "help":
            return HELP_TEXT

        try:
            if cmd == "add":
                full_command = "git add ."
                output = self.add_files()
            elif cmd.startswith("commit "):
                message = cmd[len("commit "):]
                full_command = f'git commit -m "{message}"'
                output = self.commit_changes(message)
            elif cmd == "push":
                full_command = "git push"
                output = self.push_changes()
            elif cmd == "pull":
                full_command = "git fetch"
                output = self.pull_changes()
            elif command in self.local_branches:
                full_command = f"git checkout {command}"
                output = self.run_git(cmd)
                self.update_local_branches()
            else:
                full_command = f"git {cmd}"
                output = self.run_git(cmd)
        except Exception as exc:
            return f"Error: {exc}\n"
        return f"$ {full_command}\n\n{output}"

    def is_local_branch(self, branch_name: str) -> bool:
        return branch_name in self.local_branches

    def add_files(self, files: str = ".") -> str:
        try:
            output = self.run_git(f"add {files}")
        except Exception as exc:
            return f"Error adding files: {exc}"
        return output or "Files added successfully."

    def commit_changes(self, message: str) -> str:
        if not message:
            return "Error: Commit message cannot be empty."
        escaped = message.replace('"', '\\"')
        try:
            output = self.run_git(f'commit -m "{escaped}"')
        except Exception as exc:
            return f"Error committing changes: {exc}"
        return output or "No changes to commit."

    def push_changes(self, remote: str = "origin", branch: str = "") -> str:
        command = f"push {remote}"
        if branch:
            command += f" {branch}"
        try:
            output = self.run_git(command)
        except Exception as exc:
            return f"Error pushing changes: {exc}"
        return output or "No changes to push."

    def pull_changes(self, remote: str = "origin", branch: str = "") -> str:
        command = f"pull {remote}"
        if branch:
            command += f" {branch}"
        try:
            output = self.run_git(command)
        except Exception as exc:
            return f"Error pulling changes: {exc}"
        return output or "No changes to pull."