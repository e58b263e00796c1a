import pytest

from gitcurses.commands import CommandDispatcher, ExitRequested
from gitcurses.dialog import DialogResult


class FakeHandler:
    def __init__(self):
        self.commands = []

    def execute_command(self, command):
        self.commands.append(command)
        return f"ran {command}"


class FakeAsk:
    def __init__(self, *results):
        self.results = list(results)
        self.titles = []

    def __call__(self, title, prompt):
        self.titles.append(title)
        return self.results.pop(0)


def ok(text):
    return DialogResult(True, text)


CANCEL = DialogResult(False, "")


def make(*results, help_text="HELP TEXT"):
    handler = FakeHandler()
    ask = FakeAsk(*results)
    dispatcher = CommandDispatcher(handler, ask, lambda: help_text)
    return dispatcher, handler, ask


@pytest.mark.parametrize("command", ["exit", "EXIT", "Exit"])
def test_exit_raises(command):
    dispatcher, handler, _ = make()
    with pytest.raises(ExitRequested):
        dispatcher.dispatch(command)
    assert handler.commands == []


def test_help_uses_provider():
    dispatcher, handler, _ = make(help_text="some help")
    assert dispatcher.dispatch("Help") == "some help"
    assert handler.commands == []


def test_commit_confirmed():
    dispatcher, handler, ask = make(ok("fix bug"))
    out = dispatcher.dispatch("commit")
    assert handler.commands == ['commit -m "fix bug"']
    assert out == 'ran commit -m "fix bug"'
    assert ask.titles == ["Commit Message"]


@pytest.mark.parametrize(
    "command,title",
    [
        ("commit", "Commit Message"),
        ("add", "Add Files"),
        ("branch", "Create Branch"),
        ("clone", "Clone"),
        ("tag", "Create Tag"),
        ("remote add", "Remote Name"),
        ("stash", "Stash"),
        ("fetch", "Fetch"),
    ],
)
def test_cancel_runs_nothing(command, title):
    dispatcher, handler, ask = make(CANCEL)
    assert dispatcher.dispatch(command) is None
    assert handler.commands == []
    assert ask.titles == [title]


@pytest.mark.parametrize(
    "command,value,expected",
    [
        ("add", "main.c", "add main.c"),
        ("branch", "feature", "branch feature"),
        ("checkout", "dev", "checkout dev"),
        ("merge", "dev", "merge dev"),
        ("push", "origin main", "push origin main"),
        ("pull", "origin main", "pull origin main"),
        ("reset", "HEAD~1", "reset HEAD~1"),
        ("revert", "abc123", "revert abc123"),
        ("cherry-pick", "abc123", "cherry-pick abc123"),
        ("rebase", "main", "rebase main"),
        ("remote remove", "origin", "remote remove origin"),
        ("show", "abc123", "show abc123"),
        ("blame", "README", "blame README"),
        ("clean", "-f", "clean -f"),
        ("clone", "https://example.com/repo.git", "clone https://example.com/repo.git"),
    ],
)
def test_prompted_commands(command, value, expected):
    dispatcher, handler, _ = make(ok(value))
    assert dispatcher.dispatch(command) == f"ran {expected}"
    assert handler.commands == [expected]


@pytest.mark.parametrize(
    "command,expected",
    [
        ("log", "log --oneline --graph --all"),
        ("status", "status"),
        ("diff", "diff"),
        ("init", "init"),
        ("stash pop", "stash pop"),
        ("stash list", "stash list"),
        ("remote -v", "remote -v"),
    ],
)
def test_direct_commands(command, expected):
    dispatcher, handler, ask = make()
    dispatcher.dispatch(command)
    assert handler.commands == [expected]
    assert ask.titles == []


def test_tag_asks_twice():
    dispatcher, handler, ask = make(ok("v1"), ok("release"))
    dispatcher.dispatch("tag")
    assert handler.commands == ['tag -a v1 -m "release"']
    assert ask.titles == ["Create Tag", "Tag Message"]


def test_tag_cancel_second_dialog():
    dispatcher, handler, ask = make(ok("v1"), CANCEL)
    assert dispatcher.dispatch("tag") is None
    assert handler.commands == []
    assert ask.titles == ["Create Tag", "Tag Message"]


def test_remote_add():
    dispatcher, handler, ask = make(ok("origin"), ok("https://example.com/r.git"))
    dispatcher.dispatch("remote add")
    assert handler.commands == ["remote add origin https://example.com/r.git"]
    assert ask.titles == ["Remote Name", "Remote URL"]


def test_stash_with_and_without_message():
    dispatcher, handler, _ = make(ok(""), ok("wip"))
    dispatcher.dispatch("stash")
    dispatcher.dispatch("stash")
    assert handler.commands == ["stash", 'stash push -m "wip"']


def test_fetch_with_and_without_remote():
    dispatcher, handler, _ = make(ok(""), ok("upstream"))
    dispatcher.dispatch("fetch")
    dispatcher.dispatch("fetch")
    assert handler.commands == ["fetch --all", "fetch upstream"]


def test_unknown_command_passed_unchanged():
    dispatcher, handler, _ = make()
    assert dispatcher.dispatch("Feature-X") == "ran Feature-X"
    assert handler.commands == ["Feature-X"]


def test_matching_is_case_insensitive():
    dispatcher, handler, _ = make()
    dispatcher.dispatch("LOG")
    assert handler.commands == ["log --oneline --graph --all"]