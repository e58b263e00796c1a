# gitcurses

gitcurses is a full-screen terminal front end for git, built on curses. It
has four parts:

- a menu bar along the top that gives access to common git operations,
- a scrollable pane that shows command output,
- a `git>` command line,
- a status bar that shows the current branch and whether the working tree is
  `Clean` or `Modified`.

## Installation

```
pip install .
```

The program uses the `git` executable found on the `PATH`. It runs git
commands through the shell.

## Running

Start it from inside a git working tree:

```
gitcurses
```

By default, the menu bar is built from `menus.json` and the help text from
`help.json`, both in the current directory. Two options choose other files:

```
gitcurses --menus path/to/menus.json --help-file path/to/help.json
```

If a file cannot be opened, the program runs with no menus or with empty help
text. A file that is not valid JSON, or that has a field of the wrong type,
stops the program with an error.

### menus.json

```json
{
  "menus": [
    {
      "name": "Git",
      "items": [
        {"label": "Status", "command": "status", "description": "Show working tree status"},
        {"label": "Switch Branch", "command": "checkout", "description": "Switch to a local branch"}
      ]
    },
    {"name": "Help", "items": []}
  ]
}
```

Every item needs `label`, `command` and `description`, all strings. When an
item is highlighted, its description appears on the left of the status bar.

A menu named `Help` does not open. Pressing Enter on it shows the help text.

Items labelled `Switch Branch` or `Checkout` in a menu named `Git` or `Branch`
open a nested list of the local branches. Choosing a branch runs the item's
command followed by the branch name.

### help.json

```json
{
  "help": [
    {"section": "Navigation", "content": ["Left/Right: choose a menu", "Enter: open or run"]}
  ]
}
```

## Keys

The menu bar has focus at start. Tab moves focus between the menu bar and the
output pane.

In the menu bar:

- Left and Right choose a menu. They work only while no menu is open.
- Enter opens a menu, opens a branch list, or runs the selected item.
- Up and Down move through an open menu or branch list.
- Esc closes the branch list, or the open menu if no branch list is open.
- `i` opens the `git>` prompt for a command typed by hand.

In the output pane:

- `j` or Down scrolls down one line.
- `k` or Up scrolls up one line.
- Page Up and Page Down scroll by one page.
- `gg` jumps to the top and `G` jumps to the bottom.
- Enter opens the `git>` prompt.

## Commands

Menu items and typed commands are not case-sensitive.

Some commands ask for more detail in a small dialog before they run: `commit`,
`add`, `branch`, `checkout`, `merge`, `tag`, `push`, `pull`, `stash`, `reset`,
`revert`, `cherry-pick`, `rebase`, `remote add`, `remote remove`, `show`,
`blame`, `clean`, `fetch` and `clone`.

- For `stash`, an empty message runs a plain `git stash`.
- For `fetch`, an empty remote runs `git fetch --all`.

These commands run without a dialog:

| Command | Runs |
| --- | --- |
| `status` | `git status` |
| `diff` | `git diff` |
| `log` | `git log --oneline --graph --all` |
| `init` | `git init` |
| `stash pop` | `git stash pop` |
| `stash list` | `git stash list` |
| `remote -v` | `git remote -v` |

`help` shows the help text and `exit` leaves the program. Anything else runs
as `git <command>`, and the output is headed by the command line that was run.

In a dialog:

- Tab and Shift+Tab move between the input field, OK and Cancel.
- Enter on OK confirms, but only when the field is not empty.
- Enter on Cancel, or Esc anywhere, cancels.
- Input is limited to 50 printable characters.

## Limitations

- Commands typed at the prompt are recorded, but no key recalls them.
- Mouse input is ignored.
- Git's standard error is not captured, so error messages from git do not
  appear in the output pane.

## Using the pieces directly

None of these needs a terminal:

- `gitcurses.githandler.GitCommandHandler` runs git commands and returns their
  output as text. It takes an optional `runner` callable that maps a command
  line to its output. The default, `shell_runner`, runs the line through the
  shell.
- `gitcurses.scrolling.OutputView` keeps the scroll state and scrollbar
  position of a block of text.
- `gitcurses.menus` loads menus and help from JSON (`load_menus`, `load_help`,
  `build_menus`, `help_text`).
- `gitcurses.commands.CommandDispatcher` maps a command to git invocations.
  It asks for input through a callable that you supply.
- `gitcurses.navigation.MenuNavigator` turns key codes into `Action` values.