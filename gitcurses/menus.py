"""Menu and help definitions loaded from JSON documents."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Union

PathArg = Union[str, "PathLike[str]"]

BRANCH_MENUS = frozenset({"Git", "Branch"})
BRANCH_ITEMS = frozenset({"Switch Branch", "Checkout"})


@dataclass
class MenuItem:
    label: str
    command: str
    description: str
    dynamic_items: list[str] = field(default_factory=list)


@dataclass
class Menu:
    name: str
    items: list[MenuItem] = field(default_factory=list)


def _text(entry: Any, key: str) -> str:
    if not isinstance(entry, Mapping) or key not in entry:
        raise ValueError(f"missing string field {key!r}")
    value = entry[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, not {type(value).__name__}")
    return value


def _entries(data: Any, key: str) -> list[Any]:
    if not isinstance(data, Mapping):
        return []
    entries = data.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError(f"field {key!r} must be a list")
    return entries


def build_menus(data: Any) -> list[Menu]:
    """Build the menu bar from a document of the form ``{"menus": [...]}``."""
    return [
        Menu(
            name=_text(menu, "name"),
            items=[
                MenuItem(
                    label=_text(item, "label"),
                    command=_text(item, "command"),
                    description=_text(item, "description"),
                )
                for item in _entries(menu, "items")
            ],
        )
        for menu in _entries(data, "menus")
    ]


def _load_json(path: PathArg) -> Any:
    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError:
        return {}


def load_menus(path: PathArg = "menus.json") -> list[Menu]:
    """Load menus from a JSON file; a file that cannot be opened gives no menus."""
    return build_menus(_load_json(path))


def load_help(path: PathArg = "help.json") -> Any:
    """Load the help document; a file that cannot be opened gives an empty one."""
    return _load_json(path)


def help_text(data: Any) -> str:
    """Render a help document of the form ``{"help": [{"section", "content"}]}``."""
    parts: list[str] = []
    for section in _entries(data, "help"):
        parts.append(f"{_text(section, 'section')}:\n")
        for line in _entries(section, "content"):
            if not isinstance(line, str):
                raise ValueError("help content lines must be strings")
            parts.append(f"  {line}\n")
        parts.append("\n")
    return "".join(parts)


def menu_description(menus: Iterable[Menu], menu_name: str, item_label: str) -> str:
    """Return the description of an item, or an empty string if there is none."""
    for menu in menus:
        if menu.name != menu_name:
            continue
        for item in menu.items:
            if item.label == item_label:
                return item.description
    return ""


def refresh_branch_items(menus: Iterable[Menu], branches: Iterable[str]) -> None:
    """Set the branch list as the nested entries of the branch switching items."""
    branch_list = list(branches)
    for menu in menus:
        if menu.name not in BRANCH_MENUS:
            continue
        for item in menu.items:
            if item.label in BRANCH_ITEMS:
                item.dynamic_items = list(branch_list)