"""Dispatching a command to a to-do item."""

from __future__ import annotations

from typing import Any

from .items import Done, Item, Pending
from .state import DEFAULT_STATE_FILE, StrPath


def process_input(
    item: Item,
    command: str,
    state: dict[str, Any],
    state_path: StrPath = DEFAULT_STATE_FILE,
) -> dict[str, Any]:
    """Run a command on an item against a copy of the state and return that copy.

    Pending items accept get, create, delete and edit; done items accept get,
    delete and edit. Anything else raises ValueError.
    """
    working = dict(state)
    if isinstance(item, Pending):
        if command == "get":
            item.get(working)
        elif command == "create":
            item.create(working, state_path)
        elif command == "delete":
            item.delete(working, state_path)
        elif command == "edit":
            item.set_to_done(working, state_path)
        else:
            raise ValueError(f"Command: {command} is not recognized")
    elif isinstance(item, Done):
        if command == "get":
            item.get(working)
        elif command == "delete":
            item.delete(working, state_path)
        elif command == "edit":
            item.set_to_pending(working, state_path)
        else:
            raise ValueError(f"Command: {command} is not recognized.")
    else:
        raise TypeError(f"unsupported item: {item!r}")
    return working