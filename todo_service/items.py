"""To-do items by status and the operations they allow on the stored state."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from .state import DEFAULT_STATE_FILE, StrPath, write_to_file

PENDING = "pending"
DONE = "done"


class UnknownItemTypeError(ValueError):
    """Raised when a to-do item is requested with a status that does not exist."""

    def __init__(self, item_type: str) -> None:
        super().__init__("The item type is not accepted")
        self.item_type = item_type


@dataclass(frozen=True)
class Base:
    """The title and status shared by every to-do item."""

    title: str
    status: str


def _get(title: str, state: dict[str, Any]) -> Any:
    if title in state:
        result = state[title]
        print(f"\n\nTo do Item: {title}")
        print(f"Status: {json.dumps(result, ensure_ascii=False)}")
        return result
    print(f"To do item {title} was not found")
    return None


def _delete(title: str, state: dict[str, Any], state_path: StrPath) -> None:
    state.pop(title, None)
    write_to_file(state_path, state)
    print(f"\n\nThe to do item {title} has been deleted \n\n")


def _set_status(title: str, status: str, state: dict[str, Any], state_path: StrPath) -> None:
    state[title] = status
    write_to_file(state_path, state)
    print(f"\n\n{title} is now set to {status}\n\n")


class Pending(Base):
    """A to-do item whose status is "pending"."""

    def __init__(self, title: str) -> None:
        super().__init__(title, PENDING)

    def get(self, state: dict[str, Any]) -> Any:
        """Print the item's stored status and return it, or None if absent."""
        return _get(self.title, state)

    def create(self, state: dict[str, Any], state_path: StrPath = DEFAULT_STATE_FILE) -> None:
        """Add the item to the state and save it."""
        state[self.title] = self.status
        write_to_file(state_path, state)
        print(f"\n\nThe to do item {self.title} has been created \n\n")

    def delete(self, state: dict[str, Any], state_path: StrPath = DEFAULT_STATE_FILE) -> None:
        """Remove the item from the state and save it."""
        _delete(self.title, state, state_path)

    def set_to_done(self, state: dict[str, Any], state_path: StrPath = DEFAULT_STATE_FILE) -> None:
        """Mark the item as done in the state and save it."""
        _set_status(self.title, DONE, state, state_path)


class Done(Base):
    """A to-do item whose status is "done"."""

    def __init__(self, title: str) -> None:
        super().__init__(title, DONE)

    def get(self, state: dict[str, Any]) -> Any:
        """Print the item's stored status and return it, or None if absent."""
        return _get(self.title, state)

    def delete(self, state: dict[str, Any], state_path: StrPath = DEFAULT_STATE_FILE) -> None:
        """Remove the item from the state and save it."""
        _delete(self.title, state, state_path)

    def set_to_pending(self, state: dict[str, Any], state_path: StrPath = DEFAULT_STATE_FILE) -> None:
        """Mark the item as pending in the state and save it."""
        _set_status(self.title, PENDING, state, state_path)


Item = Union[Pending, Done]


def to_do_factory(item_type: str, title: str) -> Item:
    """Build the item for the given status name."""
    if item_type == PENDING:
        return Pending(title)
    if item_type == DONE:
        return Done(title)
    raise UnknownItemTypeError(item_type)