"""Request and response bodies for the to-do views."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from .items import Base, Done, Item, Pending


@dataclass(frozen=True)
class ItemSchema:
    """A to-do item as sent by a client: a title and a status."""

    title: str
    status: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ItemSchema:
        """Build from a decoded JSON body; raise ValueError if a field is missing or not a string."""
        if not isinstance(data, Mapping):
            raise ValueError("item body must be a JSON object")
        values = {}
        for name in ("title", "status"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            if not isinstance(data[name], str):
                raise ValueError(f"field `{name}` must be a string")
            values[name] = data[name]
        return cls(**values)


@dataclass
class ToDoItems:
    """All items split by status, with a count for each."""

    pending_items: list[Base] = field(default_factory=list)
    done_items: list[Base] = field(default_factory=list)
    pending_item_count: int = 0
    done_item_count: int = 0

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> ToDoItems:
        """Split items by status, keeping their order."""
        pending: list[Base] = []
        done: list[Base] = []
        for item in items:
            if isinstance(item, Pending):
                pending.append(Base(item.title, item.status))
            elif isinstance(item, Done):
                done.append(Base(item.title, item.status))
            else:
                raise TypeError(f"unsupported item: {item!r}")
        return cls(pending, done, len(pending), len(done))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form."""
        return {
            "pending_items": [asdict(item) for item in self.pending_items],
            "done_items": [asdict(item) for item in self.done_items],
            "pending_item_count": self.pending_item_count,
            "done_item_count": self.done_item_count,
        }

    def to_json(self) -> str:
        """Return the compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)