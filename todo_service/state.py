"""Loading and saving the to-do state file, a JSON object of title to status."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Union

StrPath = Union[str, "os.PathLike[str]"]

DEFAULT_STATE_FILE = "./state.json"


def read_file(file_name: StrPath) -> dict[str, Any]:
    """Read the state file and return its object with keys in sorted order.

    Raises OSError if the file cannot be read, json.JSONDecodeError if it is
    not JSON and ValueError if the JSON is not an object.
    """
    with open(file_name, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{os.fspath(file_name)} does not hold a JSON object")
    return dict(sorted(data.items()))


def write_to_file(file_name: StrPath, state: dict[str, Any]) -> None:
    """Write the state to disk as compact JSON with sorted keys."""
    text = json.dumps(state, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    Path(file_name).write_text(text, encoding="utf-8")