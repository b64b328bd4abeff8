"""Route prefixes for grouping related views."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Path:
    """A URL prefix shared by a group of routes."""

    prefix: str

    def define(self, following_path: str) -> str:
        """Return the full route: the prefix followed by the given path."""
        return self.prefix + following_path