"""Ports for the tree feature."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """One raw entry returned by a directory listing."""

    name: str
    is_dir: bool


class DirectoryReader(Protocol):
    """Abstract the directory read primitive used by the walker."""

    def is_directory(self, path: Path) -> bool:
        """Return True when ``path`` is a directory.

        Raises ``DirectoryReadError`` when the path cannot be inspected.
        """

        ...

    def read_directory(self, path: Path) -> list[DirectoryEntry]:
        """Return the immediate entries of ``path`` in any order.

        Raises ``DirectoryReadError`` when the directory cannot be listed.
        """

        ...
