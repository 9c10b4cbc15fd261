"""Shared fixtures for tree walker tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from treepro.features.tree import DirectoryNode, DirectoryReadError, ErrorKind, TreeWalker, WalkOptions
from treepro.features.tree.usecases.ports import DirectoryEntry


class FakeDirectoryReader:
    """In-memory directory reader built from nested dictionaries.

    A dictionary value is a directory, ``None`` is a file and an
    ``ErrorKind`` marks a directory that fails to list. ``reverse`` lists
    entries in the opposite of insertion order.
    """

    def __init__(self, tree: Mapping[str, Any], root: str = "root", *, reverse: bool = False) -> None:
        self.root = Path(root)
        self.tree = tree
        self.reverse = reverse
        self.reads: list[Path] = []

    def _lookup(self, path: Path) -> Any:
        if path == self.root:
            return self.tree
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            raise DirectoryReadError(path, ErrorKind.NOT_FOUND, "no such file or directory") from None
        current: Any = self.tree
        for part in relative.parts:
            if not isinstance(current, Mapping) or part not in current:
                raise DirectoryReadError(path, ErrorKind.NOT_FOUND, "no such file or directory")
            current = current[part]
        return current

    def is_directory(self, path: Path) -> bool:
        value = self._lookup(path)
        return isinstance(value, (Mapping, ErrorKind))

    def read_directory(self, path: Path) -> list[DirectoryEntry]:
        self.reads.append(path)
        value = self._lookup(path)
        if isinstance(value, ErrorKind):
            message = "permission denied" if value is ErrorKind.PERMISSION_DENIED else "input/output error"
            raise DirectoryReadError(path, value, message)
        entries = [
            DirectoryEntry(name=name, is_dir=isinstance(child, (Mapping, ErrorKind)))
            for name, child in value.items()
        ]
        if self.reverse:
            entries.reverse()
        return entries


@pytest.fixture
def make_reader() -> type[FakeDirectoryReader]:
    """Expose the fake reader class to tests."""

    return FakeDirectoryReader


@pytest.fixture
def walk_tree() -> Callable[..., DirectoryNode]:
    """Walk an in-memory tree rooted at ``root``."""

    def _walk(
        tree: Mapping[str, Any],
        options: WalkOptions | None = None,
        **walker_kwargs: Any,
    ) -> DirectoryNode:
        reader = FakeDirectoryReader(tree)
        return TreeWalker(reader=reader, **walker_kwargs).walk("root", options)

    return _walk
