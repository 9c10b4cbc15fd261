"""Public surface for the tree feature."""

from __future__ import annotations

from logging import Logger
from pathlib import Path

from .adapters.filesystem import LocalDirectoryReader
from .domain.errors import (
    DirectoryReadError,
    RootError,
    RootNotADirectoryError,
    RootNotFoundError,
    RootPermissionDeniedError,
    RootUnreadableError,
    TreeError,
    WalkCancelledError,
)
from .domain.grouping import group_identical
from .domain.models import DirGroup, DirectoryNode, ErrorKind, FileEntry, ReadFailure, WalkOptions
from .usecases.layout import DisplayItem, ItemKind, iter_display_items
from .usecases.walker import TreeWalker


def build_walker(*, logger: Logger | None = None) -> TreeWalker:
    """Create a walker over the local filesystem."""

    return TreeWalker(reader=LocalDirectoryReader(), logger=logger)


def walk(root: Path | str, options: WalkOptions | None = None) -> DirectoryNode:
    """Walk ``root`` on the local filesystem."""

    return build_walker().walk(root, options)


__all__ = [
    "DirGroup",
    "DirectoryNode",
    "DirectoryReadError",
    "DisplayItem",
    "ErrorKind",
    "FileEntry",
    "ItemKind",
    "LocalDirectoryReader",
    "ReadFailure",
    "RootError",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "RootPermissionDeniedError",
    "RootUnreadableError",
    "TreeError",
    "TreeWalker",
    "WalkCancelledError",
    "WalkOptions",
    "build_walker",
    "group_identical",
    "iter_display_items",
    "walk",
]
