"""Lazy display items for one directory level of a walked tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from ..domain.grouping import group_identical
from ..domain.models import DirectoryNode, FileEntry


class ItemKind(Enum):
    DIRECTORY = "directory"
    COLLAPSED = "collapsed"
    FILE = "file"
    FILE_SUMMARY = "file_summary"


@dataclass(slots=True, frozen=True)
class DisplayItem:
    """One line under a directory.

    ``count`` holds the omitted members for ``COLLAPSED`` and the hidden
    files for ``FILE_SUMMARY``.
    """

    kind: ItemKind
    directory: DirectoryNode | None = None
    file: FileEntry | None = None
    count: int = 0


def iter_display_items(
    node: DirectoryNode,
    max_dirs_per_group: int | None = None,
) -> Iterator[DisplayItem]:
    """Yield the items shown beneath ``node``.

    Subdirectories come first, grouped by structure with at most
    ``max_dirs_per_group`` members expanded per group (``None`` expands
    all), followed by the retained files and a summary of hidden ones.
    """

    if max_dirs_per_group is not None and max_dirs_per_group < 0:
        raise ValueError(f"max_dirs_per_group must be >= 0, got {max_dirs_per_group}")

    for group in group_identical(node.children):
        members = group.members
        shown = members if max_dirs_per_group is None else members[:max_dirs_per_group]
        for member in shown:
            yield DisplayItem(kind=ItemKind.DIRECTORY, directory=member)
        omitted = len(members) - len(shown)
        if omitted > 0:
            yield DisplayItem(kind=ItemKind.COLLAPSED, count=omitted)

    for entry in node.files:
        yield DisplayItem(kind=ItemKind.FILE, file=entry)

    if node.hidden_file_count > 0:
        yield DisplayItem(kind=ItemKind.FILE_SUMMARY, count=node.hidden_file_count)


__all__ = ["DisplayItem", "ItemKind", "iter_display_items"]
