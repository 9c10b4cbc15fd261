"""
Summary: Render walked directory trees as connector-drawn lines on a Rich console.
Why: Turn the lazy display items into the compact tree users read in the terminal.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeVar, final

from rich.console import Console
from rich.text import Text

from treepro.features.tree import DirectoryNode, ItemKind, iter_display_items
from treepro.platform.text import printable

T = TypeVar("T")

_BRANCH = "├── "
_LAST_BRANCH = "└── "
_PIPE = "│   "
_SPACE = "    "


@dataclass(slots=True, frozen=True)
class _Palette:
    directory: str = "bold blue"
    file: str = ""
    summary: str = "dim"
    stats: str = "bold green"
    error: str = "bold red"

    @classmethod
    def plain(cls) -> "_Palette":
        return cls(directory="", file="", summary="", stats="", error="")


def format_root_label(target: str) -> str:
    """Label the root the way it was typed, normalized and ending in a separator.

    ``.`` stays ``.`` and input that already ends with the separator is kept
    verbatim.
    """

    if not target:
        target = "."
    cleaned = os.path.normpath(target)
    if cleaned == ".":
        return cleaned
    if target.endswith(os.sep):
        return target
    return cleaned + os.sep


def _mark_last(items: Iterable[T]) -> Iterator[tuple[T, bool]]:
    """Pair each item with whether it is the final one, consuming lazily."""

    iterator = iter(items)
    try:
        previous = next(iterator)
    except StopIteration:
        return
    for current in iterator:
        yield previous, False
        previous = current
    yield previous, True


@final
class TreeDisplay:
    """Handles tree display in CLI."""

    console: Console

    def __init__(self, *, color: bool = True, console: Console | None = None) -> None:
        self.console = console or Console(no_color=not color, highlight=False, soft_wrap=True)
        self._palette = _Palette() if color else _Palette.plain()

    def show_tree(
        self,
        root_label: str,
        node: DirectoryNode,
        max_dirs_per_group: int | None = None,
    ) -> None:
        """Print ``node`` under ``root_label`` followed by a totals line.

        Args:
            root_label: Text shown for the root directory.
            node: Finished tree returned by the walker.
            max_dirs_per_group: Identical directories expanded per group;
                ``None`` expands all of them.
        """
        self.console.print(Text(printable(root_label), style=self._palette.directory))
        self._print_children(node, "", max_dirs_per_group)
        self.console.print(
            Text(
                f"[{node.total_dir_count + 1} directories, {node.total_file_count} files]",
                style=self._palette.stats,
            )
        )

    def _print_children(
        self,
        node: DirectoryNode,
        prefix: str,
        max_dirs_per_group: int | None,
    ) -> None:
        palette = self._palette
        for item, is_last in _mark_last(iter_display_items(node, max_dirs_per_group)):
            line = Text(prefix + (_LAST_BRANCH if is_last else _BRANCH))

            if item.kind is ItemKind.DIRECTORY:
                child = item.directory
                assert child is not None
                _ = line.append(printable(child.name), style=palette.directory)
                if child.error is not None:
                    _ = line.append(" ")
                    _ = line.append_text(self._error_annotation(child))
                    self.console.print(line)
                    continue
                _ = line.append("/")
                self.console.print(line)
                self._print_children(child, prefix + (_SPACE if is_last else _PIPE), max_dirs_per_group)
            elif item.kind is ItemKind.COLLAPSED:
                _ = line.append(f"... ({item.count} identical dirs)", style=palette.summary)
                self.console.print(line)
            elif item.kind is ItemKind.FILE:
                assert item.file is not None
                _ = line.append(printable(item.file.name), style=palette.file)
                self.console.print(line)
            else:
                shown = node.immediate_file_count - item.count
                _ = line.append(
                    f"... [{node.immediate_dir_count} directories, "
                    f"{node.immediate_file_count} files, showing first {shown}]",
                    style=palette.summary,
                )
                self.console.print(line)

    def _error_annotation(self, node: DirectoryNode) -> Text:
        if node.is_permission_error:
            return Text("[Permission denied]", style=self._palette.summary)
        assert node.error is not None
        message = printable(node.error.message.strip()) or "error"
        return Text(f"[{message}]", style=self._palette.error)


__all__ = ["TreeDisplay", "format_root_label"]
