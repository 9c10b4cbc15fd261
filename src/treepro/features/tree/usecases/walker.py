"""
Summary: Walk a directory tree depth-first and annotate nodes bottom-up.
Why: Produce true counts and structural signatures independent of display limits.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from logging import DEBUG, Logger, getLogger
from pathlib import Path

from ..domain.errors import (
    DirectoryReadError,
    RootNotADirectoryError,
    WalkCancelledError,
    root_error_from,
)
from ..domain.fingerprint import (
    directory_signature,
    error_signature,
    extension_histogram,
    leaf_signature,
)
from ..domain.models import DirectoryNode, FileEntry, ReadFailure, WalkOptions
from .ports import DirectoryReader


@dataclass(slots=True)
class _WalkContext:
    """State shared by every directory visit of one walk."""

    root: Path
    options: WalkOptions


class TreeWalker:
    """Build ``DirectoryNode`` trees through an injected directory reader."""

    _reader: DirectoryReader
    _logger: Logger
    _should_continue: Callable[[], bool] | None

    def __init__(
        self,
        *,
        reader: DirectoryReader,
        logger: Logger | None = None,
        should_continue: Callable[[], bool] | None = None,
    ) -> None:
        self._reader = reader
        self._logger = logger or getLogger(__name__)
        self._should_continue = should_continue

    def walk(self, root: Path | str, options: WalkOptions | None = None) -> DirectoryNode:
        """Walk ``root`` and return the finished tree.

        Raises:
            RootNotFoundError: ``root`` does not exist.
            RootNotADirectoryError: ``root`` is not a directory.
            RootUnreadableError: ``root`` could not be inspected or listed;
                ``RootPermissionDeniedError`` for permission failures.
            WalkCancelledError: ``should_continue`` returned False.
        """

        root_path = Path(os.path.normpath(root))
        try:
            is_dir = self._reader.is_directory(root_path)
        except DirectoryReadError as exc:
            raise root_error_from(exc) from exc
        if not is_dir:
            raise RootNotADirectoryError(root_path)

        context = _WalkContext(root=root_path, options=options or WalkOptions())
        self._logger.debug(
            "Walking %s",
            root_path,
            extra={"walk_event": "walk.start", "directory": str(root_path), "root": str(root_path)},
        )

        node = self._visit(context, root_path, root_path.name or str(root_path), depth=0)
        if node.error is not None:
            raise root_error_from(DirectoryReadError(root_path, node.error.kind, node.error.message))

        self._logger.debug(
            "Walked %s: %d directories, %d files",
            root_path,
            node.total_dir_count,
            node.total_file_count,
            extra={
                "walk_event": "walk.complete",
                "directory": str(root_path),
                "root": str(root_path),
                "total_dirs": node.total_dir_count,
                "total_files": node.total_file_count,
            },
        )
        return node

    def _visit(self, context: _WalkContext, path: Path, name: str, depth: int) -> DirectoryNode:
        if self._should_continue is not None and not self._should_continue():
            raise WalkCancelledError(f"walk cancelled before {path}")

        try:
            entries = self._reader.read_directory(path)
        except DirectoryReadError as exc:
            return self._unreadable(context, path, name, depth, exc)

        options = context.options
        file_limit = options.max_files_per_dir
        expand_children = options.max_depth is None or depth + 1 < options.max_depth

        file_names: list[str] = []
        files: list[FileEntry] = []
        hidden_files = 0
        children: list[DirectoryNode] = []

        for entry in sorted(entries, key=lambda item: item.name):
            if entry.is_dir:
                child_path = path / entry.name
                if expand_children:
                    children.append(self._visit(context, child_path, entry.name, depth + 1))
                else:
                    children.append(_unknown_contents(child_path, entry.name, depth + 1))
                continue

            file_names.append(entry.name)
            if file_limit is None or len(files) < file_limit:
                files.append(FileEntry(name=entry.name))
            else:
                hidden_files += 1

        immediate_files = len(files) + hidden_files
        node = DirectoryNode(
            name=name,
            path=path,
            depth=depth,
            signature=directory_signature(
                extension_histogram(file_names),
                (child.signature for child in children),
            ),
            children=tuple(children),
            files=tuple(files),
            hidden_file_count=hidden_files,
            immediate_dir_count=len(children),
            immediate_file_count=immediate_files,
            total_dir_count=len(children) + sum(child.total_dir_count for child in children),
            total_file_count=immediate_files + sum(child.total_file_count for child in children),
        )

        if self._logger.isEnabledFor(DEBUG):
            self._logger.debug(
                "Visited %s",
                path,
                extra={
                    "walk_event": "walk.directory",
                    "directory": str(path),
                    "root": str(context.root),
                    "files": immediate_files,
                    "hidden": hidden_files,
                },
            )
        return node

    def _unreadable(
        self,
        context: _WalkContext,
        path: Path,
        name: str,
        depth: int,
        error: DirectoryReadError,
    ) -> DirectoryNode:
        self._logger.debug(
            "Cannot read %s: %s",
            path,
            error.message,
            extra={
                "walk_event": "walk.directory.error",
                "directory": str(path),
                "root": str(context.root),
                "error_kind": error.kind.value,
                "error_message": error.message,
            },
        )
        return DirectoryNode(
            name=name,
            path=path,
            depth=depth,
            signature=error_signature(path, error.kind),
            error=ReadFailure(kind=error.kind, message=error.message),
        )


def _unknown_contents(path: Path, name: str, depth: int) -> DirectoryNode:
    return DirectoryNode(
        name=name,
        path=path,
        depth=depth,
        signature=leaf_signature(path),
        unknown_contents=True,
    )


__all__ = ["TreeWalker"]
