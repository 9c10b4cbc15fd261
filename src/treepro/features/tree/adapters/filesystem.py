"""Local filesystem adapter for the tree walker."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from ..domain.errors import DirectoryReadError
from ..usecases.ports import DirectoryEntry, DirectoryReader


class LocalDirectoryReader(DirectoryReader):
    """Read directories with ``os.scandir``.

    The root is resolved through symlinks; entries below it are classified
    without following them.
    """

    def is_directory(self, path: Path) -> bool:
        try:
            mode = path.stat().st_mode
        except OSError as exc:
            raise DirectoryReadError.from_os_error(path, exc) from exc
        return stat.S_ISDIR(mode)

    def read_directory(self, path: Path) -> list[DirectoryEntry]:
        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(path) as iterator:
                for entry in iterator:
                    try:
                        is_dir = entry.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    entries.append(DirectoryEntry(name=entry.name, is_dir=is_dir))
        except OSError as exc:
            raise DirectoryReadError.from_os_error(path, exc) from exc
        return entries


__all__ = ["LocalDirectoryReader"]
