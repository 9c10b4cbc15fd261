"""Data structures describing a walked directory tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Categories of directory read failures."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    OTHER = "other"

    @staticmethod
    def from_os_error(error: OSError) -> "ErrorKind":
        """Classify an ``OSError`` raised by the operating system."""

        if isinstance(error, FileNotFoundError):
            return ErrorKind.NOT_FOUND
        if isinstance(error, PermissionError):
            return ErrorKind.PERMISSION_DENIED
        return ErrorKind.OTHER


@dataclass(slots=True, frozen=True)
class ReadFailure:
    """Why a directory could not be listed."""

    kind: ErrorKind
    message: str


@dataclass(slots=True, frozen=True)
class FileEntry:
    """A file retained for display."""

    name: str


@dataclass(slots=True, frozen=True)
class DirectoryNode:
    """One directory level of a walked tree.

    Nodes are built only after their whole subtree has been visited, so the
    derived fields (totals and ``signature``) are final on construction.
    ``total_dir_count`` does not include the node itself.
    """

    name: str
    path: Path
    depth: int
    signature: str
    children: tuple["DirectoryNode", ...] = ()
    files: tuple[FileEntry, ...] = ()
    hidden_file_count: int = 0
    immediate_dir_count: int = 0
    immediate_file_count: int = 0
    total_dir_count: int = 0
    total_file_count: int = 0
    error: ReadFailure | None = None
    unknown_contents: bool = False

    @property
    def is_unreadable(self) -> bool:
        return self.error is not None

    @property
    def is_permission_error(self) -> bool:
        return self.error is not None and self.error.kind is ErrorKind.PERMISSION_DENIED


@dataclass(slots=True, frozen=True)
class DirGroup:
    """Sibling directories sharing one structural signature."""

    signature: str
    members: tuple[DirectoryNode, ...]


@dataclass(slots=True, frozen=True)
class WalkOptions:
    """Traversal limits. ``None`` means unbounded.

    ``max_files_per_dir=0`` is a real limit that retains no files at all.
    """

    max_files_per_dir: int | None = None
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_files_per_dir is not None and self.max_files_per_dir < 0:
            raise ValueError(f"max_files_per_dir must be >= 0, got {self.max_files_per_dir}")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    @classmethod
    def from_limits(cls, max_files: int, max_level: int) -> "WalkOptions":
        """Build options from command-line limits where ``0`` means unlimited."""

        if max_files < 0 or max_level < 0:
            raise ValueError("limits must be non-negative")
        return cls(
            max_files_per_dir=max_files or None,
            max_depth=max_level or None,
        )


__all__ = [
    "DirGroup",
    "DirectoryNode",
    "ErrorKind",
    "FileEntry",
    "ReadFailure",
    "WalkOptions",
]
