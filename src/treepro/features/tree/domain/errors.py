"""Exceptions raised while walking a directory tree."""

from __future__ import annotations

from pathlib import Path

from .models import ErrorKind


class TreeError(Exception):
    """Base class for every tree-pro failure."""


class DirectoryReadError(TreeError):
    """A directory could not be inspected or listed."""

    def __init__(self, path: Path, kind: ErrorKind, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.kind = kind
        self.message = message

    @classmethod
    def from_os_error(cls, path: Path, error: OSError) -> "DirectoryReadError":
        message = error.strerror or str(error) or error.__class__.__name__
        return cls(path, ErrorKind.from_os_error(error), message)


class RootError(TreeError):
    """The root path cannot be walked; no tree is produced."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class RootNotFoundError(RootError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "no such file or directory")


class RootNotADirectoryError(RootError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "not a directory")


class RootUnreadableError(RootError):
    def __init__(self, path: Path, kind: ErrorKind, message: str) -> None:
        super().__init__(path, message)
        self.kind = kind


class RootPermissionDeniedError(RootUnreadableError):
    def __init__(self, path: Path, message: str = "permission denied") -> None:
        super().__init__(path, ErrorKind.PERMISSION_DENIED, message)


class WalkCancelledError(TreeError):
    """The caller aborted the walk between directory visits."""


def root_error_from(error: DirectoryReadError) -> RootError:
    """Translate a reader failure on the root path into a fatal root error."""

    if error.kind is ErrorKind.NOT_FOUND:
        return RootNotFoundError(error.path)
    if error.kind is ErrorKind.PERMISSION_DENIED:
        return RootPermissionDeniedError(error.path, error.message)
    return RootUnreadableError(error.path, error.kind, error.message)


__all__ = [
    "DirectoryReadError",
    "RootError",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "RootPermissionDeniedError",
    "RootUnreadableError",
    "TreeError",
    "WalkCancelledError",
    "root_error_from",
]
