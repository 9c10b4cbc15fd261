"""Domain model and pure algorithms for directory trees."""

from .errors import (
    DirectoryReadError,
    RootError,
    RootNotADirectoryError,
    RootNotFoundError,
    RootPermissionDeniedError,
    RootUnreadableError,
    TreeError,
    WalkCancelledError,
)
from .fingerprint import directory_signature, error_signature, leaf_signature
from .grouping import group_identical
from .models import DirGroup, DirectoryNode, ErrorKind, FileEntry, ReadFailure, WalkOptions

__all__ = [
    "DirGroup",
    "DirectoryNode",
    "DirectoryReadError",
    "ErrorKind",
    "FileEntry",
    "ReadFailure",
    "RootError",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "RootPermissionDeniedError",
    "RootUnreadableError",
    "TreeError",
    "WalkCancelledError",
    "WalkOptions",
    "directory_signature",
    "error_signature",
    "group_identical",
    "leaf_signature",
]
