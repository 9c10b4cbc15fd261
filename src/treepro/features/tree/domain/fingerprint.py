"""
Summary: Compute structural signatures for directories from extension histograms.
Why: Let sibling directories with the same shape collapse into one display group.
"""

from __future__ import annotations

import hashlib
import os
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Final

from .models import ErrorKind

NO_EXTENSION: Final[str] = "<noext>"

_LENGTH_BYTES: Final[int] = 8


def normalize_extension(filename: str) -> str:
    """Return the lower-cased extension of ``filename`` or ``NO_EXTENSION``.

    Dotfiles such as ``.gitignore`` have no extension.
    """

    _, ext = os.path.splitext(filename)
    return ext.lower() if ext else NO_EXTENSION


def extension_histogram(filenames: Iterable[str]) -> Counter[str]:
    """Count normalized extensions across ``filenames``."""

    return Counter(normalize_extension(name) for name in filenames)


def _update_field(hasher: "hashlib._Hash", data: bytes) -> None:
    hasher.update(len(data).to_bytes(_LENGTH_BYTES, "big"))
    hasher.update(data)


def _update_int(hasher: "hashlib._Hash", value: int) -> None:
    _update_field(hasher, value.to_bytes(_LENGTH_BYTES, "big"))


def directory_signature(
    extension_counts: Mapping[str, int],
    child_signatures: Iterable[str],
) -> str:
    """Combine a directory's extension histogram and child signatures.

    Keys and child signatures are sorted first, so the result does not
    depend on the order entries were read in. Every field is length
    prefixed and each section carries its item count, which keeps distinct
    inputs from encoding to the same byte stream.

    File names are ignored on purpose: two directories holding the same
    number of files per extension are considered identical.
    """

    hasher = hashlib.sha256()

    extensions = sorted(extension_counts)
    _update_field(hasher, b"files")
    _update_int(hasher, len(extensions))
    for ext in extensions:
        _update_field(hasher, ext.encode("utf-8", "surrogateescape"))
        _update_int(hasher, extension_counts[ext])

    children = sorted(child_signatures)
    _update_field(hasher, b"dirs")
    _update_int(hasher, len(children))
    for signature in children:
        _update_field(hasher, signature.encode("utf-8", "surrogateescape"))

    return f"dir:{hasher.hexdigest()}"


def leaf_signature(path: Path) -> str:
    """Signature for a depth-limited directory whose contents were never read."""

    hasher = hashlib.sha256()
    _update_field(hasher, b"leaf")
    _update_field(hasher, os.fsencode(path))
    return f"leaf:{hasher.hexdigest()}"


def error_signature(path: Path, kind: ErrorKind) -> str:
    """Signature for an unreadable directory, unique to its path and failure."""

    hasher = hashlib.sha256()
    _update_field(hasher, b"error")
    _update_field(hasher, os.fsencode(path))
    _update_field(hasher, kind.value.encode("ascii"))
    return f"err:{hasher.hexdigest()}"


def fallback_signature(name: str, depth: int) -> str:
    return f"name:{name}:depth:{depth}"


__all__ = [
    "NO_EXTENSION",
    "directory_signature",
    "error_signature",
    "extension_histogram",
    "fallback_signature",
    "leaf_signature",
    "normalize_extension",
]
