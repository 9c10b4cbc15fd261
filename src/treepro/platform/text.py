"""Terminal-safe text helpers."""

from __future__ import annotations


def printable(name: str) -> str:
    """Return ``name`` with undecodable filesystem bytes shown as ``\\xNN``.

    ``os.scandir`` keeps bytes that are not valid UTF-8 as lone surrogates,
    which no console can encode.
    """

    try:
        raw = name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return name.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


__all__ = ["printable"]
