"""
Summary: Partition sibling directories into groups of identical structure.
Why: Feed the renderer a stable, first-seen ordering of collapsible siblings.
"""

from __future__ import annotations

from collections.abc import Iterable

from .fingerprint import fallback_signature
from .models import DirGroup, DirectoryNode


def group_identical(siblings: Iterable[DirectoryNode | None]) -> list[DirGroup]:
    """Group ``siblings`` by signature.

    Groups appear in the order their signature is first seen and members
    keep their sibling order. The partition is never truncated; limiting
    how many members are shown is left to the renderer.
    """

    members_by_signature: dict[str, list[DirectoryNode]] = {}
    for node in siblings:
        if node is None:
            continue
        signature = node.signature or fallback_signature(node.name, node.depth)
        members_by_signature.setdefault(signature, []).append(node)

    return [
        DirGroup(signature=signature, members=tuple(members))
        for signature, members in members_by_signature.items()
    ]


__all__ = ["group_identical"]
