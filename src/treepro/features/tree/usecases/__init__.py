"""Use cases for walking and laying out directory trees."""

from .layout import DisplayItem, ItemKind, iter_display_items
from .ports import DirectoryEntry, DirectoryReader
from .walker import TreeWalker

__all__ = [
    "DirectoryEntry",
    "DirectoryReader",
    "DisplayItem",
    "ItemKind",
    "TreeWalker",
    "iter_display_items",
]
