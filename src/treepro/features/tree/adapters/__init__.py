"""Adapters bridging the tree feature to the local system."""

from .filesystem import LocalDirectoryReader

__all__ = ["LocalDirectoryReader"]
