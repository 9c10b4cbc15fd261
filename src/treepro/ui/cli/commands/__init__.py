"""Command execution package for CLI."""

from treepro.ui.cli.commands.tree import TreeCommand

__all__ = ["TreeCommand"]
