"""Display management for CLI interface."""

from treepro.ui.cli.display.tree import TreeDisplay, format_root_label

__all__ = ["TreeDisplay", "format_root_label"]
