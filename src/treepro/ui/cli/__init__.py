"""Command line interface package."""

from treepro.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
