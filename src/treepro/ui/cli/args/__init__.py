"""Command line argument handling package."""

from treepro.ui.cli.args.options import TreeArgs
from treepro.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "TreeArgs"]
