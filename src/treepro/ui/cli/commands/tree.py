"""src/treepro/ui/cli/commands/tree.py
What: Walk the requested directory and hand the tree to the display.
Why: Keep CLI wiring separate from argument parsing and rendering.
"""

from __future__ import annotations

from typing import final

from treepro.config.config import Config
from treepro.features.tree import DirectoryNode, TreeWalker, build_walker
from treepro.ui.cli.args.options import TreeArgs
from treepro.ui.cli.display.tree import TreeDisplay, format_root_label


@final
class TreeCommand:
    """Command that prints one directory tree."""

    args: TreeArgs
    walker: TreeWalker
    display: TreeDisplay

    def __init__(self, args: TreeArgs) -> None:
        self.args = args
        self.walker = build_walker()
        self.display = TreeDisplay(color=args.color)

    def execute(self) -> DirectoryNode:
        """Execute the tree command.

        Returns:
            DirectoryNode: The walked tree that was displayed.
        """
        root = self.walker.walk(self.args.root_path, self.args.walk_options)
        if self.args.save_config:
            self._save_config()

        self.display.show_tree(
            format_root_label(self.args.target),
            root,
            self.args.max_dirs_per_group,
        )
        return root

    def _save_config(self) -> None:
        config = Config(
            max_files=self.args.max_files,
            max_dirs=self.args.max_dirs,
            max_level=self.args.max_level,
            color=self.args.color,
            log_file=self.args.log_file,
        )
        _ = config.save(self.args.config_path)
