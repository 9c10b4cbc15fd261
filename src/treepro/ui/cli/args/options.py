"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from treepro.features.tree import WalkOptions


@final
@dataclass(slots=True)
class TreeArgs:
    """Resolved command line arguments.

    Limits keep the command-line convention where ``0`` means unlimited.
    """

    target: str
    root_path: Path
    max_files: int
    max_dirs: int
    max_level: int
    color: bool
    save_config: bool
    config_path: Path | None = None
    log_file: Path | None = None

    @property
    def walk_options(self) -> WalkOptions:
        return WalkOptions.from_limits(self.max_files, self.max_level)

    @property
    def max_dirs_per_group(self) -> int | None:
        return self.max_dirs or None


__all__ = ["TreeArgs"]
