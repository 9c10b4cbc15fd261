"""Shared path utilities for configuration locations.

Policy:
- ``$TREEPRO_CONFIG`` when set and non-empty
- otherwise ``$XDG_CONFIG_HOME/tree-pro/config.toml``
- otherwise ``~/.config/tree-pro/config.toml``
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

_ENV_CONFIG_FILE: Final[str] = "TREEPRO_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_APP_DIR_NAME: Final[str] = "tree-pro"
_CONFIG_FILE_NAME: Final[str] = "config.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the per-user configuration directory."""

    mapping = env if env is not None else os.environ
    xdg_home = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return (base / _APP_DIR_NAME).expanduser().resolve()


def default_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Get the path of the TOML config file."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir(env) / _CONFIG_FILE_NAME,
    )


__all__ = [
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
