"""Configuration management for tree-pro."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from treepro.config.file_ops import write_text_file
from treepro.config.paths import default_config_path
from treepro.platform.logging import logger

DEFAULT_MAX_FILES: Final[int] = 5
DEFAULT_MAX_DIRS: Final[int] = 1
DEFAULT_MAX_LEVEL: Final[int] = 0

_LIMIT_FIELDS: Final[tuple[str, ...]] = ("max_files", "max_dirs", "max_level")


class ConfigError(ValueError):
    """The configuration file exists but holds invalid values."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration.

    Limits use ``0`` for unlimited, matching the command-line flags.
    """

    # Maximum files listed per directory
    max_files: int = DEFAULT_MAX_FILES

    # Maximum identical directories expanded per group
    max_dirs: int = DEFAULT_MAX_DIRS

    # Maximum recursion depth
    max_level: int = DEFAULT_MAX_LEVEL

    # Colored output
    color: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths and validate limits."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        for name in _LIMIT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigError(f"{name} must be >= 0, got {value}")

        if not isinstance(self.color, bool):
            raise ConfigError(f"color must be true or false, got {self.color!r}")

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields the defaults.

        Raises:
            ConfigError: The file is not valid TOML or holds invalid values.
        """

        config_file = default_config_path(path)
        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys in %s: %s", config_file, ", ".join(unknown))

        values = {key: value for key, value in raw.items() if key in known}
        try:
            instance = cls(**values)
        except ConfigError as e:
            raise ConfigError(f"{config_file}: {e}") from e

        logger.debug("Configuration loaded from %s", config_file)
        return instance

    def save(self, path: Path | None = None) -> Path:
        """Save configuration as commented TOML and return the written path."""

        target = default_config_path(path)
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        write_text_file(target, self._render_toml(config_dict))
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# tree-pro configuration file")
        lines.append("# Limits accept 0 for unlimited.")
        lines.append("")

        lines.append("# Maximum files to display per directory")
        lines.append(f"max_files = {self._format_toml_value(config['max_files'])}")
        lines.append("")

        lines.append("# Maximum identical directories to expand per group")
        lines.append(f"max_dirs = {self._format_toml_value(config['max_dirs'])}")
        lines.append("")

        lines.append("# Maximum recursion depth")
        lines.append(f"max_level = {self._format_toml_value(config['max_level'])}")
        lines.append("")

        lines.append("# Colored output")
        lines.append(f"color = {self._format_toml_value(config['color'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "~/.cache/tree-pro/tree-pro.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)


__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_MAX_DIRS",
    "DEFAULT_MAX_FILES",
    "DEFAULT_MAX_LEVEL",
]
