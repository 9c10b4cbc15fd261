"""Test configuration management."""

from pathlib import Path

import pytest

from treepro.config import Config, ConfigError, default_config_path
from treepro.config.config import DEFAULT_MAX_DIRS, DEFAULT_MAX_FILES, DEFAULT_MAX_LEVEL


def test_missing_file_yields_defaults(config_home: Path) -> None:
    """Loading without a file should not create one."""
    config = Config.load()

    assert config.max_files == DEFAULT_MAX_FILES
    assert config.max_dirs == DEFAULT_MAX_DIRS
    assert config.max_level == DEFAULT_MAX_LEVEL
    assert config.color is True
    assert config.log_file is None
    assert not default_config_path().exists()
    assert default_config_path() == (config_home / "tree-pro" / "config.toml").resolve()


def test_save_load_toml(config_home: Path) -> None:
    """Saved values round-trip through the default location."""
    _ = config_home
    original = Config(
        max_files=0,
        max_dirs=3,
        max_level=2,
        color=False,
        log_file=Path("/tmp/tree-pro/run.log"),
    )

    written = original.save()
    loaded = Config.load()

    assert written == default_config_path()
    assert loaded == original


def test_save_without_log_file_leaves_it_commented(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.toml"

    _ = Config().save(target)

    content = target.read_text(encoding="utf-8")
    assert "max_files = 5" in content
    assert "color = true" in content
    assert "\nlog_file =" not in content
    assert Config.load(target).log_file is None


def test_string_values_are_escaped(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"

    _ = Config(log_file=Path('/tmp/with "quotes"/run.log')).save(target)

    assert Config.load(target).log_file == Path('/tmp/with "quotes"/run.log')


def test_explicit_path_wins_over_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "env.toml"
    _ = env_file.write_text("max_files = 7\n")
    explicit = tmp_path / "explicit.toml"
    _ = explicit.write_text("max_files = 9\n")
    monkeypatch.setenv("TREEPRO_CONFIG", str(env_file))

    assert Config.load().max_files == 7
    assert Config.load(explicit).max_files == 9


def test_empty_log_file_string_means_none(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('log_file = ""\n')

    assert Config.load(target).log_file is None


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text("max_dirs = 2\ntheme = 'dark'\n")

    config = Config.load(target)

    assert config.max_dirs == 2


@pytest.mark.parametrize(
    "content",
    [
        "max_files = -1\n",
        "max_dirs = 'many'\n",
        "max_level = true\n",
        "color = 'yes'\n",
        "max_files = \n",
    ],
)
def test_invalid_files_raise_config_error(tmp_path: Path, content: str) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text(content)

    with pytest.raises(ConfigError):
        _ = Config.load(target)
