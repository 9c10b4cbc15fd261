"""Tests for CLI functionality."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from treepro.config import Config
from treepro.features.tree import RootNotFoundError
from treepro.ui.cli import CommandProcessor


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("treepro.ui.cli.cli.logger")


@pytest.fixture(autouse=True)
def default_config(mocker: MockerFixture) -> MagicMock:
    """Keep the user's configuration file out of CLI tests."""

    mock_config = mocker.patch("treepro.ui.cli.args.parser.Config")
    mock_config.load.return_value = Config()
    return mock_config


def test_process_directory(tmp_path: Path, mocker: MockerFixture) -> None:
    """A readable directory is walked and shown."""
    mock_display = mocker.patch("treepro.ui.cli.commands.tree.TreeDisplay")
    (tmp_path / "pkg").mkdir()

    CommandProcessor.process_command([str(tmp_path), "-L", "1"])

    mock_display.return_value.show_tree.assert_called_once()
    root = mock_display.return_value.show_tree.call_args.args[1]
    assert [child.name for child in root.children] == ["pkg"]
    assert root.children[0].unknown_contents


def test_missing_root_exits_with_error(tmp_path: Path, mock_logger: MagicMock, mocker: MockerFixture) -> None:
    """Root failures are logged and exit with status 1."""
    mock_exit = mocker.patch("sys.exit")
    _ = mocker.patch("treepro.ui.cli.commands.tree.TreeDisplay")

    CommandProcessor.process_command([str(tmp_path / "missing")])

    mock_logger.error.assert_called_once()
    mock_exit.assert_called_once_with(1)


def test_error_handling(tmp_path: Path, mock_logger: MagicMock, mocker: MockerFixture) -> None:
    """Unexpected failures are reported generically."""
    mock_exit = mocker.patch("sys.exit")
    mock_command = mocker.patch("treepro.ui.cli.cli.TreeCommand")
    mock_command.return_value.execute.side_effect = Exception("Test error")

    CommandProcessor.process_command([str(tmp_path)])

    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "Test error")
    mock_exit.assert_called_once_with(1)


def test_tree_error_is_logged_verbatim(tmp_path: Path, mock_logger: MagicMock, mocker: MockerFixture) -> None:
    mock_exit = mocker.patch("sys.exit")
    mock_command = mocker.patch("treepro.ui.cli.cli.TreeCommand")
    error = RootNotFoundError(tmp_path / "gone")
    mock_command.return_value.execute.side_effect = error

    CommandProcessor.process_command([str(tmp_path)])

    mock_logger.error.assert_called_once_with("%s", error)
    mock_exit.assert_called_once_with(1)


def test_keyboard_interrupt(tmp_path: Path, mock_logger: MagicMock, mocker: MockerFixture) -> None:
    """Interrupts exit with status 130."""
    mock_exit = mocker.patch("sys.exit")
    mock_command = mocker.patch("treepro.ui.cli.cli.TreeCommand")
    mock_command.return_value.execute.side_effect = KeyboardInterrupt()

    CommandProcessor.process_command([str(tmp_path)])

    mock_logger.info.assert_called_once_with("\nOperation cancelled by user")
    mock_exit.assert_called_once_with(130)


def test_invalid_limit_exits_with_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["-f", "-3"])

    assert excinfo.value.code == 2
    assert "value must be >= 0" in capsys.readouterr().err
