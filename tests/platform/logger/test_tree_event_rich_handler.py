"""Tests for the ``TreeEventRichHandler`` walk event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from treepro.platform.logging import TreeEventRichHandler


def _make_handler() -> TreeEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return TreeEventRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with walk extras for testing."""

    record = logging.LogRecord(
        name="treepro",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="plain message",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_truncates_long_absolute_paths() -> None:
    """Deep paths outside the walk root keep only their last segments."""

    handler = _make_handler()
    record = _build_record(
        walk_event="walk.directory",
        directory="/home/user/projects/service/internal/storage/cache",
        files=3,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "…/service/internal/storage/cache" in plain
    assert "/home/user" not in plain
    assert "files=3" in plain
    assert "hidden=" not in plain


def test_render_message_relativizes_to_walk_root() -> None:
    """Directories beneath the walk root render relative to it."""

    handler = _make_handler()
    record = _build_record(
        walk_event="walk.directory",
        directory="/srv/repo/pkg/a",
        root="/srv/repo",
        files=9,
        hidden=4,
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Visited pkg/a" in plain
    assert "files=9, hidden=4" in plain
    assert "/srv/repo" not in plain


def test_render_message_handles_windows_paths() -> None:
    """Windows-style paths keep backslash separators when relativized."""

    handler = _make_handler()
    record = _build_record(
        walk_event="walk.directory.error",
        directory="C:\\work\\repo\\secret",
        root="C:\\work\\repo",
        error_message="permission denied",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Unreadable secret" in plain
    assert "(permission denied)" in plain


def test_render_message_summarizes_completed_walk() -> None:
    handler = _make_handler()
    record = _build_record(
        walk_event="walk.complete",
        directory="/srv/repo",
        root="/srv/repo",
        total_dirs=5,
        total_files=15,
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Walked " in plain
    assert "dirs=5, files=15" in plain


def test_render_message_falls_back_for_plain_records() -> None:
    """Records without a walk event use the default Rich rendering."""

    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_render_message_escapes_undecodable_names() -> None:
    handler = _make_handler()
    record = _build_record(
        walk_event="walk.directory.error",
        directory="/srv/repo/" + b"caf\xe9".decode("utf-8", "surrogateescape"),
        root="/srv/repo",
        error_message="permission denied",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Unreadable caf\\xe9" in plain
    _ = plain.encode("utf-8")
