"""Rich logging handler with dedicated rendering for walk events.

Where: platform/logging/handlers.py
What: Render ``walk_event`` log records with icons, colours and compact paths.
Why: Keep verbose walk diagnostics readable next to the rendered tree.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from treepro.platform.text import printable


class TreeEventRichHandler(RichHandler):
    """Rich handler that formats structured walk events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "walk.start": ("🌲", "cyan"),
        "walk.directory": ("📂", "blue"),
        "walk.directory.error": ("⛔", "red"),
        "walk.complete": ("✅", "green"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "walk.start": "Walking ",
        "walk.directory": "Visited ",
        "walk.directory.error": "Unreadable ",
        "walk.complete": "Walked ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Render ``path`` relative to ``base`` when possible, keeping the last segments."""

        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative = pure_path.relative_to(base_path)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = ["…", *parts[-self._PATH_SEGMENT_LIMIT:]]
        elif anchor:
            parts = [anchor.rstrip("\\/"), *parts]

        display = printable(separator.join(parts) or anchor or ".")
        text = Text()
        for char in display:
            style = Style(color="magenta") if char in {separator, "…"} else Style(color="white")
            _ = text.append(char, style=style)
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_walk_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "walk_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, f"{event} "))

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append_text(self.format_path(str(directory), base=getattr(record, "root", None)))

        details: list[str] = []
        if event == "walk.complete":
            total_dirs = getattr(record, "total_dirs", None)
            total_files = getattr(record, "total_files", None)
            if isinstance(total_dirs, int):
                details.append(f"dirs={total_dirs}")
            if isinstance(total_files, int):
                details.append(f"files={total_files}")
        elif event == "walk.directory":
            files = getattr(record, "files", None)
            hidden = getattr(record, "hidden", None)
            if isinstance(files, int):
                details.append(f"files={files}")
            if isinstance(hidden, int) and hidden > 0:
                details.append(f"hidden={hidden}")
        elif event == "walk.directory.error":
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(printable(str(error_message)))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        walk_text = self._render_walk_event(record)
        if walk_text is not None:
            return walk_text
        return super().render_message(record, printable(message))


__all__ = ["TreeEventRichHandler"]
