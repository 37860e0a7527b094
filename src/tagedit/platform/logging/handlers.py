"""Rich console handler for tag events.

Where: platform/logging/handlers.py
What: Render structured tag events with icons, colors and compact paths.
Why: Keep per-file progress readable on stderr while stdout carries tag data.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TagEvent(StrEnum):
    """Structured event identifiers attached to log records as ``tag_event``."""

    FILE_UPDATED = "tags.file.updated"
    FILE_UNCHANGED = "tags.file.unchanged"
    FILE_ERROR = "tags.file.error"
    EDITOR_LAUNCH = "tags.editor.launch"
    EDITOR_FAILED = "tags.editor.failed"


class TagEventRichHandler(RichHandler):
    """Rich handler that styles tag events and file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        TagEvent.FILE_UPDATED: ("✏️", "green"),
        TagEvent.FILE_UNCHANGED: ("✓", "blue"),
        TagEvent.FILE_ERROR: ("⛔", "red"),
        TagEvent.EDITOR_LAUNCH: ("📝", "cyan"),
        TagEvent.EDITOR_FAILED: ("❌", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        TagEvent.FILE_UPDATED: "Updated ",
        TagEvent.FILE_UNCHANGED: "Unchanged ",
        TagEvent.FILE_ERROR: "Failed ",
        TagEvent.EDITOR_LAUNCH: "Waiting for ",
        TagEvent.EDITOR_FAILED: "Editor failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators, keeping the last segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator if anchor.rstrip("\\/") else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_tag_event(self, record: logging.LogRecord) -> Text | None:
        """Render a structured tag event, or ``None`` for plain records."""

        event = getattr(record, "tag_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        editor = getattr(record, "editor", None)
        if event == TagEvent.EDITOR_LAUNCH and editor:
            _ = body.append(str(editor))

        path = getattr(record, "path", None)
        if path:
            _ = body.append_text(self._format_path(str(path)))

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for tag events."""

        event_text = self._render_tag_event(record)
        if event_text is not None:
            return event_text

        if record.levelno >= logging.ERROR:
            return Text(f"❌ {message}", style=Style(color="red"))
        if record.levelno >= logging.WARNING:
            return Text(f"⚠️  {message}", style=Style(color="yellow"))
        return super().render_message(record, message)


__all__ = ["TagEvent", "TagEventRichHandler"]
