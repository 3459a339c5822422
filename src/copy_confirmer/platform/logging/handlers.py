"""Rich console handler used by the application logger.

Where: platform/logging/handlers.py
What: Render structured confirmation events with icons, colours and compact paths.
Why: Keep console output readable while file logs stay plain text.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that renders ``confirmation_event`` records specially."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "confirmation.run.start": ("🚀", "cyan"),
        "confirmation.run.complete": ("✅", "green"),
        "confirmation.run.incomplete": ("❌", "red"),
        "confirmation.phase.start": ("🔎", "blue"),
        "confirmation.phase.complete": ("📦", "cyan"),
        "confirmation.walk.error": ("⚠️", "yellow"),
        "confirmation.file.read_error": ("⛔", "red"),
        "confirmation.file.missing": ("↪️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` and truncate long prefixes with an ellipsis."""

        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative_path = pure_path.relative_to(base_path)
            except ValueError:
                relative_path = None
            if relative_path is not None and str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        if len(body_parts) > self._PATH_SEGMENT_LIMIT:
            display_string = "…" + separator + separator.join(body_parts[-self._PATH_SEGMENT_LIMIT:])
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator + separator.join(body_parts)
        else:
            display_string = separator.join(body_parts) or "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured confirmation events with dedicated styling."""

        event = getattr(record, "confirmation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        phase = getattr(record, "phase", None)
        if event == "confirmation.phase.start":
            total_files = getattr(record, "total_files", None)
            _ = body.append(f"Hashing {phase} files")
            if isinstance(total_files, int):
                _ = body.append(f" [total={total_files}]")
        elif event == "confirmation.phase.complete":
            metrics: list[str] = []
            hashed = getattr(record, "hashed", None)
            failed = getattr(record, "failed", None)
            duration = getattr(record, "duration_seconds", None)
            if isinstance(hashed, int):
                metrics.append(f"hashed={hashed}")
            if isinstance(failed, int):
                metrics.append(f"failed={failed}")
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            _ = body.append(f"Finished {phase} files")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event in {"confirmation.walk.error", "confirmation.file.read_error", "confirmation.file.missing"}:
            prefix = {
                "confirmation.walk.error": "Cannot walk ",
                "confirmation.file.read_error": "Cannot read ",
                "confirmation.file.missing": "Missing ",
            }[event]
            _ = body.append(prefix)
            path = getattr(record, "path", None)
            if path:
                _ = body.append_text(
                    self._format_path(str(path), base=getattr(record, "base_path", None))
                )
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        else:
            _ = body.append(message)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for confirmation events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
