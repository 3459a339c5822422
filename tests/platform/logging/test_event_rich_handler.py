"""Tests for the ``EventRichHandler`` event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from pytest_mock import MockerFixture
from rich.console import Console
from rich.text import Text

from copy_confirmer.platform.logging import LOGGER_NAME, EventRichHandler, setup_logger


def _make_handler() -> EventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return EventRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_phase_complete_lists_metrics() -> None:
    handler = _make_handler()
    record = _build_record(
        confirmation_event="confirmation.phase.complete",
        phase="destination",
        hashed=12,
        failed=1,
        duration_seconds=0.5,
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Finished destination files [hashed=12, failed=1, duration=0.50s]" in rendered.plain


def test_read_error_path_is_relative_to_base() -> None:
    handler = _make_handler()
    record = _build_record(
        confirmation_event="confirmation.file.read_error",
        path="/mnt/backup/photos/2020/a.jpg",
        base_path="/mnt/backup",
        error_message="Permission denied",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Cannot read photos/2020/a.jpg (Permission denied)" in rendered.plain


def test_long_paths_are_truncated() -> None:
    handler = _make_handler()
    record = _build_record(
        confirmation_event="confirmation.walk.error",
        path="/home/user/archive/2019/trips/summer/locked",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "…/2019/trips/summer/locked" in rendered.plain
    assert "/home/user" not in rendered.plain


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "ordinary message")

    assert "ordinary message" in str(getattr(rendered, "plain", rendered))


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "copy_confirmer.log"

    try:
        logger = setup_logger(log_file=log_file, console_level=logging.WARNING)
        handler_types = [type(handler) for handler in logger.handlers]

        assert EventRichHandler in handler_types
        assert logging.handlers.RotatingFileHandler in handler_types
        assert log_file.parent.is_dir()
        assert logger.handlers[0].level == logging.WARNING
    finally:
        _ = setup_logger()


def test_plain_records_with_brackets_render_literally(mocker: MockerFixture) -> None:
    """User paths containing square brackets are printed as-is."""

    stream = StringIO()
    handler = EventRichHandler(console=Console(file=stream, width=200))
    handle_error = mocker.patch.object(handler, "handleError")
    record = _build_record()
    record.msg = "Source directory does not exist or is not a directory: %s"
    record.args = ("/tmp/[/x]missing",)

    handler.emit(record)

    handle_error.assert_not_called()
    assert "/tmp/[/x]missing" in stream.getvalue()
