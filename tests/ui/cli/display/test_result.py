"""Tests for result display functionality."""

from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from copy_confirmer.features.confirmation import (
    DestinationError,
    FileEntry,
    Report,
    WalkIssue,
)
from copy_confirmer.ui.cli.display.result import ALL_PRESENT_MESSAGE, ResultDisplay


@pytest.fixture
def display() -> ResultDisplay:
    """Result display writing to an in-memory console."""

    result_display = ResultDisplay()
    result_display.console = Console(file=StringIO(), width=200)
    return result_display


def _output(display: ResultDisplay) -> str:
    file = display.console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


def test_all_present_message(display: ResultDisplay) -> None:
    display.show_report(Report(all_present=True, source_file_count=3))

    output = _output(display)
    assert ALL_PRESENT_MESSAGE in output
    assert "Missing files:" not in output


def test_missing_files_listed_one_per_line(display: ResultDisplay) -> None:
    report = Report(all_present=False, missing=("a.txt", "dir/[b].txt"), source_file_count=2)

    display.show_report(report)

    lines = _output(display).splitlines()
    assert lines[0] == "Missing files:"
    assert lines[1:3] == ["a.txt", "dir/[b].txt"]
    assert "2 missing" in lines[3]


def test_quiet_suppresses_summary(display: ResultDisplay) -> None:
    display.show_report(Report(all_present=False, missing=("a.txt",)), quiet=True)

    assert _output(display).splitlines() == ["Missing files:", "a.txt"]


def test_show_errors_annotates_and_lists_diagnostics(display: ResultDisplay) -> None:
    report = Report(
        all_present=False,
        missing=("a.txt", "b.txt"),
        unreadable={"a.txt": "Permission denied"},
        destination_errors=(DestinationError(FileEntry(0, "copy.bin"), "I/O error"),),
        walk_errors=(WalkIssue(root="/src", path="/src/locked", message="Permission denied"),),
    )

    display.show_report(report, show_errors=True, quiet=True)

    output = _output(display)
    assert "a.txt (could not be verified: Permission denied)" in output
    assert "Unreadable destination files:" in output
    assert "[0] copy.bin: I/O error" in output
    assert "/src/locked: Permission denied" in output


def test_unreadable_files_plain_without_show_errors(display: ResultDisplay) -> None:
    report = Report(all_present=False, missing=("a.txt",), unreadable={"a.txt": "denied"})

    display.show_report(report, quiet=True)

    assert "could not be verified" not in _output(display)


def test_console_receives_prints(mocker: MockerFixture) -> None:
    result_display = ResultDisplay()
    mock_console = mocker.Mock()
    result_display.console = mock_console

    result_display.show_report(Report(all_present=True))

    assert mock_console.print.call_count == 2


def test_long_paths_stay_on_one_line_on_narrow_console(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Piped output keeps every missing path intact regardless of terminal width."""

    monkeypatch.setenv("COLUMNS", "20")
    long_path = "a" * 40 + "/" + "b" * 40 + "/file_with_a_long_name.txt"
    report = Report(all_present=False, missing=(long_path, "short.txt"), source_file_count=2)

    ResultDisplay().show_report(report, quiet=True)

    assert capsys.readouterr().out.splitlines() == ["Missing files:", long_path, "short.txt"]


def test_paths_are_not_highlighted(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.delenv("NO_COLOR", raising=False)

    ResultDisplay().show_report(Report(all_present=False, missing=("dir/123.txt",)), quiet=True)

    assert "dir/123.txt\n" in capsys.readouterr().out
