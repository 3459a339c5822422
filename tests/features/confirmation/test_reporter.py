"""Tests for folding match outcomes into a report."""

from __future__ import annotations

from copy_confirmer.features.confirmation import (
    DestinationError,
    FileEntry,
    Found,
    Missing,
    MissingReason,
    WalkIssue,
)
from copy_confirmer.features.confirmation.usecases.reporter import build_report


def test_report_lists_missing_paths_sorted() -> None:
    outcomes = {
        "z.txt": Missing(),
        "a/b.txt": Missing(),
        "found.txt": Found(locations=(FileEntry(0, "copy.txt"),)),
        "a.txt": Missing(),
    }

    report = build_report(outcomes)

    assert report.all_present is False
    assert report.missing == ("a.txt", "a/b.txt", "z.txt")
    assert report.found_map is None
    assert report.source_file_count == 4


def test_report_without_missing_files_is_all_present() -> None:
    report = build_report({"a.txt": Found(locations=(FileEntry(0, "a.txt"),))})

    assert report.all_present is True
    assert report.missing == ()


def test_empty_outcomes_count_as_all_present() -> None:
    report = build_report({}, want_found_map=True)

    assert report.all_present is True
    assert report.found_map == {}


def test_found_map_holds_only_found_files() -> None:
    locations = (FileEntry(0, "x/a_copy.txt"), FileEntry(1, "a.txt"))

    report = build_report(
        {"a.txt": Found(locations=locations), "b.txt": Missing()},
        want_found_map=True,
    )

    assert report.found_map == {"a.txt": locations}


def test_unreadable_source_files_are_missing_with_reason() -> None:
    report = build_report(
        {
            "a.txt": Missing(reason=MissingReason.UNREADABLE, error="Permission denied"),
            "b.txt": Missing(),
        }
    )

    assert report.missing == ("a.txt", "b.txt")
    assert report.unreadable == {"a.txt": "Permission denied"}
    assert report.content_absent == ("b.txt",)


def test_diagnostics_are_sorted_deterministically() -> None:
    destination_errors = [
        DestinationError(FileEntry(1, "a.bin"), "denied"),
        DestinationError(FileEntry(0, "z.bin"), "denied"),
    ]
    walk_errors = [
        WalkIssue(root="/src", path="/src/locked", message="denied"),
        WalkIssue(root="/dest", path="/dest/locked", message="denied"),
    ]

    report = build_report(
        {},
        destination_errors=destination_errors,
        walk_errors=walk_errors,
        destination_file_count=7,
    )

    assert [error.entry for error in report.destination_errors] == [
        FileEntry(0, "z.bin"),
        FileEntry(1, "a.bin"),
    ]
    assert [issue.root for issue in report.walk_errors] == ["/dest", "/src"]
    assert report.destination_file_count == 7
