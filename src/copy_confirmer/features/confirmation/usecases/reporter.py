"""
Summary: Fold per-file match outcomes into the final report.
Why: Give one owner the job of turning unordered results into a stable verdict.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..domain.models import (
    DestinationError,
    FileEntry,
    Found,
    MatchOutcome,
    Missing,
    MissingReason,
    Report,
    WalkIssue,
)


def build_report(
    outcomes: Mapping[str, MatchOutcome],
    *,
    want_found_map: bool = False,
    destination_errors: Iterable[DestinationError] = (),
    walk_errors: Iterable[WalkIssue] = (),
    destination_file_count: int = 0,
) -> Report:
    """Build a :class:`Report` whose content does not depend on completion order.

    Args:
        outcomes: Outcome of every source file keyed by its relative path.
        want_found_map: Whether to include the source-to-destination mapping.
        destination_errors: Destination files that could not be read.
        walk_errors: Entries skipped while walking any tree.
        destination_file_count: Number of destination files hashed or attempted.

    Returns:
        Report: Aggregated verdict with sorted missing paths.
    """

    missing: list[str] = []
    unreadable: dict[str, str] = {}
    found_map: dict[str, tuple[FileEntry, ...]] | None = {} if want_found_map else None

    for relative_path in sorted(outcomes):
        outcome = outcomes[relative_path]
        if isinstance(outcome, Missing):
            missing.append(relative_path)
            if outcome.reason is MissingReason.UNREADABLE:
                unreadable[relative_path] = outcome.error or "unreadable"
        elif isinstance(outcome, Found) and found_map is not None:
            found_map[relative_path] = outcome.locations

    return Report(
        all_present=not missing,
        missing=tuple(missing),
        found_map=found_map,
        unreadable=unreadable,
        destination_errors=tuple(sorted(destination_errors, key=lambda error: error.entry)),
        walk_errors=tuple(sorted(walk_errors, key=lambda issue: (issue.root, issue.path))),
        source_file_count=len(outcomes),
        destination_file_count=destination_file_count,
    )


__all__ = ["build_report"]
