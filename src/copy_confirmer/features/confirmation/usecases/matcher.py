"""
Summary: Match source hash results against a frozen destination index.
Why: Turn each source digest into a found-or-missing verdict without touching the index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..domain.models import (
    Found,
    HashPhase,
    HashResult,
    MatchOutcome,
    Missing,
    MissingReason,
)
from .events import ConfirmationEvent, log_event
from .tree_index import TreeIndex


def match_result(result: HashResult, index: TreeIndex) -> MatchOutcome:
    """Classify one source result as found or missing."""

    if result.error is not None:
        return Missing(reason=MissingReason.UNREADABLE, error=result.error.reason)
    assert result.digest is not None
    locations = index.lookup(result.digest)
    if locations:
        return Found(locations=locations)
    return Missing(reason=MissingReason.CONTENT_ABSENT)


def match_source(
    results: Iterable[HashResult],
    index: TreeIndex,
    *,
    source_root: Path | None = None,
) -> dict[str, MatchOutcome]:
    """Return the outcome of every source result, keyed by relative path.

    Raises:
        RuntimeError: If ``index`` is still accepting destination results.
    """

    if not index.frozen:
        raise RuntimeError("Cannot match source files before the destination index is final")

    base_path = str(source_root) if source_root is not None else None
    outcomes: dict[str, MatchOutcome] = {}
    for result in results:
        outcome = match_result(result, index)
        outcomes[result.relative_path] = outcome
        if not isinstance(outcome, Missing):
            continue
        if outcome.reason is MissingReason.UNREADABLE:
            log_event(
                logging.WARNING,
                ConfirmationEvent.FILE_READ_ERROR,
                "Cannot read source file %s: %s",
                result.relative_path,
                outcome.error,
                phase=HashPhase.SOURCE.value,
                path=result.relative_path,
                base_path=base_path,
                error_message=outcome.error,
            )
        else:
            log_event(
                logging.DEBUG,
                ConfirmationEvent.FILE_MISSING,
                "No destination holds the content of %s",
                result.relative_path,
                path=result.relative_path,
            )
    return outcomes


__all__ = ["match_result", "match_source"]
