"""
Summary: Lazy enumeration of regular files below a root directory.
Why: Feed hashing jobs without following symlinks or aborting on unreadable entries.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from copy_confirmer.platform.logging import logger

from ..domain.errors import WalkError
from ..domain.models import HashJob
from .events import ConfirmationEvent, log_event

WalkErrorHandler = Callable[[WalkError], None]


def log_walk_error(error: WalkError) -> None:
    """Log ``error`` as a structured walk warning."""

    log_event(
        logging.WARNING,
        ConfirmationEvent.WALK_ERROR,
        "Cannot walk %s: %s",
        error.path,
        error.reason,
        path=str(error.path),
        base_path=str(error.root),
        error_message=error.reason,
    )


def walk_tree(root: Path, *, on_error: WalkErrorHandler | None = None) -> Iterator[str]:
    """Yield ``/``-separated paths, relative to ``root``, of every regular file below it.

    Directories are visited depth first in no guaranteed order. Symbolic
    links are never followed and, not being regular files, are skipped.
    Entries that cannot be inspected are passed to ``on_error`` (or logged
    when no handler is given) and the walk carries on with their siblings.
    """

    report = on_error or log_walk_error
    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as scanner:
                entries = list(scanner)
        except OSError as exc:
            report(WalkError(root, directory, exc))
            continue

        for entry in entries:
            entry_path = Path(entry.path)
            try:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(entry_path)
                elif entry.is_file(follow_symlinks=False):
                    yield entry_path.relative_to(root).as_posix()
                else:
                    logger.debug("Skipping non-regular entry %s", entry_path)
            except OSError as exc:
                report(WalkError(root, entry_path, exc))


def collect_jobs(
    root: Path,
    tree_id: int,
    *,
    on_error: WalkErrorHandler | None = None,
) -> Iterator[HashJob]:
    """Wrap :func:`walk_tree` output into hashing jobs tagged with ``tree_id``."""

    for relative_path in walk_tree(root, on_error=on_error):
        yield HashJob(
            tree_id=tree_id,
            absolute_path=root / relative_path,
            relative_path=relative_path,
        )


__all__ = ["WalkErrorHandler", "collect_jobs", "log_walk_error", "walk_tree"]
