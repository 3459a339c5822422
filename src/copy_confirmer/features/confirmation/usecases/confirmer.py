"""
Summary: Directory comparison by content across one or more destinations.
Why: Give library and CLI callers one entry point that owns both hashing phases.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from copy_confirmer.config.settings import HASH_CHUNK_SIZE

from ..domain.errors import ConfigError, WalkError
from ..domain.models import SOURCE_TREE_ID, HashPhase, Report, WalkIssue
from .events import ConfirmationEvent, log_event
from .job_pool import HashJobPool
from .matcher import match_source
from .ports import FileHasher, ProgressListener
from .reporter import build_report
from .tree_index import build_tree_index
from .tree_walker import collect_jobs, log_walk_error

PathLike = str | os.PathLike[str]


def _require_directory(path: PathLike, role: str) -> Path:
    directory = Path(path)
    if not directory.exists():
        raise ConfigError(f"{role.capitalize()} directory does not exist: {directory}")
    if not directory.is_dir():
        raise ConfigError(f"{role.capitalize()} path is not a directory: {directory}")
    return directory


class CopyConfirmer:
    """Check that every file in a source tree exists in one of the destinations.

    Each source file whose content exists in at least one destination, under
    any name, counts as copied. The run happens in two strictly sequential
    phases on a shared worker pool:

    1. every destination tree is hashed into a :class:`TreeIndex`, which is
       then frozen;
    2. the source tree is hashed and each result is looked up in the index.

    Example::

        report = CopyConfirmer(4).compare("backup/src", ["/mnt/disk1", "/mnt/disk2"])
        if not report.all_present:
            print(report.missing)
    """

    def __init__(
        self,
        worker_count: int = 1,
        *,
        chunk_size: int | None = None,
        progress: ProgressListener | None = None,
        hasher: FileHasher | None = None,
    ) -> None:
        """Initialise a confirmer.

        Args:
            worker_count: Number of hashing jobs run in parallel.
            chunk_size: Bytes read per chunk; defaults to ``HASH_CHUNK_SIZE``.
            progress: Listener receiving one signal per hashed file.
            hasher: Replacement digest function, mainly for tests.

        Raises:
            ConfigError: If ``worker_count`` or ``chunk_size`` is below 1.
        """
        if worker_count < 1:
            raise ConfigError(f"Worker count must be at least 1; received {worker_count}")
        if chunk_size is not None and chunk_size < 1:
            raise ConfigError(f"Chunk size must be at least 1 byte; received {chunk_size}")
        self.worker_count: int = worker_count
        self.chunk_size: int = chunk_size or HASH_CHUNK_SIZE
        self._progress: ProgressListener | None = progress
        self._hasher: FileHasher | None = hasher

    def compare(
        self,
        source: PathLike,
        destinations: Sequence[PathLike],
        *,
        want_found_map: bool = False,
    ) -> Report:
        """Compare ``source`` against ``destinations`` and return the report.

        Raises:
            ConfigError: If a root is missing, not a directory, or no destination is given.
            ConfirmerError: If hashing failed for a reason other than an unreadable file.
        """
        if isinstance(destinations, (str, os.PathLike)):
            raise ConfigError("Destinations must be a sequence of paths, not a single path")
        source_root = _require_directory(source, "source")
        if not destinations:
            raise ConfigError("At least one destination directory is required")
        destination_roots = [_require_directory(path, "destination") for path in destinations]

        walk_issues: list[WalkIssue] = []

        def _on_walk_error(error: WalkError) -> None:
            log_walk_error(error)
            walk_issues.append(
                WalkIssue(root=str(error.root), path=str(error.path), message=error.reason)
            )

        log_event(
            logging.INFO,
            ConfirmationEvent.RUN_START,
            "Confirming %s against %d destination(s) with %d job(s)",
            source_root,
            len(destination_roots),
            self.worker_count,
            jobs=self.worker_count,
        )

        with HashJobPool(
            self.worker_count,
            hasher=self._hasher,
            chunk_size=self.chunk_size,
        ) as pool:
            index = build_tree_index(
                pool,
                destination_roots,
                progress=self._progress,
                on_walk_error=_on_walk_error,
            )
            source_jobs = collect_jobs(source_root, SOURCE_TREE_ID, on_error=_on_walk_error)
            outcomes = match_source(
                pool.run_phase(HashPhase.SOURCE, source_jobs, self._progress),
                index,
                source_root=source_root,
            )

        report = build_report(
            outcomes,
            want_found_map=want_found_map,
            destination_errors=index.errors,
            walk_errors=walk_issues,
            destination_file_count=index.file_count,
        )
        if report.all_present:
            log_event(
                logging.INFO,
                ConfirmationEvent.RUN_COMPLETE,
                "All %d source files present in destinations",
                report.source_file_count,
            )
        else:
            log_event(
                logging.INFO,
                ConfirmationEvent.RUN_INCOMPLETE,
                "%d of %d source files missing from destinations",
                len(report.missing),
                report.source_file_count,
            )
        return report


def confirm(
    source_root: PathLike,
    destination_roots: Sequence[PathLike],
    worker_count: int = 1,
    want_found_map: bool = False,
    *,
    progress: ProgressListener | None = None,
    chunk_size: int | None = None,
) -> Report:
    """Check that every file under ``source_root`` exists in one of ``destination_roots``.

    Args:
        source_root: Tree whose files must all have been copied.
        destination_roots: Trees searched for identical content, in order.
        worker_count: Number of hashing threads (at least 1).
        want_found_map: Whether the report should map found files to their copies.
        progress: Listener receiving one signal per hashed file.
        chunk_size: Bytes read per chunk while hashing.

    Returns:
        Report: Verdict with sorted missing paths and optional found map.
    """
    confirmer = CopyConfirmer(worker_count, chunk_size=chunk_size, progress=progress)
    return confirmer.compare(source_root, destination_roots, want_found_map=want_found_map)


__all__ = ["CopyConfirmer", "confirm"]
