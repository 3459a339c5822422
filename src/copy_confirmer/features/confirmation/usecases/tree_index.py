"""
Summary: Digest-to-location index over every destination tree.
Why: Answer "does this content exist anywhere?" with one lookup per source file.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from ..domain.errors import WalkError
from ..domain.models import (
    ContentDigest,
    DestinationError,
    FileEntry,
    HashPhase,
    HashJob,
    HashResult,
)
from .events import ConfirmationEvent, log_event
from .job_pool import HashJobPool
from .ports import ProgressListener
from .tree_walker import collect_jobs


class TreeIndex:
    """Map content digests to every destination location holding that content.

    The index is written by a single owner while destination results arrive,
    then frozen; after :meth:`freeze` it only serves lookups.
    """

    def __init__(self, destination_roots: Sequence[Path] = ()) -> None:
        self._destination_roots: tuple[Path, ...] = tuple(destination_roots)
        self._locations: defaultdict[ContentDigest, set[FileEntry]] = defaultdict(set)
        self._errors: list[DestinationError] = []
        self._file_count: int = 0
        self._frozen: bool = False

    def add(self, result: HashResult) -> None:
        """Record a destination result; unreadable files are kept aside as errors."""

        if self._frozen:
            raise RuntimeError("TreeIndex is frozen; destination results can no longer be added")
        self._file_count += 1
        if result.error is not None:
            self._errors.append(DestinationError(entry=result.entry, message=result.error.reason))
            log_event(
                logging.WARNING,
                ConfirmationEvent.FILE_READ_ERROR,
                "Cannot read destination file %s: %s",
                result.relative_path,
                result.error.reason,
                phase=HashPhase.DESTINATION.value,
                path=str(result.error.path),
                base_path=self._base_path(result.tree_id),
                error_message=result.error.reason,
            )
            return
        assert result.digest is not None
        self._locations[result.digest].add(result.entry)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, digest: ContentDigest) -> tuple[FileEntry, ...]:
        """Return the locations holding ``digest``, sorted by tree then path."""

        return tuple(sorted(self._locations.get(digest, ())))

    def __contains__(self, digest: object) -> bool:
        return digest in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    @property
    def errors(self) -> tuple[DestinationError, ...]:
        return tuple(sorted(self._errors, key=lambda error: error.entry))

    @property
    def file_count(self) -> int:
        """Number of destination results consumed, readable or not."""

        return self._file_count

    def _base_path(self, tree_id: int) -> str | None:
        if 0 <= tree_id < len(self._destination_roots):
            return str(self._destination_roots[tree_id])
        return None


def destination_jobs(
    destination_roots: Sequence[Path],
    *,
    on_walk_error: Callable[[WalkError], None] | None = None,
) -> Iterable[HashJob]:
    """Yield jobs for every destination root, each tagged with its position."""

    for tree_id, root in enumerate(destination_roots):
        yield from collect_jobs(root, tree_id, on_error=on_walk_error)


def build_tree_index(
    pool: HashJobPool,
    destination_roots: Sequence[Path],
    *,
    progress: ProgressListener | None = None,
    on_walk_error: Callable[[WalkError], None] | None = None,
) -> TreeIndex:
    """Hash every destination tree and return the frozen index of their contents."""

    index = TreeIndex(destination_roots)
    jobs = destination_jobs(destination_roots, on_walk_error=on_walk_error)
    for result in pool.run_phase(HashPhase.DESTINATION, jobs, progress):
        index.add(result)
    index.freeze()
    return index


__all__ = ["TreeIndex", "build_tree_index", "destination_jobs"]
