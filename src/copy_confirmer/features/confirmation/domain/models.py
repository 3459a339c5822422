"""
Summary: Value objects describing files, hashing work and confirmation outcomes.
Why: Share immutable, thread-safe records between workers and the aggregating thread.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Final, TypeAlias

from .errors import ReadError

ContentDigest: TypeAlias = bytes
"""Fixed-length content fingerprint; equal digests mean identical bytes."""

SOURCE_TREE_ID: Final[int] = -1


class HashPhase(StrEnum):
    """Sequential stages of a confirmation run."""

    DESTINATION = "destination"
    SOURCE = "source"


class MissingReason(StrEnum):
    """Why a source file could not be confirmed as copied."""

    CONTENT_ABSENT = "content_absent"
    UNREADABLE = "unreadable"


@dataclass(slots=True, frozen=True, order=True)
class FileEntry:
    """A file located by the tree it was found in and its path inside that tree."""

    tree_id: int
    relative_path: str


@dataclass(slots=True, frozen=True)
class HashJob:
    """A single file waiting to be hashed by the worker pool."""

    tree_id: int
    absolute_path: Path
    relative_path: str

    @property
    def entry(self) -> FileEntry:
        return FileEntry(self.tree_id, self.relative_path)


@dataclass(slots=True, frozen=True)
class HashResult:
    """Outcome of hashing one job: either a digest or the read error."""

    tree_id: int
    relative_path: str
    digest: ContentDigest | None = None
    error: ReadError | None = None

    def __post_init__(self) -> None:
        if (self.digest is None) == (self.error is None):
            raise ValueError("HashResult requires exactly one of digest or error")

    @property
    def entry(self) -> FileEntry:
        return FileEntry(self.tree_id, self.relative_path)

    @property
    def ok(self) -> bool:
        return self.digest is not None


@dataclass(slots=True, frozen=True)
class Found:
    """The source file's content exists at ``locations`` in the destinations."""

    locations: tuple[FileEntry, ...]


@dataclass(slots=True, frozen=True)
class Missing:
    """The source file could not be matched in any destination."""

    reason: MissingReason = MissingReason.CONTENT_ABSENT
    error: str | None = None


MatchOutcome: TypeAlias = Found | Missing


@dataclass(slots=True, frozen=True)
class DestinationError:
    """A destination file that could not be read and is absent from the index."""

    entry: FileEntry
    message: str


@dataclass(slots=True, frozen=True)
class WalkIssue:
    """A directory entry that could not be traversed."""

    root: str
    path: str
    message: str


@dataclass(slots=True, frozen=True)
class Report:
    """Final verdict of a confirmation run."""

    all_present: bool
    missing: tuple[str, ...] = ()
    found_map: dict[str, tuple[FileEntry, ...]] | None = None
    unreadable: dict[str, str] = field(default_factory=dict)
    destination_errors: tuple[DestinationError, ...] = ()
    walk_errors: tuple[WalkIssue, ...] = ()
    source_file_count: int = 0
    destination_file_count: int = 0

    @property
    def content_absent(self) -> tuple[str, ...]:
        """Missing files whose content was read but not found anywhere."""

        return tuple(path for path in self.missing if path not in self.unreadable)


__all__ = [
    "ContentDigest",
    "DestinationError",
    "FileEntry",
    "Found",
    "HashJob",
    "HashPhase",
    "HashResult",
    "MatchOutcome",
    "Missing",
    "MissingReason",
    "Report",
    "SOURCE_TREE_ID",
    "WalkIssue",
]
