"""Domain types for copy confirmation."""

from .errors import ConfigError, ConfirmerError, ReadError, WalkError
from .models import (
    SOURCE_TREE_ID,
    ContentDigest,
    DestinationError,
    FileEntry,
    Found,
    HashJob,
    HashPhase,
    HashResult,
    MatchOutcome,
    Missing,
    MissingReason,
    Report,
    WalkIssue,
)

__all__ = [
    "ConfigError",
    "ConfirmerError",
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
    "ReadError",
    "Report",
    "SOURCE_TREE_ID",
    "WalkError",
    "WalkIssue",
]
