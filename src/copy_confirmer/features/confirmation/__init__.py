"""Public surface for the confirmation feature."""

from .domain import (
    ConfigError,
    ConfirmerError,
    DestinationError,
    FileEntry,
    Found,
    HashPhase,
    HashResult,
    Missing,
    MissingReason,
    ReadError,
    Report,
    WalkError,
    WalkIssue,
)
from .usecases import CopyConfirmer, ProgressListener, confirm

__all__ = [
    "ConfigError",
    "ConfirmerError",
    "CopyConfirmer",
    "DestinationError",
    "FileEntry",
    "Found",
    "HashPhase",
    "HashResult",
    "Missing",
    "MissingReason",
    "ProgressListener",
    "ReadError",
    "Report",
    "WalkError",
    "WalkIssue",
    "confirm",
]
