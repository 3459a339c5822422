"""
Summary: Exception hierarchy raised while confirming copies.
Why: Let callers tell fatal setup failures apart from per-file problems.
"""

from __future__ import annotations

from pathlib import Path


class ConfirmerError(RuntimeError):
    """Base class for errors produced when comparing directories."""


class ConfigError(ConfirmerError):
    """Raised before hashing starts when the run cannot be set up."""


class ReadError(ConfirmerError):
    """Raised when a file cannot be read while computing its digest."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause) or cause.__class__.__name__
        super().__init__(f"Cannot read {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


class WalkError(ConfirmerError):
    """Raised for a directory entry that cannot be traversed."""

    def __init__(self, root: Path, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause) or cause.__class__.__name__
        super().__init__(f"Cannot walk {path}: {reason}")
        self.root: Path = root
        self.path: Path = path
        self.reason: str = reason


__all__ = ["ConfigError", "ConfirmerError", "ReadError", "WalkError"]
