"""
Summary: Ports for the confirmation feature.
Why: Keep progress reporting and digest computation swappable in tests and UIs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain.models import ContentDigest, HashPhase, HashResult


class ProgressListener(Protocol):
    """Receive one signal per finished hash job, framed by phase boundaries.

    Callbacks run on the thread draining the pool, never on worker threads.
    """

    def phase_started(self, phase: HashPhase, total: int) -> None:
        """A phase is about to hash ``total`` files."""

        ...

    def job_completed(self, phase: HashPhase, result: HashResult) -> None:
        """One file of ``phase`` has been hashed or failed to read."""

        ...

    def phase_finished(self, phase: HashPhase) -> None:
        """Every job of ``phase`` has produced a result."""

        ...


class FileHasher(Protocol):
    """Compute the content digest of a single file."""

    def __call__(self, path: Path) -> ContentDigest:
        ...


__all__ = ["FileHasher", "ProgressListener"]
