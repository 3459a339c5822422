"""Application service that runs a copy confirmation with configured defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from copy_confirmer.config.settings import DEFAULT_JOBS, HASH_CHUNK_SIZE
from copy_confirmer.features.confirmation import (
    CopyConfirmer,
    ProgressListener,
    Report,
)


@dataclass(slots=True)
class ConfirmRequest:
    """Parameters describing a confirmation run."""

    source_root: Path
    destination_roots: list[Path] = field(default_factory=list)
    jobs: int | None = None
    want_found_map: bool = False
    chunk_size: int | None = None


@final
class ConfirmCopiesService:
    """Application façade building a :class:`CopyConfirmer` per request."""

    def run(
        self,
        request: ConfirmRequest,
        progress: ProgressListener | None = None,
    ) -> Report:
        """Execute the confirmation, filling unset options from settings."""

        confirmer = CopyConfirmer(
            request.jobs if request.jobs is not None else DEFAULT_JOBS,
            chunk_size=request.chunk_size or HASH_CHUNK_SIZE,
            progress=progress,
        )
        return confirmer.compare(
            request.source_root,
            request.destination_roots,
            want_found_map=request.want_found_map,
        )


__all__ = ["ConfirmCopiesService", "ConfirmRequest"]
