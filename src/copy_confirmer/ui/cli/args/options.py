"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class ConfirmArgs:
    """Validated command line arguments for a confirmation run."""

    source: Path
    destinations: list[Path]
    jobs: int
    out_file: Path | None
    print_found: bool
    show_progress: bool
    show_errors: bool
    verbose: bool
    quiet: bool


__all__ = ["ConfirmArgs"]
