"""Display management for CLI interface."""

from copy_confirmer.ui.cli.display.found_json import FoundMapWriter, render_found_json
from copy_confirmer.ui.cli.display.progress import ProgressDisplay, RichProgressListener
from copy_confirmer.ui.cli.display.result import ResultDisplay

__all__ = [
    "FoundMapWriter",
    "ProgressDisplay",
    "ResultDisplay",
    "RichProgressListener",
    "render_found_json",
]
