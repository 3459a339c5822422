"""src/copy_confirmer/ui/cli/display/found_json.py
What: Render the found map of a confirmation run as JSON.
Why: Let users keep a record of where each source file's copies live.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from typing import final

from rich.console import Console

from copy_confirmer.config.file_ops import write_text_file
from copy_confirmer.features.confirmation import FileEntry, Report
from copy_confirmer.platform.logging import logger


def _location_label(entry: FileEntry, destination_roots: Sequence[Path]) -> str:
    """Destination path as shown in JSON; prefixed by its root when several exist."""

    if len(destination_roots) <= 1:
        return entry.relative_path
    root = destination_roots[entry.tree_id]
    return str(PurePosixPath(root.as_posix()) / entry.relative_path)


def render_found_json(report: Report, destination_roots: Sequence[Path]) -> str:
    """Serialize ``report.found_map`` as indented JSON keyed by source path."""

    found_map = report.found_map or {}
    payload: dict[str, list[str]] = {
        source_path: [_location_label(entry, destination_roots) for entry in locations]
        for source_path, locations in sorted(found_map.items())
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


@final
class FoundMapWriter:
    """Write the found map to a file, or to stdout when no file is given."""

    console: Console

    def __init__(self) -> None:
        self.console = Console(soft_wrap=True, highlight=False)

    def write(
        self,
        report: Report,
        destination_roots: Sequence[Path],
        out_file: Path | None = None,
    ) -> None:
        content = render_found_json(report, destination_roots)
        if out_file is None:
            self.console.print_json(content)
            return
        write_text_file(out_file, content + "\n")
        logger.info("Found map written to %s", out_file)


__all__ = ["FoundMapWriter", "render_found_json"]
