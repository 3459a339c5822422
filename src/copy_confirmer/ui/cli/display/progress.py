"""src/copy_confirmer/ui/cli/display/progress.py
What: Drive Rich progress bars from the confirmation progress signals.
Why: Show per-phase hashing progress without coupling the core to Rich.
"""

from __future__ import annotations

from typing import Any, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from copy_confirmer.application.services import ConfirmRequest
from copy_confirmer.features.confirmation import (
    HashPhase,
    HashResult,
    ProgressListener,
    Report,
)
from copy_confirmer.platform.logging import EventRichHandler, logger

_PHASE_LABELS: dict[HashPhase, str] = {
    HashPhase.DESTINATION: "Checking files from destinations",
    HashPhase.SOURCE: "Checking files from source",
}


@runtime_checkable
class ConfirmServiceLike(Protocol):
    """Protocol for application services that run a confirmation with progress."""

    def run(
        self,
        request: ConfirmRequest,
        progress: ProgressListener | None = None,
    ) -> Report:
        ...


@final
class RichProgressListener:
    """Advance one Rich task per hashing phase."""

    def __init__(self, progress: Progress) -> None:
        self._progress: Progress = progress
        self._tasks: dict[HashPhase, TaskID] = {}

    def phase_started(self, phase: HashPhase, total: int) -> None:
        self._tasks[phase] = self._progress.add_task(
            f"[cyan]{_PHASE_LABELS[phase]}", total=total
        )

    def job_completed(self, phase: HashPhase, result: HashResult) -> None:
        del result
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.advance(task_id)

    def phase_finished(self, phase: HashPhase) -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.update(task_id, description=f"[green]{_PHASE_LABELS[phase]}")


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: ConfirmServiceLike,
        request: ConfirmRequest,
        *,
        enabled: bool = True,
    ) -> Report:
        """Run a confirmation via the application service with a progress bar.

        Args:
            app: Application service running the confirmation.
            request: Confirmation parameters.
            enabled: Whether to render the progress bar at all.

        Returns:
            Report produced by the service.
        """
        if not enabled:
            return app.run(request)

        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, EventRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": False,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(
            TimeElapsedColumn(),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("{task.description}"),
            **progress_kwargs,
        ) as progress:
            return app.run(request, progress=RichProgressListener(progress))
