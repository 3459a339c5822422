"""src/copy_confirmer/ui/cli/display/result.py
What: Render the confirmation verdict on the console.
Why: Keep console output formatting out of the confirmation core.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from copy_confirmer.features.confirmation import Report

ALL_PRESENT_MESSAGE = "All files present in destinations."


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        # Missing paths must stay on one line when stdout is piped.
        self.console = Console(soft_wrap=True, highlight=False)

    def show_report(
        self,
        report: Report,
        *,
        show_errors: bool = False,
        quiet: bool = False,
    ) -> None:
        """Display the verdict and, when files are missing, every missing path.

        Args:
            report: Report returned by the confirmation run.
            show_errors: Annotate unreadable files and list destination errors.
            quiet: Suppress the summary line; the verdict is always printed.
        """
        if report.all_present:
            self.console.print(f"[green]{ALL_PRESENT_MESSAGE}[/green]")
        else:
            self.console.print("[bold red]Missing files:[/bold red]")
            for path in report.missing:
                error = report.unreadable.get(path)
                if show_errors and error is not None:
                    self.console.print(
                        f"{escape(path)} [yellow](could not be verified: {escape(error)})[/yellow]"
                    )
                else:
                    self.console.print(escape(path))

        if show_errors:
            self._show_errors(report)

        if not quiet:
            self.console.print(
                f"Checked {report.source_file_count} source file(s) against "
                f"{report.destination_file_count} destination file(s); "
                f"{len(report.missing)} missing."
            )

    def _show_errors(self, report: Report) -> None:
        if report.destination_errors:
            self.console.print("[bold yellow]Unreadable destination files:[/bold yellow]")
            for error in report.destination_errors:
                self.console.print(
                    f"  [{error.entry.tree_id}] {escape(error.entry.relative_path)}: "
                    f"{escape(error.message)}"
                )
        if report.walk_errors:
            self.console.print("[bold yellow]Entries that could not be walked:[/bold yellow]")
            for issue in report.walk_errors:
                self.console.print(f"  {escape(issue.path)}: {escape(issue.message)}")
