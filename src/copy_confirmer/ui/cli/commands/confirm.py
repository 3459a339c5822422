"""src/copy_confirmer/ui/cli/commands/confirm.py
What: Execute a confirmation run from parsed CLI arguments.
Why: Bridge parsed arguments with the application service and displays.
"""

from typing import override

from copy_confirmer.features.confirmation import Report
from copy_confirmer.ui.cli.commands.executor import CommandExecutor


class ConfirmCommand(CommandExecutor):
    """Command comparing a source directory with its destinations."""

    @override
    def execute(self) -> Report:
        """Execute the confirmation command.

        Returns:
            Report of the confirmation run.
        """
        report = self.progress_display.run_with_service(
            self.app,
            self.request,
            enabled=self.args.show_progress and not self.args.quiet,
        )
        self.display_results(report)
        return report
