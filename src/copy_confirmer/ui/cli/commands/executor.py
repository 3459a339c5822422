"""src/copy_confirmer/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse orchestration and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from copy_confirmer.application.services import ConfirmCopiesService, ConfirmRequest
from copy_confirmer.features.confirmation import Report
from copy_confirmer.ui.cli.args.options import ConfirmArgs
from copy_confirmer.ui.cli.display.found_json import FoundMapWriter
from copy_confirmer.ui.cli.display.progress import ProgressDisplay
from copy_confirmer.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: ConfirmArgs
    app: ConfirmCopiesService
    request: ConfirmRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay
    found_writer: FoundMapWriter

    def __init__(self, args: ConfirmArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.app = ConfirmCopiesService()
        self.request = ConfirmRequest(
            source_root=args.source,
            destination_roots=list(args.destinations),
            jobs=args.jobs,
            want_found_map=args.print_found,
        )
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()
        self.found_writer = FoundMapWriter()

    @abstractmethod
    def execute(self) -> Report:
        """Execute the command.

        Returns:
            Report of the confirmation run.
        """
        pass

    def display_results(self, report: Report) -> None:
        """Display the verdict and, when requested, the found map.

        Args:
            report: Report of the confirmation run.
        """
        self.result_display.show_report(
            report,
            show_errors=self.args.show_errors,
            quiet=self.args.quiet,
        )
        if self.args.print_found:
            self.found_writer.write(report, self.args.destinations, self.args.out_file)
