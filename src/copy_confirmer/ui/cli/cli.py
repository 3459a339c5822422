"""Command line interface for copy-confirmer."""

import sys
from typing import final

from copy_confirmer.features.confirmation import ConfirmerError
from copy_confirmer.platform.logging import logger
from copy_confirmer.ui.cli.args import ArgumentParser, ConfirmArgs
from copy_confirmer.ui.cli.commands import ConfirmCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 when files are missing or the run fails, and 130
        when interrupted.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: ConfirmArgs = ArgumentParser.process_args(args_list)
            report = ConfirmCommand(args).execute()
            if not report.all_present:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfirmerError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Underlying command processing
        calls ``sys.exit(...)`` on missing files and errors, so this return is
        only reached when every file was confirmed.
    """
    CommandProcessor.process_command()
    return 0
