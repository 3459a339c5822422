"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from copy_confirmer import __version__
from copy_confirmer.config.config import Config
from copy_confirmer.config.settings import DEFAULT_JOBS, SHOW_PROGRESS
from copy_confirmer.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from copy_confirmer.ui.cli.args.options import ConfirmArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="copcon",
            description="Confirms all files of a source directory are copied somewhere "
            "in the destination directories, comparing content only.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        _ = parser.add_argument(
            "-s",
            "--source",
            type=str,
            required=True,
            help="Source directory",
            metavar="SOURCE",
        )
        _ = parser.add_argument(
            "-d",
            "--destination",
            type=str,
            action="append",
            required=True,
            help="Destination directory (repeat for several destinations)",
            metavar="DESTINATION",
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=int,
            default=None,
            help=f"Number of threads for checksum calculation (default: {DEFAULT_JOBS})",
        )
        _ = parser.add_argument(
            "-o",
            "--out-file",
            type=str,
            default=None,
            help="Write the JSON found map to this file instead of stdout",
            metavar="OUT_FILE",
        )
        _ = parser.add_argument(
            "-f",
            "--print-found",
            action="store_true",
            help="Print JSON mapping each found source file to its copies",
        )
        _ = parser.add_argument(
            "--no-progress-bar",
            action="store_true",
            help="Disable the progress bar",
        )
        _ = parser.add_argument(
            "--show-errors",
            action="store_true",
            help="Tell unreadable files apart from missing content and list destination errors",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed hashing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and the verdict",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ConfirmArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ConfirmArgs: Processed command line arguments.

        Raises:
            SystemExit: If a directory does not exist or the job count is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        source = Path(parsed_args.source)
        if not source.is_dir():
            logger.error("Source directory does not exist or is not a directory: %s", source)
            sys.exit(1)

        destinations = [Path(raw) for raw in parsed_args.destination]
        for destination in destinations:
            if not destination.is_dir():
                logger.error(
                    "Destination directory does not exist or is not a directory: %s",
                    destination,
                )
                sys.exit(1)

        jobs = parsed_args.jobs if parsed_args.jobs is not None else DEFAULT_JOBS
        if jobs < 1:
            logger.error("Jobs must be a positive integer; received %s", jobs)
            sys.exit(1)

        return ConfirmArgs(
            source=source,
            destinations=destinations,
            jobs=jobs,
            out_file=Path(parsed_args.out_file) if parsed_args.out_file else None,
            print_found=parsed_args.print_found,
            show_progress=SHOW_PROGRESS and not parsed_args.no_progress_bar,
            show_errors=parsed_args.show_errors,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
