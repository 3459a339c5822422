"""Command line argument handling package."""

from copy_confirmer.ui.cli.args.parser import ArgumentParser
from copy_confirmer.ui.cli.args.options import ConfirmArgs

__all__ = ["ArgumentParser", "ConfirmArgs"]
