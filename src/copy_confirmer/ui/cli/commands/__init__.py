"""Command execution package for CLI."""

from copy_confirmer.ui.cli.commands.executor import CommandExecutor
from copy_confirmer.ui.cli.commands.confirm import ConfirmCommand

__all__ = ["CommandExecutor", "ConfirmCommand"]
