"""
Summary: Structured event identifiers and the helper that logs them.
Why: Let the Rich console handler style confirmation progress consistently.
"""

from __future__ import annotations

from enum import StrEnum

from copy_confirmer.platform.logging import logger


class ConfirmationEvent(StrEnum):
    """Structured event identifiers for confirmation logs."""

    RUN_START = "confirmation.run.start"
    RUN_COMPLETE = "confirmation.run.complete"
    RUN_INCOMPLETE = "confirmation.run.incomplete"
    PHASE_START = "confirmation.phase.start"
    PHASE_COMPLETE = "confirmation.phase.complete"
    WALK_ERROR = "confirmation.walk.error"
    FILE_READ_ERROR = "confirmation.file.read_error"
    FILE_MISSING = "confirmation.file.missing"


def log_event(
    level: int,
    event: ConfirmationEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Emit ``message`` with ``event`` and ``context`` attached as record extras."""

    extra: dict[str, object] = {"confirmation_event": event.value}
    extra.update(context)
    logger.log(level, message, *message_args, extra=extra)


__all__ = ["ConfirmationEvent", "log_event"]
