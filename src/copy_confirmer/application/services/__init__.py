"""Application services exposed to user interfaces."""

from .confirm_service import ConfirmCopiesService, ConfirmRequest

__all__ = ["ConfirmCopiesService", "ConfirmRequest"]
