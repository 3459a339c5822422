"""copy-confirmer: confirm that every file of a tree was copied somewhere."""

from copy_confirmer.features.confirmation import (
    ConfigError,
    ConfirmerError,
    CopyConfirmer,
    Report,
    confirm,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfirmerError",
    "CopyConfirmer",
    "Report",
    "__version__",
    "confirm",
]
