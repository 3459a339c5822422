"""Configuration management for copy-confirmer."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from copy_confirmer.config.file_ops import write_text_file
from copy_confirmer.config.paths import default_config_path
from copy_confirmer.platform.logging import logger

JOBS_DEFAULT: Final[int] = 1
HASH_CHUNK_SIZE_DEFAULT: Final[int] = 64 * 1024


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Number of hashing worker threads
    jobs: int = JOBS_DEFAULT

    # Bytes read per chunk while hashing
    hash_chunk_size: int = HASH_CHUNK_SIZE_DEFAULT

    # Render the progress bar while hashing
    show_progress: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# copy-confirmer configuration file")
        lines.append("")

        lines.append("# Number of parallel hashing jobs (at least 1)")
        lines.append(f"jobs = {self._format_toml_value(config['jobs'])}")
        lines.append("")

        lines.append("# Bytes read per chunk when hashing a file")
        lines.append(f"hash_chunk_size = {self._format_toml_value(config['hash_chunk_size'])}")
        lines.append("")

        lines.append("# Show a progress bar while hashing")
        lines.append(f"show_progress = {self._format_toml_value(config['show_progress'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/copy_confirmer.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. The result is cached until
        :meth:`reset` is called.

        Args:
            path: Explicit configuration file. Defaults to the portable location.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and (path is None or path == cls._loaded_from):
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s'", key)
                del config_dict[key]

            logger.debug("Configuration loaded from %s", config_file)
            instance = cls(**config_dict)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration instance."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "HASH_CHUNK_SIZE_DEFAULT", "JOBS_DEFAULT"]
