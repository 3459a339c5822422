"""Shared pytest fixtures for building directory trees on disk."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

import pytest

from copy_confirmer.config.config import Config

TreeFactory = Callable[[str, Mapping[str, bytes | str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create a directory under ``tmp_path`` populated with the given files.

    Keys are ``/``-separated relative paths, values the file contents.
    """

    def _make(name: str, files: Mapping[str, bytes | str]) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relative_path, content in files.items():
            target = root / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                _ = target.write_text(content, encoding="utf-8")
            else:
                _ = target.write_bytes(content)
        return root

    return _make


@pytest.fixture
def fresh_config() -> Iterator[None]:
    """Reset the configuration singleton around a test run."""

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config.reset()
    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
