"""Tests for lazy tree walking."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from copy_confirmer.features.confirmation import WalkError
from copy_confirmer.features.confirmation.domain.models import HashJob
from copy_confirmer.features.confirmation.usecases import tree_walker

TreeFactory = Callable[[str, Mapping[str, bytes | str]], Path]


def test_walk_tree_yields_relative_posix_paths(make_tree: TreeFactory) -> None:
    root = make_tree(
        "src",
        {"a.txt": "a", "x/b.txt": "b", "x/y/z/c.txt": "c", "x/empty/.keep": ""},
    )

    paths = sorted(tree_walker.walk_tree(root))

    assert paths == ["a.txt", "x/b.txt", "x/empty/.keep", "x/y/z/c.txt"]


def test_walk_tree_is_lazy(make_tree: TreeFactory) -> None:
    root = make_tree("src", {"a.txt": "a"})

    walker = tree_walker.walk_tree(root)

    assert next(walker) == "a.txt"
    with pytest.raises(StopIteration):
        _ = next(walker)


def test_walk_tree_skips_symlinks(make_tree: TreeFactory, tmp_path: Path) -> None:
    """Symlinked files and directories are not regular entries."""

    outside = make_tree("outside", {"secret.txt": "s"})
    root = make_tree("src", {"real.txt": "r"})
    os.symlink(outside / "secret.txt", root / "link.txt")
    os.symlink(outside, root / "linked_dir")
    os.symlink(root, root / "loop")
    os.symlink(tmp_path / "nowhere", root / "dangling")

    assert list(tree_walker.walk_tree(root)) == ["real.txt"]


def test_walk_tree_routes_unreadable_directories_to_handler(
    make_tree: TreeFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An unreadable directory is reported while its siblings are still walked."""

    root = make_tree("src", {"ok/a.txt": "a", "locked/b.txt": "b", "c.txt": "c"})
    real_scandir = os.scandir

    def _fake_scandir(path: os.PathLike[str] | str) -> object:
        if Path(path).name == "locked":
            raise PermissionError(13, "Permission denied")
        return real_scandir(path)

    monkeypatch.setattr(tree_walker.os, "scandir", _fake_scandir)
    errors: list[WalkError] = []

    paths = sorted(tree_walker.walk_tree(root, on_error=errors.append))

    assert paths == ["c.txt", "ok/a.txt"]
    assert len(errors) == 1
    assert errors[0].path == root / "locked"
    assert errors[0].root == root
    assert errors[0].reason == "Permission denied"


def test_walk_tree_logs_errors_without_handler(
    make_tree: TreeFactory,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    root = make_tree("src", {"locked/b.txt": "b"})
    real_scandir = os.scandir

    def _fake_scandir(path: os.PathLike[str] | str) -> object:
        if Path(path).name == "locked":
            raise PermissionError(13, "Permission denied")
        return real_scandir(path)

    monkeypatch.setattr(tree_walker.os, "scandir", _fake_scandir)
    caplog.set_level("WARNING")

    assert list(tree_walker.walk_tree(root)) == []
    assert any("Cannot walk" in message for message in caplog.messages)


def test_collect_jobs_tags_tree_and_absolute_path(make_tree: TreeFactory) -> None:
    root = make_tree("dest", {"x/a.txt": "a"})

    jobs = list(tree_walker.collect_jobs(root, 3))

    assert jobs == [HashJob(tree_id=3, absolute_path=root / "x/a.txt", relative_path="x/a.txt")]
