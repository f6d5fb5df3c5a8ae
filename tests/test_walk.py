"""Tests for the deterministic directory walk."""

import os
import stat

import pytest

from engine.core.errors import WalkError
from engine.io.archive import walk as walk_mod
from engine.io.archive.walk import iter_tree


def _rel(root, entries):
    return [p.relative_to(root).as_posix() for p, _ in entries]


def test_root_first_then_lexical_interleaved(tmp_path):
    """Files and directories are interleaved by name, depth-first."""
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.txt").write_bytes(b"z")
    (tmp_path / "a.txt").write_bytes(b"a")
    (tmp_path / "c.txt").write_bytes(b"c")
    (tmp_path / "b" / "a").mkdir()
    (tmp_path / "b" / "a" / "x").write_bytes(b"x")

    names = _rel(tmp_path, iter_tree(tmp_path))

    assert names == [".", "a.txt", "b", "b/a", "b/a/x", "b/z.txt", "c.txt"]


def test_walk_is_repeatable(tmp_path):
    for name in ("q", "m", "a", "Z"):
        (tmp_path / name).write_bytes(name.encode())

    first = _rel(tmp_path, iter_tree(tmp_path))
    second = _rel(tmp_path, iter_tree(tmp_path))

    assert first == second
    assert first[1:] == sorted(["q", "m", "a", "Z"])


def test_symlinks_are_reported_not_followed(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "inner.txt").write_bytes(b"inner")
    root = tmp_path / "root"
    root.mkdir()
    try:
        os.symlink(target, root / "link", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")

    entries = list(iter_tree(root))
    names = _rel(root, entries)

    assert names == [".", "link"]
    assert stat.S_ISLNK(entries[1][1].st_mode)


def test_missing_root_raises_walk_error(tmp_path):
    with pytest.raises(WalkError) as ei:
        list(iter_tree(tmp_path / "nope"))
    assert ei.value.stage == "walk"
    assert isinstance(ei.value.__cause__, FileNotFoundError)


def test_listing_failure_stops_the_sequence(tmp_path, monkeypatch):
    """A failing subdirectory ends the walk; nothing after it is yielded."""
    (tmp_path / "a.txt").write_bytes(b"a")
    (tmp_path / "locked").mkdir()
    (tmp_path / "z.txt").write_bytes(b"z")

    real_scandir = os.scandir

    def fake_scandir(path):
        if os.fspath(path).endswith("locked"):
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(walk_mod.os, "scandir", fake_scandir)

    seen = []
    with pytest.raises(WalkError) as ei:
        for path, _ in iter_tree(tmp_path):
            seen.append(path.name)

    assert ei.value.path.endswith("locked")
    assert "z.txt" not in seen
    assert "a.txt" in seen
