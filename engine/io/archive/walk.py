from __future__ import annotations

"""Deterministic recursive traversal.

:func:`iter_tree` yields the root first, then every descendant in lexical order
per directory, with files and subdirectories interleaved by name. Symlinks are
reported via ``lstat`` and never followed. The generator is lazy and cannot be
restarted; the first failure is raised as :class:`WalkError` and ends it.
"""

import os
import stat
from pathlib import Path
from typing import Iterator, Tuple

from engine.core.errors import WalkError

WalkEntry = Tuple[Path, os.stat_result]


def iter_tree(root: Path) -> Iterator[WalkEntry]:
    try:
        st = os.lstat(root)
    except OSError as e:
        raise WalkError(f"cannot stat entry: {e.strerror or e}", path=root) from e
    yield from _walk(Path(root), st)


def _walk(path: Path, st: os.stat_result) -> Iterator[WalkEntry]:
    yield path, st
    if not stat.S_ISDIR(st.st_mode):
        return

    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise WalkError(f"cannot list directory: {e.strerror or e}", path=path) from e

    for entry in entries:
        child = path / entry.name
        try:
            child_st = entry.stat(follow_symlinks=False)
        except OSError as e:
            raise WalkError(f"cannot stat entry: {e.strerror or e}", path=child) from e
        yield from _walk(child, child_st)
