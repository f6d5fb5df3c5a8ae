from __future__ import annotations

"""Readers for archives produced by :mod:`engine.io.archive.tar_builder`."""

import io
import logging
import tarfile
from pathlib import Path, PurePosixPath
from typing import Dict, List, Union

from engine.core.errors import ExportError

logger = logging.getLogger(__name__)


def _open(content: bytes) -> tarfile.TarFile:
    return tarfile.open(fileobj=io.BytesIO(content), mode="r:gz")


def list_members(content: bytes) -> List[str]:
    """Names of all entries, in archive order."""

    with _open(content) as tar:
        return tar.getnames()


def read_archive_members(content: bytes) -> Dict[str, bytes]:
    """Map each regular-file entry name to its bytes."""

    out: Dict[str, bytes] = {}
    with _open(content) as tar:
        for member in tar:
            if not member.isreg():
                continue
            f = tar.extractfile(member)
            if f is None:
                continue
            with f:
                out[member.name] = f.read()
    return out


def _check_member(member: tarfile.TarInfo) -> None:
    p = PurePosixPath(member.name)
    if p.is_absolute() or ".." in p.parts:
        raise ExportError(f"archive entry escapes destination: {member.name!r}")
    if not (member.isreg() or member.isdir()):
        raise ExportError(f"unsupported archive entry type: {member.name!r}")


def check_archive(content: bytes) -> List[str]:
    """Read every header of ``content`` and return the entry names.

    Raises :class:`ExportError` for a corrupt stream or an entry that
    :func:`extract_archive` would refuse. Nothing is written.
    """

    try:
        with _open(content) as tar:
            members = tar.getmembers()
    except (tarfile.TarError, OSError, EOFError) as e:
        raise ExportError(f"cannot extract archive: {e}") from e
    for member in members:
        _check_member(member)
    return [m.name for m in members]


def extract_archive(content: bytes, dest: Union[str, Path]) -> List[str]:
    """Extract ``content`` under ``dest`` and return the extracted names.

    Only regular files and directories with relative, non-escaping names are
    accepted; tarfile's ``data`` filter is applied on top.
    """

    dest = Path(dest)
    try:
        with _open(content) as tar:
            members = tar.getmembers()
            for member in members:
                _check_member(member)
            tar.extractall(dest, members=members, filter="data")
    except ExportError as e:
        e.path = str(dest)
        raise
    except (tarfile.TarError, OSError, EOFError) as e:
        raise ExportError(f"cannot extract archive: {e}", path=dest) from e

    names = [m.name for m in members]
    logger.debug("extracted %d entr(ies) into %s", len(names), dest)
    return names
