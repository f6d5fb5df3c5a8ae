from __future__ import annotations

"""Streaming tar+gzip encoder for a directory tree.

Pipeline::

    sink(s) <- gzip.GzipFile <- tarfile (stream mode "w|")

Both encoders are scoped with ``with`` blocks, so the tar stream is finalized
before the gzip trailer is flushed, on success and on every error path.

Archive names are ``<source name>/<path relative to the source>``, so
``/data/foo/model/a/b.bin`` is stored as ``model/a/b.bin``. The source name is
the last component of the path as given (``model`` stays ``model`` even when
it is a symlink); only ``.``/``..`` fall back to the real directory name. Only
regular files get an entry.
"""

import gzip
import io
import logging
import os
import stat
import tarfile
from pathlib import Path, PurePath
from typing import BinaryIO, Optional, Tuple, Union

from engine.contracts.archive_config import ArchiveConfig
from engine.core.errors import (
    ArchiveWriteError,
    FileReadError,
    HeaderError,
    ModelPackError,
    SourceNotFoundError,
)

from .walk import iter_tree

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def archive_name(path: PurePath, root: PurePath, name: Optional[str] = None) -> str:
    """Return ``<name>/<path relative to root>`` with ``/`` separators.

    ``name`` defaults to the base name of ``root``.
    """

    rel = PurePath(path).relative_to(root)
    return PurePath(name or PurePath(root).name, rel).as_posix()


class _Sinks:
    """Fan out writes to one or more binary sinks.

    The first rejected write raises :class:`ArchiveWriteError`; afterwards the
    pipeline is being torn down and further writes are dropped so the first
    error is the one that propagates.
    """

    def __init__(self, sinks: Tuple[BinaryIO, ...]):
        self._sinks = sinks
        self._failed = False

    def write(self, data) -> int:
        if self._failed:
            return len(data)
        for sink in self._sinks:
            try:
                sink.write(data)
            except (OSError, ValueError) as e:
                self._failed = True
                raise ArchiveWriteError(f"sink rejected {len(data)} bytes: {e}") from e
        return len(data)

    def flush(self) -> None:
        if self._failed:
            return
        for sink in self._sinks:
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()


class _ExactReader:
    """File wrapper for ``TarFile.addfile`` that reports read failures.

    ``addfile`` copies exactly ``tarinfo.size`` bytes; a short read means the
    file shrank after its header was derived.
    """

    def __init__(self, fileobj: BinaryIO, path: Path):
        self._f = fileobj
        self._path = path

    def read(self, n: int = -1) -> bytes:
        try:
            data = self._f.read(n)
        except OSError as e:
            raise FileReadError(f"read failed: {e.strerror or e}", path=self._path) from e
        if n is not None and n >= 0 and len(data) < n:
            raise FileReadError("file shrank while being archived", path=self._path)
        return data


def _canonical_source(src: PathLike) -> Tuple[Path, str]:
    """Return the real directory to walk and the name to store it under."""

    try:
        given = Path(src).absolute()
        if given.name in ("", ".", ".."):
            root = given.resolve(strict=True)
            name = root.name
        else:
            name = given.name
            root = (given.parent.resolve(strict=True) / name).resolve(strict=True)
        os.stat(root)
    except (OSError, RuntimeError) as e:
        raise SourceNotFoundError(f"unable to tar files - {e}", path=src) from e
    return root, name


def _header_for(tar: tarfile.TarFile, f: BinaryIO, path: Path, arcname: str) -> tarfile.TarInfo:
    try:
        info = tar.gettarinfo(arcname=arcname, fileobj=f)
    except (OSError, ValueError) as e:
        raise HeaderError(f"cannot build header: {e}", path=path) from e
    if info is None or not info.isreg():
        raise HeaderError("not a regular file anymore", path=path)
    # whole seconds, as in a plain ustar header
    info.mtime = int(info.mtime)
    try:
        info.tobuf(tar.format, tar.encoding, tar.errors)
    except (ValueError, UnicodeError) as e:
        raise HeaderError(f"cannot encode header: {e}", path=path) from e
    return info


def _add_file(tar: tarfile.TarFile, path: Path, arcname: str) -> int:
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileReadError(f"cannot open: {e.strerror or e}", path=path) from e

    # one open handle at a time: closed before the walk moves on
    with f:
        info = _header_for(tar, f, path, arcname)
        try:
            tar.addfile(info, _ExactReader(f, path))
        except ModelPackError:
            raise
        except (OSError, ValueError) as e:
            raise ArchiveWriteError(f"cannot write entry {arcname}: {e}", path=path) from e
    return info.size


def write_archive(
    src: PathLike,
    *sinks: BinaryIO,
    config: Optional[ArchiveConfig] = None,
) -> int:
    """Stream a tar.gz of every regular file under ``src`` into ``sinks``.

    Returns the number of files archived.

    Raises
    ------
    SourceNotFoundError : ``src`` cannot be stat'ed (nothing is written)
    WalkError, HeaderError, FileReadError, ArchiveWriteError : the archive is
        aborted; whatever reached the sinks is not a usable artifact
    """

    if not sinks:
        raise ValueError("write_archive requires at least one sink")

    cfg = config or ArchiveConfig()
    root, name = _canonical_source(src)

    out = _Sinks(sinks)
    n_files = 0
    n_bytes = 0

    with gzip.GzipFile(
        filename="",
        mode="wb",
        fileobj=out,
        compresslevel=cfg.compresslevel,
        mtime=cfg.gzip_mtime,
    ) as gz:
        with tarfile.open(
            fileobj=gz,
            mode="w|",
            format=cfg.tar_format,
            copybufsize=cfg.chunk_size,
            # hard links are stored as independent regular files
            dereference=True,
        ) as tar:
            for path, st in iter_tree(root):
                if not stat.S_ISREG(st.st_mode):
                    logger.debug("skipping non-regular entry %s", path)
                    continue
                arcname = archive_name(path, root, name)
                n_bytes += _add_file(tar, path, arcname)
                n_files += 1
                logger.debug("archived %s (%d bytes)", arcname, st.st_size)

    logger.info("archived %d file(s), %d byte(s) from %s", n_files, n_bytes, root)
    return n_files


def build_archive(src: PathLike, config: Optional[ArchiveConfig] = None) -> bytes:
    """Return the tar.gz of ``src`` as bytes; nothing is returned on failure."""

    buf = io.BytesIO()
    write_archive(src, buf, config=config)
    return buf.getvalue()
