"""Write a :class:`SavedModel` back to disk.

The destination ends up laid out like the directory it was saved from::

    <dest>/ormbfile.yaml
    <dest>/model/...
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

from engine.contracts.saved_model import SavedModel
from engine.core.consts import ORMBFILE_NAME
from engine.core.errors import ExportError
from engine.io.archive.extract import check_archive, extract_archive

logger = logging.getLogger(__name__)


class Exporter(Protocol):
    def export(self, model: SavedModel, dest: Union[str, Path]) -> Path: ...


def _discard(dest: Path, created: bool) -> None:
    """Remove what a failed export left behind; ``dest`` was empty or absent."""

    if created:
        shutil.rmtree(dest, ignore_errors=True)
        return
    for child in dest.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child, ignore_errors=True)
        else:
            child.unlink()


@dataclass
class DefaultExporter:
    def export(self, model: SavedModel, dest: Union[str, Path]) -> Path:
        """Recreate ``<dest>/ormbfile.yaml`` and ``<dest>/model/...``.

        The archive is checked before anything is written; if a later step
        fails, ``dest`` is left as it was found (absent or empty).
        """

        dest = Path(dest)
        if dest.exists() and (not dest.is_dir() or any(dest.iterdir())):
            raise ExportError("destination exists and is not an empty directory", path=dest)

        try:
            check_archive(model.content)
        except ExportError as e:
            e.path = str(dest)
            raise

        created = not dest.exists()
        try:
            try:
                dest.mkdir(parents=True, exist_ok=True)
                (dest / ORMBFILE_NAME).write_bytes(model.config)
            except OSError as e:
                raise ExportError(f"cannot write metadata: {e.strerror or e}", path=dest) from e
            names = extract_archive(model.content, dest)
        except ExportError:
            _discard(dest, created)
            raise

        logger.info("exported %s to %s (%d entries)", model.path, dest, len(names))
        return dest


def new_default_exporter() -> DefaultExporter:
    return DefaultExporter()
