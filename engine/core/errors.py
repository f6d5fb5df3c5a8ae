from __future__ import annotations

"""Exception types raised by the Engine.

Every failure while saving or exporting a model is terminal: nothing is retried
and no partial artifact is handed back. Each error records the ``stage`` that
failed and the ``path`` involved; the underlying exception is chained as
``__cause__``.

Boundary layers (backend services, scripts) decide how to present these.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ModelPackError(Exception):
    """Base class for all model packaging failures."""

    stage = "unknown"

    def __init__(self, message: str, *, path: Optional[PathLike] = None):
        self.path = str(path) if path is not None else None
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is None:
            return f"[{self.stage}] {self.message}"
        return f"[{self.stage}] {self.path}: {self.message}"


class MetadataReadError(ModelPackError):
    """The metadata file is missing or unreadable."""

    stage = "metadata-read"


class MetadataParseError(ModelPackError):
    """The parser rejected the metadata bytes."""

    stage = "metadata-parse"


class SourceNotFoundError(ModelPackError):
    """The directory to archive could not be stat'ed."""

    stage = "source"


class WalkError(ModelPackError):
    """Traversal failed (permission denied on a subdirectory, I/O error, ...)."""

    stage = "walk"


class HeaderError(ModelPackError):
    """A tar header could not be derived from the file's stat info."""

    stage = "header"


class FileReadError(ModelPackError):
    """A discovered file could not be opened or fully read."""

    stage = "read"


class ArchiveWriteError(ModelPackError):
    """The destination sink rejected bytes."""

    stage = "write"


class ExportError(ModelPackError):
    """A saved model could not be written back to disk."""

    stage = "export"
