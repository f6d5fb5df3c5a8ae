"""Public Engine API.

This module is the **stable public surface** for packaging model directories.

Prefer importing from here instead of reaching into internal subpackages:

    from engine.api import new_default_saver

    model = new_default_saver().save("path/to/model-dir")

The backend and scripts may depend on this module.
"""

from __future__ import annotations

from engine.contracts.archive_config import ArchiveConfig
from engine.contracts.saved_model import SavedModel
from engine.core.consts import ARCHIVE_MEDIA_TYPE, MODEL_DIRECTORY, ORMBFILE_NAME
from engine.core.errors import (
    ArchiveWriteError,
    ExportError,
    FileReadError,
    HeaderError,
    MetadataParseError,
    MetadataReadError,
    ModelPackError,
    SourceNotFoundError,
    WalkError,
)
from engine.io.archive import build_archive, list_members, read_archive_members, write_archive
from engine.io.metadata import MetadataParser, YamlMetadataParser
from engine.use_cases import (
    DefaultExporter,
    DefaultSaver,
    Exporter,
    Saver,
    new_default_exporter,
    new_default_saver,
)

__all__ = [
    "Saver",
    "DefaultSaver",
    "new_default_saver",
    "Exporter",
    "DefaultExporter",
    "new_default_exporter",
    "MetadataParser",
    "YamlMetadataParser",
    "build_archive",
    "write_archive",
    "list_members",
    "read_archive_members",
    "ORMBFILE_NAME",
    "MODEL_DIRECTORY",
    "ARCHIVE_MEDIA_TYPE",
    "ArchiveConfig",
    "SavedModel",
    "ModelPackError",
    "MetadataReadError",
    "MetadataParseError",
    "SourceNotFoundError",
    "WalkError",
    "HeaderError",
    "FileReadError",
    "ArchiveWriteError",
    "ExportError",
]
