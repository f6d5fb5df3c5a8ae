"""Save a model directory into memory.

``DefaultSaver`` takes its parser as a constructor argument so callers (and
tests) can swap in their own; :func:`new_default_saver` wires the YAML parser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol, Union

from engine.contracts.archive_config import ArchiveConfig
from engine.contracts.saved_model import SavedModel
from engine.core.consts import MODEL_DIRECTORY
from engine.io.archive.tar_builder import build_archive
from engine.io.metadata.loader import load_metadata
from engine.io.metadata.parser import MetadataParser, YamlMetadataParser

logger = logging.getLogger(__name__)


class Saver(Protocol):
    def save(self, path: Union[str, Path]) -> SavedModel: ...


@dataclass
class DefaultSaver:
    parser: MetadataParser
    config: ArchiveConfig = field(default_factory=ArchiveConfig)

    def save(self, path: Union[str, Path]) -> SavedModel:
        logger.info("saving model from %s", path)

        config, metadata = load_metadata(path, self.parser)
        content = build_archive(Path(path) / MODEL_DIRECTORY, config=self.config)

        model = SavedModel(
            metadata=metadata,
            path=str(path),
            config=config,
            content=content,
        )
        logger.info("saved model from %s: %d bytes, %s", path, model.size, model.digest)
        return model


def new_default_saver(config: Optional[ArchiveConfig] = None) -> DefaultSaver:
    return DefaultSaver(parser=YamlMetadataParser(), config=config or ArchiveConfig.from_env())
