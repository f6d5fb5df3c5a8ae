from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Tuple, Union

from engine.core.consts import ORMBFILE_NAME
from engine.core.errors import MetadataParseError, MetadataReadError

from .parser import MetadataParser

logger = logging.getLogger(__name__)


def load_metadata(model_dir: Union[str, Path], parser: MetadataParser) -> Tuple[bytes, Any]:
    """Read ``<model_dir>/ormbfile.yaml`` and parse it.

    Returns
    -------
    raw : the file's bytes, unchanged
    metadata : whatever ``parser.parse(raw)`` produced
    """

    path = Path(model_dir) / ORMBFILE_NAME
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise MetadataReadError(f"cannot read metadata: {e.strerror or e}", path=path) from e

    try:
        metadata = parser.parse(raw)
    except MetadataParseError as e:
        if e.path is None:
            e.path = str(path)
        raise
    except Exception as e:
        # injected parsers may raise their own error types
        raise MetadataParseError(f"parser rejected metadata: {e}", path=path) from e

    logger.debug("loaded metadata from %s (%d bytes)", path, len(raw))
    return raw, metadata
