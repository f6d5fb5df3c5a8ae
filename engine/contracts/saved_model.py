from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import hashlib


@dataclass(frozen=True)
class SavedModel:
    """A model directory packaged in memory.

    Attributes
    ----------
    metadata : parsed metadata document (opaque to the archiving core)
    path : the model directory as passed to ``save``
    config : raw bytes of ``ormbfile.yaml``
    content : gzip-compressed tar of the ``model/`` directory
    """

    metadata: Any
    path: str
    config: bytes
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def digest(self) -> str:
        return "sha256:" + hashlib.sha256(self.content).hexdigest()
