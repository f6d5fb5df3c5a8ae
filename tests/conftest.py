"""Shared fixtures: throwaway model directories under tmp_path."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import pytest

from engine.core.consts import MODEL_DIRECTORY, ORMBFILE_NAME


@pytest.fixture
def make_model_dir(tmp_path):
    """Factory building ``<tmp>/<name>/{ormbfile.yaml, model/...}``.

    ``files`` maps paths relative to ``model/`` to their bytes. Pass
    ``metadata=None`` to leave the metadata file out.
    """

    def _make(
        name: str = "modeldir",
        metadata: Optional[bytes] = b"name: foo\n",
        files: Optional[Dict[str, bytes]] = None,
    ) -> Path:
        root = tmp_path / name
        content = root / MODEL_DIRECTORY
        content.mkdir(parents=True)
        if metadata is not None:
            (root / ORMBFILE_NAME).write_bytes(metadata)
        for rel, data in (files or {}).items():
            p = content / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(data)
        return root

    return _make


@pytest.fixture
def weights_100() -> bytes:
    return bytes(range(100))
