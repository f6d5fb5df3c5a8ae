from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from engine.api import (
    MODEL_DIRECTORY,
    ORMBFILE_NAME,
    SavedModel,
    list_members,
    new_default_saver,
)

from ..exceptions import ModelPathOutsideRootError

MODEL_ROOT_ENV = "MODELPACK_MODEL_ROOT"


def get_model_root() -> Path:
    # In Docker we typically set MODELPACK_MODEL_ROOT=/models; in dev default to cwd
    return Path(os.getenv(MODEL_ROOT_ENV, os.getcwd())).resolve()


def _inside(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def resolve_model_path(raw: str) -> Path:
    """Resolve a client-supplied path under the model root.

    The directory itself, its metadata file and its content directory must all
    resolve inside the root; symlinks pointing out of it are rejected.
    """

    root = get_model_root()
    p = Path(raw)
    candidate = (p if p.is_absolute() else root / p).resolve()
    for target in (candidate, candidate / ORMBFILE_NAME, candidate / MODEL_DIRECTORY):
        if not _inside(target.resolve(), root):
            raise ModelPathOutsideRootError(raw, str(root))
    return candidate


def save_model_service(raw_path: str) -> SavedModel:
    """Package the model directory at ``raw_path`` into memory."""

    return new_default_saver().save(resolve_model_path(raw_path))


def _metadata_dict(metadata: Any) -> Dict[str, Any]:
    dump = getattr(metadata, "model_dump", None)
    if dump is not None:
        return dump(mode="json", exclude_none=True)
    return dict(metadata or {})


def inspect_model_service(raw_path: str) -> Dict[str, Any]:
    """Save in memory and summarize: metadata, archive size/digest, entries."""

    model = save_model_service(raw_path)
    return {
        "path": model.path,
        "metadata": _metadata_dict(model.metadata),
        "size": model.size,
        "digest": model.digest,
        "files": list_members(model.content),
    }
