from __future__ import annotations

import re
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from engine.api import ARCHIVE_MEDIA_TYPE

from ..models.v1.models import InspectModelResponse, ModelPathRequest, SaveModelRequest
from ..services.model_persistence_service import inspect_model_service, save_model_service

router = APIRouter()

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def _attachment_filename(name: str) -> str:
    # header-safe: quotes, separators and CR/LF never reach Content-Disposition
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", name).strip(".")
    return cleaned or "model.tar.gz"


@router.post("/save", response_class=StreamingResponse, summary="Package a model directory")
def save_model(req: SaveModelRequest):
    """
    Returns the gzip-compressed tar of <path>/model (Content-Disposition: attachment).
    Metadata is not part of the payload; use /inspect to read it.
    """
    model = save_model_service(req.path)

    filename = _attachment_filename(req.filename or f"{Path(model.path).name or 'model'}.tar.gz")
    headers = {
        "Content-Disposition": f'attachment; filename="{filename}"',
        "X-Modelpack-Digest": model.digest,
        "X-Modelpack-Size": str(model.size),
    }

    return StreamingResponse(
        content=iter([model.content]),
        media_type=ARCHIVE_MEDIA_TYPE,
        headers=headers,
    )


@router.post("/inspect", response_model=InspectModelResponse, summary="Summarize a model directory")
def inspect_model(req: ModelPathRequest):
    return inspect_model_service(req.path)
