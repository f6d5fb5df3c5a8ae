"""Backend-only exception types and their HTTP mapping.

Service code stays HTTP-agnostic: it raises these (or lets Engine errors
through) and the handlers registered by :func:`register_exception_handlers`
turn them into JSON error responses.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from engine.api import (
    MetadataParseError,
    MetadataReadError,
    ModelPackError,
    SourceNotFoundError,
)

logger = logging.getLogger(__name__)


class ModelPathOutsideRootError(Exception):
    """Raised when a requested model path resolves outside the served root."""

    def __init__(self, path: str, root: str):
        self.path = path
        self.root = root
        super().__init__(f"{path!r} is outside the model root {root!r}")


def status_for(exc: ModelPackError) -> int:
    if isinstance(exc, (MetadataReadError, SourceNotFoundError)):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, MetadataParseError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ModelPackError)
    async def _model_pack_error(request: Request, exc: ModelPackError) -> JSONResponse:
        code = status_for(exc)
        if code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=code,
            content={"detail": str(exc), "stage": exc.stage, "path": exc.path},
        )

    @app.exception_handler(ModelPathOutsideRootError)
    async def _outside_root(request: Request, exc: ModelPathOutsideRootError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "path": exc.path},
        )
