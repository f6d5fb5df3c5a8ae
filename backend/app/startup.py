"""FastAPI startup registration.

Keep import-time side effects out of routers/modules. Any filesystem checks or
other initialization should be registered here.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .services.model_persistence_service import get_model_root

logger = logging.getLogger(__name__)


def register_startup(app: FastAPI) -> None:
    """Register startup hooks on the provided FastAPI app."""

    @app.on_event("startup")
    async def _report_model_root() -> None:
        root = get_model_root()
        if not root.is_dir():
            logger.warning("model root %s does not exist; every request will 404", root)
        else:
            logger.info("serving model directories under %s", root)
