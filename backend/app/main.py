from fastapi import FastAPI, Request
import time, os
from fastapi.middleware.cors import CORSMiddleware

import logging

from .exceptions import register_exception_handlers
from .startup import register_startup

logger = logging.getLogger("backend.app")


class _SkipHealthAccessLogs(logging.Filter):
    """Hide uvicorn access logs for health polls to prevent console spam."""
    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        return "/api/v1/ping" not in msg and "/healthz" not in msg

# Attach the filter once
_access_logger = logging.getLogger("uvicorn.access")
# Avoid duplicate filters on reload
if not any(isinstance(f, _SkipHealthAccessLogs) for f in getattr(_access_logger, "filters", [])):
    _access_logger.addFilter(_SkipHealthAccessLogs())

# Routers
from .routers.health import router as health_router
from .routers.models import router as models_router

app = FastAPI(
    title="modelpack Local API",
    version="0.1.0",
    description="Local API packaging ORMB model directories into tar.gz artifacts",
)

extra = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
if extra:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=extra,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Robust request logging (won't crash on exceptions)
@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.time()
    try:
        return await call_next(request)
    except Exception as e:
        dt = (time.time() - t0) * 1000
        logger.error(
            "%s %s -> ERR in %.1fms: %s: %s",
            request.method, request.url.path, dt, type(e).__name__, e,
        )
        raise

register_exception_handlers(app)
register_startup(app)

# Routers
app.include_router(health_router, prefix="/api/v1",        tags=["health"])
app.include_router(models_router, prefix="/api/v1/models", tags=["models"])

@app.get("/healthz")
def healthz():
    return {"ok": True}
