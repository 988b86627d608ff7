"""
FastAPI application factory — entry point for the upload API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from backend.api.router import api_router
from backend.config import Settings, settings as default_settings
from backend.db.store import JSONStore
from backend.logging_config import setup_logging
from backend.middleware.error_handler import (
    ErrorHandlerMiddleware,
    RequestIdMiddleware,
    register_exception_handlers,
)
from backend.utils.storage import LocalStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown hooks."""
    app.state.settings.ensure_dirs()
    logger.info(
        "Upload API ready: %d records in %s, files under %s",
        len(app.state.store.list_all()),
        app.state.store.path,
        app.state.storage.base,
    )
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    settings.ensure_dirs()

    app = FastAPI(
        title="Upload API",
        description="File upload API backed by a JSON record store.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = JSONStore(settings.db_path)
    app.state.storage = LocalStorage(settings.UPLOADS_DIR)

    # ── Middleware (last added is outermost) ─────────────
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # ── Routes ───────────────────────────────────────────
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "API running. Try GET /api/health or POST /api/upload"

    app.include_router(api_router)

    # ── Static file serving for uploaded files ───────────
    app.mount("/uploads", StaticFiles(directory=str(settings.UPLOADS_DIR)), name="uploads")

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "backend.main:create_app",
        factory=True,
        host=default_settings.BACKEND_HOST,
        port=default_settings.BACKEND_PORT,
        reload=True,
    )
