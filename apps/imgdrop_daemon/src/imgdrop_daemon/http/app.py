from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse

from imgdrop_daemon import __version__
from imgdrop_daemon.adapters import LocalBlobStore
from imgdrop_daemon.config import Settings
from imgdrop_daemon.http.api import build_api_router
from imgdrop_daemon.http.context import AppContext
from imgdrop_daemon.http.errors import register_error_handlers
from imgdrop_daemon.http.worker import RetentionSweeper

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    cfg = settings or Settings()
    cfg.ensure_dirs()

    blob_store = LocalBlobStore(cfg.upload_path)
    ctx = AppContext(
        settings=cfg,
        blob_store=blob_store,
        ingest_options=cfg.ingest_options(),
        sweeper=RetentionSweeper(
            blob_store,
            ttl=cfg.retention_ttl,
            interval=cfg.sweep_interval_seconds,
        ),
    )

    app = FastAPI(title="imgdrop", version=__version__)
    app.state.ctx = ctx
    register_error_handlers(app)
    app.include_router(build_api_router())

    @app.on_event("startup")
    def on_startup() -> None:
        if app.state.ctx.settings.sweeper_enabled:
            app.state.ctx.sweeper.start()
        logger.info("Serving uploads from %s", app.state.ctx.settings.upload_path)

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        app.state.ctx.sweeper.stop()

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    static_dir = cfg.static_path

    @app.get("/{path:path}", response_model=None)
    def static_handler(path: str):
        if path == "upload" or path == "healthz":
            return JSONResponse(status_code=404, content={"error": "Not Found"})

        candidate = (static_dir / path).resolve()
        if path and candidate.is_relative_to(static_dir) and candidate.is_file():
            return FileResponse(candidate)

        index_file = static_dir / "index.html"
        if not index_file.is_file():
            return JSONResponse(status_code=404, content={"error": "Not Found"})
        return FileResponse(index_file)

    return app
