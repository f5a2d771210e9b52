from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

log = structlog.get_logger()


def mount_frontend(app: FastAPI, static_dir: str) -> None:
    """Serve the built single-page frontend next to the API.

    Must run after the API routers are included: the index fallback matches
    every remaining GET path, so unknown /api paths need their own route first.
    """
    if not static_dir:
        log.warning("static_dir_not_configured", mode="api-only")
        return

    root = Path(static_dir)
    if not root.is_dir():
        log.warning("static_dir_missing", path=str(root))
        return

    assets = root / "assets"
    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets)), name="assets")

    favicon = root / "favicon.ico"
    if favicon.is_file():
        @app.get("/favicon.ico", include_in_schema=False)
        def favicon_ico():
            return FileResponse(str(favicon))

    index = root / "index.html"
    if not index.is_file():
        log.warning("index_html_missing", path=str(index))
        return

    @app.get("/{full_path:path}", include_in_schema=False)
    def spa_fallback(full_path: str):
        return FileResponse(str(index))

    log.info("frontend_mounted", path=str(root))
