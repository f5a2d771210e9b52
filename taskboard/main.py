from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from taskboard import config
from taskboard.errors import ConflictError, NotFoundError, StorageError, StoreError, ValidationError
from taskboard.frontend import mount_frontend
from taskboard.middleware import RequestLoggingMiddleware
from taskboard.routers import health, projects, tasks
from taskboard.store import Store

log = structlog.get_logger()

_STATUS_BY_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StorageError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # open the configured store only when none was handed to create_app
    owned = app.state.store is None
    if owned:
        app.state.store = Store(config.DATABASE_PATH)
    yield
    if owned:
        app.state.store.close()
        app.state.store = None


def create_app(store: Optional[Store] = None, static_dir: Optional[str] = None) -> FastAPI:
    """Build the API app. Serve it with `uvicorn --factory taskboard.main:create_app`
    or `python -m taskboard`; nothing is built at import time.
    """
    app = FastAPI(title="Taskboard", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router)
    app.include_router(projects.router)
    app.include_router(tasks.router)

    @app.api_route("/api/{rest:path}", methods=["GET", "POST", "PUT", "DELETE"], include_in_schema=False)
    def unknown_endpoint(rest: str):
        return JSONResponse(status_code=404, content={"detail": "endpoint not found"})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        status_code = _STATUS_BY_ERROR.get(type(exc), 500)
        log.error("request_failed", path=request.url.path, status_code=status_code, error=exc.message)
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    # Generic error handler to return JSON errors for unexpected exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        log.exception("unhandled_error", path=request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    mount_frontend(app, config.STATIC_DIR if static_dir is None else static_dir)
    return app

