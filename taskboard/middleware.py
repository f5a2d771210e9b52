import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag every API request with an id and log its start and completion."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = uuid.uuid4().hex

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        log = structlog.get_logger()
        is_api = request.url.path.startswith("/api")
        if is_api:
            log.info("request_started")

        response = await call_next(request)

        if is_api:
            log.info("request_completed", status_code=response.status_code)
        response.headers["X-Request-ID"] = request_id
        return response
