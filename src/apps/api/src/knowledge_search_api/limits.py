"""Request body size limit."""
import structlog
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from knowledge_search_core.util.errors import PayloadTooLargeError

logger = structlog.get_logger()


def _too_large(request: Request, size: int):
    logger.warning(
        "request_too_large", method=request.method, path=request.url.path, size=size
    )
    err = PayloadTooLargeError()
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Answer 413 when the body is larger than ``max_bytes``, before it is parsed."""

    def __init__(self, app, max_bytes: int = 1024 * 1024):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next):
        declared = request.headers.get("content-length")
        if declared is not None and declared.isdigit():
            if int(declared) > self.max_bytes:
                return _too_large(request, int(declared))
            return await call_next(request)

        # No usable length header (chunked upload); the body stays cached for the route
        body = await request.body()
        if len(body) > self.max_bytes:
            return _too_large(request, len(body))
        return await call_next(request)
