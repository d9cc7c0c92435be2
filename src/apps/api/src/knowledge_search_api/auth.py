"""Shared-secret authentication middleware."""
import hmac
import re

import structlog
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from knowledge_search_core.util.errors import AuthError

logger = structlog.get_logger()

AUTH_SCHEME = re.compile(r"^(?:apikey|bearer)\s+(.+)$", re.IGNORECASE)

PUBLIC_PATHS = {"/", "/health"}
PUBLIC_METHODS = {"GET"}


def extract_token(headers) -> str | None:
    """Find the caller's token in x-api-key, api-key or Authorization."""
    token = headers.get("x-api-key") or headers.get("api-key")
    if token:
        return token
    m = AUTH_SCHEME.match(headers.get("authorization") or "")
    return m.group(1) if m else None


def token_matches(candidate: str | None, secret: str) -> bool:
    """Compare trimmed candidate and secret for exact equality."""
    if not candidate:
        return False
    return hmac.compare_digest(
        candidate.strip().encode("utf-8"), secret.strip().encode("utf-8")
    )


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests without the shared secret. A no-op when no secret is set."""

    def __init__(self, app, api_key: str | None = None):
        super().__init__(app)
        self.api_key = api_key

    async def dispatch(self, request: Request, call_next):
        if not self.api_key:
            return await call_next(request)
        if request.method in PUBLIC_METHODS and request.url.path in PUBLIC_PATHS:
            return await call_next(request)
        if not token_matches(extract_token(request.headers), self.api_key):
            logger.warning(
                "unauthorized_request", method=request.method, path=request.url.path
            )
            err = AuthError()
            return JSONResponse(status_code=err.status_code, content={"error": err.message})
        return await call_next(request)
