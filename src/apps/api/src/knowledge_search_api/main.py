"""FastAPI application entrypoint."""
import sys

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from knowledge_search_api.auth import ApiKeyMiddleware
from knowledge_search_api.limits import BodySizeLimitMiddleware
from knowledge_search_api.logging import configure_logging
from knowledge_search_api.routers import health, search
from knowledge_search_api.settings import Settings, get_settings, load_settings
from knowledge_search_core.embed import get_embedder
from knowledge_search_core.search.pinecone import get_index
from knowledge_search_core.util.errors import AdapterError, StartupConfigError

logger = structlog.get_logger()


async def adapter_error_handler(request: Request, exc: AdapterError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        message = "invalid JSON body"
    else:
        message = search.QUERY_REQUIRED
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    settings: Settings | None = None,
    embedder=None,
    index=None,
) -> FastAPI:
    """Build the application with its upstream clients.

    ``embedder`` and ``index`` default to the OpenAI and Pinecone clients
    described by ``settings``; pass substitutes to run without network access.
    """
    if settings is None:
        settings = get_settings()
    if embedder is None:
        embedder = get_embedder(settings.openai_api_key, settings.embed_model)
    if index is None:
        index = get_index(
            settings.pinecone_api_key, settings.index_name, settings.index_host
        )

    app = FastAPI(title="Knowledge Search Adapter", version="1.0.0")
    app.state.settings = settings
    app.state.embedder = embedder
    app.state.index = index

    # Last added runs first: the key check precedes the size check
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(ApiKeyMiddleware, api_key=settings.knowledge_api_key)
    app.add_exception_handler(AdapterError, adapter_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router)
    app.include_router(search.router)
    return app


def main():
    """Load configuration, then serve. Exits non-zero on missing configuration."""
    try:
        settings = load_settings()
    except StartupConfigError as e:
        configure_logging()
        logger.error("missing_env", missing=e.missing)
        sys.exit(1)

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info(
        "starting_server",
        host=settings.host,
        port=settings.port,
        index=settings.index_name,
        namespace=settings.namespace,
        auth_enabled=settings.knowledge_api_key is not None,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
