"""Search endpoint."""
from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, ConfigDict

from knowledge_search_api.dependencies import (
    get_app_settings,
    get_embedder,
    get_vector_index,
)
from knowledge_search_api.settings import Settings
from knowledge_search_core.search.pinecone import map_matches, query_index
from knowledge_search_core.util.errors import ClientInputError, UpstreamError

logger = structlog.get_logger()

router = APIRouter(tags=["search"])

QUERY_REQUIRED = "query (string) is required"


class SearchRequest(BaseModel):
    """Search request.

    Fields are typed loosely so the handler can answer with its own 400
    instead of a schema error.
    """

    model_config = ConfigDict(extra="ignore")

    query: Any = None
    filter: Any = None
    metadata: Any = None


def precomputed_vector(metadata: Any) -> list | None:
    """Return ``metadata.vector`` when the caller sent one as a list."""
    if isinstance(metadata, dict) and isinstance(metadata.get("vector"), list):
        return metadata["vector"]
    return None


@router.post("/")
def search(
    body: SearchRequest | None = Body(default=None),
    settings: Settings = Depends(get_app_settings),
    embedder=Depends(get_embedder),
    index=Depends(get_vector_index),
):
    """Embed the query, search the index and return orchestration results."""
    query = body.query if body is not None else None
    if not query or not isinstance(query, str):
        raise ClientInputError(QUERY_REQUIRED)

    vector = precomputed_vector(body.metadata)
    logger.info(
        "search_request",
        query_chars=len(query),
        precomputed_vector=vector is not None,
        has_filter=isinstance(body.filter, dict),
    )

    try:
        if vector is None:
            vector = embedder.embed(query)
        matches = query_index(
            index,
            vector,
            top_k=settings.top_k,
            namespace=settings.namespace,
            filter=body.filter,
        )
        search_results = map_matches(matches)
    except Exception as e:
        logger.exception("search_failed", error=str(e))
        raise UpstreamError(str(e) or e.__class__.__name__) from e

    logger.info("search_completed", results=len(search_results))
    return {"search_results": search_results}
