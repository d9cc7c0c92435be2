"""Pinecone query operations."""
from typing import Any

import structlog

from knowledge_search_core.search.pinecone.mapping import field

logger = structlog.get_logger()


def build_query(
    vector: list[float],
    top_k: int,
    namespace: str,
    filter: Any = None,
) -> dict[str, Any]:
    """Build keyword arguments for ``Index.query``.

    ``filter`` is only passed through when it is a mapping. Anything else,
    including an empty value, leaves the key out entirely.
    """
    kwargs = {
        "vector": vector,
        "top_k": int(top_k),
        "include_metadata": True,
        "namespace": namespace,
    }
    if isinstance(filter, dict):
        kwargs["filter"] = filter
    return kwargs


def query_index(
    index,
    vector: list[float],
    top_k: int,
    namespace: str,
    filter: Any = None,
) -> list:
    """Run a nearest-neighbour query and return the matches in ranked order."""
    kwargs = build_query(vector, top_k, namespace, filter=filter)
    resp = index.query(**kwargs)
    matches = list(field(resp, "matches") or [])
    logger.debug(
        "index_queried",
        namespace=namespace,
        top_k=kwargs["top_k"],
        filtered="filter" in kwargs,
        matches=len(matches),
    )
    return matches[: kwargs["top_k"]]
