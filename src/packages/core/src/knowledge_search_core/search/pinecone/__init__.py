"""Pinecone client and operations."""
from knowledge_search_core.search.pinecone.client import get_index
from knowledge_search_core.search.pinecone.mapping import map_match, map_matches
from knowledge_search_core.search.pinecone.query import query_index

__all__ = [
    "get_index",
    "map_match",
    "map_matches",
    "query_index",
]
