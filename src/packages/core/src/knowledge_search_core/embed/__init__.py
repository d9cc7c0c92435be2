"""Embedding module."""
from knowledge_search_core.embed.model import OpenAIEmbedder, get_embedder

__all__ = ["OpenAIEmbedder", "get_embedder"]
