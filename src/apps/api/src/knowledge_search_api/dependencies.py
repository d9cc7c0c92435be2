"""Request-scoped access to the process-wide clients."""
from fastapi import Request

from knowledge_search_api.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_embedder(request: Request):
    return request.app.state.embedder


def get_vector_index(request: Request):
    return request.app.state.index
