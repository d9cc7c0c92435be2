"""Shared fixtures for API tests."""
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from knowledge_search_api.main import create_app
from knowledge_search_api.settings import Settings


class FakeEmbedder:
    def __init__(self):
        self.vector = [0.1, 0.2, 0.3]
        self.error = None
        self.calls = []

    def embed(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.vector


class FakeIndex:
    def __init__(self):
        self.matches = []
        self.error = None
        self.calls = []

    def query(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(matches=self.matches)


def make_settings(**overrides) -> Settings:
    values = {
        "_env_file": None,
        "pinecone_api_key": "pc-test",
        "index_host": "docs-abc.svc.pinecone.io",
        "index_name": "docs",
        "namespace": "__default__",
        "openai_api_key": "sk-test",
        "embed_model": "text-embedding-3-small",
        "top_k": 5,
        "knowledge_api_key": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def index():
    return FakeIndex()


@pytest.fixture
def make_client(embedder, index):
    def _make(**overrides):
        app = create_app(make_settings(**overrides), embedder=embedder, index=index)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def secured_client(make_client):
    return make_client(knowledge_api_key="s3cret")
