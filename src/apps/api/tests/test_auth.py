"""Tests for shared-secret authentication."""
import pytest
from starlette.datastructures import Headers

from knowledge_search_api.auth import extract_token, token_matches
from knowledge_search_core.util.errors import AuthError


def test_no_secret_allows_anonymous(client, index):
    resp = client.post("/", json={"query": "q"})
    assert resp.status_code == 200
    assert len(index.calls) == 1


def test_missing_token(secured_client, embedder, index):
    resp = secured_client.post("/", json={"query": "q"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "unauthorized"}
    assert embedder.calls == []
    assert index.calls == []


def test_missing_token_beats_bad_body(secured_client):
    resp = secured_client.post("/", json={})
    assert resp.status_code == 401
    resp = secured_client.post(
        "/", content=b"{not json", headers={"content-type": "application/json"}
    )
    assert resp.status_code == 401


def test_wrong_token(secured_client, index):
    resp = secured_client.post("/", json={"query": "q"}, headers={"x-api-key": "nope"})
    assert resp.status_code == 401
    assert index.calls == []


@pytest.mark.parametrize(
    "headers",
    [
        {"x-api-key": "s3cret"},
        {"api-key": "s3cret"},
        {"Authorization": "Bearer s3cret"},
        {"Authorization": "bearer s3cret"},
        {"Authorization": "ApiKey s3cret"},
        {"Authorization": "APIKEY  s3cret"},
    ],
)
def test_accepted_tokens(secured_client, index, headers):
    index.matches = [{"id": "a", "score": 0.9, "metadata": {"title": "T", "text": "B"}}]
    resp = secured_client.post("/", json={"query": "q"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["search_results"][0]["title"] == "T"


def test_unknown_scheme_rejected(secured_client):
    resp = secured_client.post(
        "/", json={"query": "q"}, headers={"Authorization": "Basic s3cret"}
    )
    assert resp.status_code == 401


def test_secret_is_trimmed(make_client):
    client = make_client(knowledge_api_key="  s3cret\n")
    resp = client.post("/", json={"query": "q"}, headers={"x-api-key": "s3cret"})
    assert resp.status_code == 200


def test_extract_token_priority():
    headers = Headers(
        {"x-api-key": "one", "api-key": "two", "authorization": "Bearer three"}
    )
    assert extract_token(headers) == "one"
    assert extract_token(Headers({"api-key": "two", "authorization": "Bearer three"})) == "two"
    assert extract_token(Headers({"authorization": "Bearer three"})) == "three"
    assert extract_token(Headers({})) is None


def test_token_matches():
    assert token_matches(" abc ", "abc")
    assert not token_matches("abd", "abc")
    assert not token_matches(None, "abc")
    assert not token_matches("", "abc")


def test_rejection_body_comes_from_auth_error(secured_client):
    err = AuthError()
    resp = secured_client.post("/", json={"query": "q"})
    assert resp.status_code == err.status_code == 401
    assert resp.json() == {"error": err.message}


def test_head_is_not_exempt(secured_client):
    assert secured_client.head("/").status_code == 401


def test_cross_origin_preflight_not_approved(secured_client):
    resp = secured_client.options(
        "/",
        headers={
            "Origin": "https://elsewhere.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "x-api-key",
        },
    )
    assert resp.status_code == 401
    assert "access-control-allow-origin" not in resp.headers
    assert "access-control-allow-credentials" not in resp.headers
