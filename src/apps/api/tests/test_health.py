"""Tests for the health endpoint."""


def test_health_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_health_alias(client):
    assert client.get("/health").json() == {"ok": True}


def test_health_needs_no_key(secured_client, embedder, index):
    resp = secured_client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
    assert embedder.calls == []
    assert index.calls == []
