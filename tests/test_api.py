import pytest
import requests
from fastapi.testclient import TestClient

from footycast.api.main import app

from conftest import FakeResponse

client = TestClient(app)


@pytest.fixture
def upstream(monkeypatch):
    """Route the proxy's outbound requests.get to a canned response."""
    calls = []

    def install(response):
        def fake_get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_predictions_forwards_upstream_payload(upstream, predictions_payload):
    calls = upstream(FakeResponse(200, predictions_payload))

    r = client.get("/api/predictions")

    assert r.status_code == 200
    assert r.json() == predictions_payload
    assert calls[0]["url"].endswith("/matches/today/")
    assert calls[0]["headers"]["Authorization"].startswith("Token ")


def test_predictions_empty_list(upstream):
    upstream(FakeResponse(200, []))

    r = client.get("/api/predictions")

    assert r.status_code == 200
    assert r.json() == []


def test_upstream_503_becomes_generic_500(upstream):
    upstream(FakeResponse(503, text="maintenance"))

    r = client.get("/api/predictions")

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch predictions"}


def test_upstream_network_error_becomes_generic_500(upstream):
    upstream(requests.Timeout("timed out"))

    r = client.get("/api/predictions")

    assert r.status_code == 500
    assert "error" in r.json()
