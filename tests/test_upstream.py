import pytest
import requests

from footycast.data.upstream import fetch_today_predictions
from footycast.errors import UpstreamError

from conftest import FakeResponse, FakeSession


def test_fetch_sends_token_to_today_endpoint(predictions_payload):
    session = FakeSession(FakeResponse(200, predictions_payload))

    data = fetch_today_predictions(
        session=session, base_url="https://example.test/api/v1/", api_key="secret"
    )

    assert data == predictions_payload
    call = session.calls[0]
    assert call["url"] == "https://example.test/api/v1/matches/today/"
    assert call["headers"] == {"Authorization": "Token secret"}
    assert call["timeout"] > 0


def test_fetch_returns_payload_verbatim():
    raw = [{"matchId": 7, "extra": {"nested": True}}]
    session = FakeSession(FakeResponse(200, raw))

    assert fetch_today_predictions(session=session, api_key="k") is raw


def test_fetch_empty_array_is_success():
    session = FakeSession(FakeResponse(200, []))

    assert fetch_today_predictions(session=session, api_key="k") == []


def test_fetch_non_success_status_raises_and_logs_body(caplog):
    session = FakeSession(FakeResponse(503, text="Service Unavailable"))

    with pytest.raises(UpstreamError, match="status 503"):
        fetch_today_predictions(session=session, api_key="k")
    assert "Service Unavailable" in caplog.text


def test_fetch_network_error_raises_upstream_error():
    session = FakeSession(requests.ConnectionError("connection refused"))

    with pytest.raises(UpstreamError) as excinfo:
        fetch_today_predictions(session=session, api_key="k")
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_fetch_malformed_body_raises_upstream_error():
    session = FakeSession(FakeResponse(200, payload=None, text="<html>"))

    with pytest.raises(UpstreamError):
        fetch_today_predictions(session=session, api_key="k")


def test_fetch_non_array_body_raises_upstream_error():
    session = FakeSession(FakeResponse(200, {"detail": "Invalid token."}))

    with pytest.raises(UpstreamError):
        fetch_today_predictions(session=session, api_key="k")
