from typing import Any, Dict, List

import pytest


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records GET calls and answers with a fixed response (or raises)."""

    def __init__(self, response: Any):
        self.response = response
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def make_prediction_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "matchId": "m-1",
        "homeTeamName": "Manchester United",
        "awayTeamName": "Arsenal",
        "dateTime": "2026-10-18T15:00:00Z",
        "homePrediction": "2",
        "awayPrediction": "1",
        "probHomeWin": 0.5,
        "probDraw": 0.3,
        "probAwayWin": 0.2,
        "expectedHomeGoals": 1.74,
        "expectedAwayGoals": 0.96,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def prediction_payload() -> Dict[str, Any]:
    return make_prediction_payload()


@pytest.fixture
def predictions_payload() -> List[Dict[str, Any]]:
    return [
        make_prediction_payload(),
        make_prediction_payload(
            matchId="m-2",
            homeTeamName="Real Madrid",
            awayTeamName="Barcelona",
            probHomeWin=0.3,
            probDraw=0.3,
            probAwayWin=0.4,
        ),
    ]
