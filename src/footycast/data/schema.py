"""
Schema and validation utilities for upstream prediction records.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from footycast.config import PROBABILITY_SUM_TOLERANCE
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def parse_kickoff(match_time: str) -> datetime:
    """
    Parse an ISO-8601 kickoff timestamp into an aware datetime.

    A trailing "Z" is accepted; naive timestamps are taken as UTC.
    Raises ValueError for anything else.
    """
    value = match_time.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    kickoff = datetime.fromisoformat(value)
    if kickoff.tzinfo is None:
        kickoff = kickoff.replace(tzinfo=timezone.utc)
    return kickoff


class Prediction(BaseModel):
    """
    A single match forecast as served by the prediction provider.

    Field names follow the provider's JSON exactly; there is no mapping layer.
    """

    matchId: str
    homeTeamName: str
    awayTeamName: str
    dateTime: str
    homePrediction: str
    awayPrediction: str
    probHomeWin: float
    probDraw: float
    probAwayWin: float
    expectedHomeGoals: float
    expectedAwayGoals: float

    @field_validator("matchId", "homePrediction", "awayPrediction", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> Any:
        # The provider sends ids and scores as numbers for some competitions
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("dateTime")
    @classmethod
    def _check_kickoff(cls, value: str) -> str:
        parse_kickoff(value)
        return value

    @model_validator(mode="after")
    def _check_probability_total(self) -> "Prediction":
        total = probability_total(self)
        if abs(total - 1.0) > PROBABILITY_SUM_TOLERANCE:
            logger.warning(
                "Outcome probabilities for match %s sum to %.3f",
                self.matchId,
                total,
            )
        return self


def probability_total(prediction: Prediction) -> float:
    """Sum of the home, draw and away probabilities."""
    return prediction.probHomeWin + prediction.probDraw + prediction.probAwayWin


def parse_predictions(payload: Any) -> List[Prediction]:
    """
    Validate a decoded JSON payload into a list of predictions.

    Parameters
    ----------
    payload : Any
        The decoded JSON body, expected to be an array of prediction objects.

    Returns
    -------
    list[Prediction]
        One model per array item, in the provider's order.

    Raises
    ------
    ValueError
        If the payload is not a list or any item fails validation.
    """
    if not isinstance(payload, list):
        raise ValueError(
            f"Expected a JSON array of predictions, got {type(payload).__name__}"
        )

    predictions: List[Prediction] = []
    for index, item in enumerate(payload):
        try:
            predictions.append(Prediction.model_validate(item))
        except ValidationError as exc:
            raise ValueError(f"Invalid prediction at index {index}: {exc}") from exc

    return predictions
