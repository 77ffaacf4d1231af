"""
Tabular views of prediction lists.

This module turns validated predictions into pandas DataFrames for the
summary table shown under the prediction cards.
"""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from footycast.data.schema import Prediction
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Columns of the summary table, in display order
SUMMARY_COLUMNS: List[str] = [
    "match_id",
    "kickoff",
    "home_team",
    "away_team",
    "predicted_score",
    "prob_home_win",
    "prob_draw",
    "prob_away_win",
    "expected_home_goals",
    "expected_away_goals",
]


def predictions_to_frame(predictions: Sequence[Prediction]) -> pd.DataFrame:
    """
    Build a one-row-per-match DataFrame from a list of predictions.

    Parameters
    ----------
    predictions : Sequence[Prediction]
        Predictions in display order.

    Returns
    -------
    pandas.DataFrame
        Frame with SUMMARY_COLUMNS; empty (but with those columns) when there
        are no predictions. `kickoff` is parsed to a UTC datetime.
    """
    records = [
        {
            "match_id": p.matchId,
            "kickoff": p.dateTime,
            "home_team": p.homeTeamName,
            "away_team": p.awayTeamName,
            "predicted_score": f"{p.homePrediction}-{p.awayPrediction}",
            "prob_home_win": p.probHomeWin,
            "prob_draw": p.probDraw,
            "prob_away_win": p.probAwayWin,
            "expected_home_goals": p.expectedHomeGoals,
            "expected_away_goals": p.expectedAwayGoals,
        }
        for p in predictions
    ]

    df = pd.DataFrame.from_records(records, columns=SUMMARY_COLUMNS)
    df["kickoff"] = pd.to_datetime(
        df["kickoff"], utc=True, format="ISO8601", errors="coerce"
    )

    if df["kickoff"].isna().any():
        logger.warning("Some predictions have invalid 'dateTime' values after parsing.")

    return df
