"""
Streamlit UI for FootyCast – today's football match predictions.

Run from project root (with the proxy running, see footycast.api.main):

    streamlit run src/footycast/ui/app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure the project src/ directory is on sys.path so that:
#   from footycast.ui.state import ...
# works when running via "streamlit run src/footycast/ui/app.py"
# from the project root.
# ---------------------------------------------------------------------------
SRC_ROOT = Path(__file__).resolve().parents[2]  # .../footycast/src
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from footycast.config import COUNTDOWN_TICK  # noqa: E402
from footycast.data.data_loader import predictions_to_frame  # noqa: E402
from footycast.data.schema import Prediction  # noqa: E402
from footycast.ui.client import fetch_predictions  # noqa: E402
from footycast.ui.formatting import (  # noqa: E402
    determine_outcome,
    format_expected_goals,
    format_kickoff,
    format_percentage,
    match_header_html,
    time_remaining_label,
)
from footycast.ui.state import PredictionViewState, ViewStatus  # noqa: E402

STATE_KEY = "footycast_view_state"


def _get_state() -> PredictionViewState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = PredictionViewState()
    return st.session_state[STATE_KEY]


def _retry() -> None:
    state = _get_state()
    with st.spinner("Loading predictions... This may take a few moments"):
        state.retry(fetch_predictions)


def render_prediction_card(prediction: Prediction) -> None:
    with st.container(border=True):
        st.markdown(match_header_html(prediction), unsafe_allow_html=True)

        col_left, col_right = st.columns(2)
        with col_left:
            st.write(f"📅 {format_kickoff(prediction.dateTime)}")
            st.write(f"⏱️ {time_remaining_label(prediction.dateTime)}")
            st.markdown(f"🏆 :green[**{determine_outcome(prediction)}**]")

        with col_right:
            st.markdown("**🎯 Predicted Result**")
            st.markdown(
                f"### {prediction.homePrediction} - {prediction.awayPrediction}"
            )
            st.markdown("**⚽ Expected Goals**")
            st.write(
                f"{format_expected_goals(prediction.expectedHomeGoals)} - "
                f"{format_expected_goals(prediction.expectedAwayGoals)}"
            )

        st.markdown("**📊 Match Outcome Probabilities**")
        bars = [
            (f"{prediction.homeTeamName} Win", prediction.probHomeWin),
            ("Draw", prediction.probDraw),
            (f"{prediction.awayTeamName} Win", prediction.probAwayWin),
        ]
        for label, value in bars:
            st.progress(
                min(max(value, 0.0), 1.0),
                text=f"{label} · {format_percentage(value)}",
            )


def render_summary_table(predictions: list[Prediction]) -> None:
    df = predictions_to_frame(predictions)
    df["likely_outcome"] = [determine_outcome(p) for p in predictions]
    with st.expander("All predictions as a table"):
        st.dataframe(df, use_container_width=True, hide_index=True)


@st.fragment(run_every=COUNTDOWN_TICK)
def render_predictions() -> None:
    """
    Prediction section of the page.

    Reruns on a short tick so countdowns stay current, and refetches once the
    daily refresh time comes round.
    """
    state = _get_state()

    if state.is_refresh_due():
        with st.spinner("Loading predictions... This may take a few moments"):
            state.run_scheduled_refresh(fetch_predictions)

    if state.status is ViewStatus.ERROR:
        st.error(f"⚠️ {state.error}")
        st.button("🔄 Try Again", on_click=_retry, key="retry")
        return

    if state.is_empty:
        st.info("⚽ No predictions available for today.")
        st.caption("Check back later for updates!")
        return

    if state.last_updated is not None:
        updated = state.last_updated.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        st.caption(f"Last updated: {updated}")

    for prediction in state.predictions:
        render_prediction_card(prediction)

    render_summary_table(state.predictions)


def main() -> None:
    st.set_page_config(page_title="FootyCast – Football Predictions", layout="centered")
    st.title("⚽ Football Predictions ⚽")
    render_predictions()


if __name__ == "__main__":
    main()
