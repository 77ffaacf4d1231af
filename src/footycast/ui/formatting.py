"""
Display helpers for prediction cards.

Everything here is a pure function of a prediction (and, for countdowns, the
current time) so the Streamlit page stays a thin rendering layer.
"""

from __future__ import annotations

import html
import math
import re
from datetime import datetime, timezone
from typing import Optional

from footycast.config import LOGO_URL_TEMPLATE, PLACEHOLDER_LOGO
from footycast.data.schema import Prediction, parse_kickoff

MATCH_ENDED = "Match ended"

_WHITESPACE = re.compile(r"\s+")


def calculate_time_remaining(match_time: str, now: Optional[datetime] = None) -> str:
    """
    Time left until kickoff, e.g. "1h 30m" or "45m".

    Returns "Match ended" once kickoff has passed.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = (parse_kickoff(match_time) - now).total_seconds()
    if seconds < 0:
        return MATCH_ENDED

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def time_remaining_label(match_time: str, now: Optional[datetime] = None) -> str:
    """Countdown line shown on a card."""
    remaining = calculate_time_remaining(match_time, now)
    if remaining == MATCH_ENDED:
        return MATCH_ENDED
    return f"Time Remaining: {remaining}"


def determine_outcome(prediction: Prediction) -> str:
    """
    Describe the most likely result.

    Ties are settled in the order home, away, draw.
    """
    max_prob = max(prediction.probHomeWin, prediction.probDraw, prediction.probAwayWin)

    if max_prob == prediction.probHomeWin:
        return f"{prediction.homeTeamName} likely to win"
    if max_prob == prediction.probAwayWin:
        return f"{prediction.awayTeamName} likely to win"
    return "Draw likely"


def format_percentage(value: float) -> str:
    """Render a unit fraction as a whole percent: 0.42 -> "42%"."""
    return f"{math.floor(value * 100 + 0.5)}%"


def format_expected_goals(value: float) -> str:
    return f"{value:.1f}"


def format_kickoff(match_time: str) -> str:
    """Kickoff in the server's local time, e.g. "Sat 18 Oct 2026, 15:00"."""
    return parse_kickoff(match_time).astimezone().strftime("%a %d %b %Y, %H:%M")


def get_team_logo(team_name: str) -> str:
    """Logo URL for a team; the image may not exist."""
    slug = _WHITESPACE.sub("-", team_name).lower()
    return LOGO_URL_TEMPLATE.format(slug=slug)


def _team_html(name: str, logo_first: bool) -> str:
    logo = (
        f'<img src="{html.escape(get_team_logo(name))}" '
        f'alt="{html.escape(name)} logo" width="40" height="40" '
        'style="border-radius:50%;background:white;padding:4px;" '
        f"onerror=\"this.onerror=null;this.src='{PLACEHOLDER_LOGO}';\">"
    )
    label = f"<span>{html.escape(name)}</span>"
    parts = (logo, label) if logo_first else (label, logo)
    return (
        '<div style="display:flex;align-items:center;gap:0.5rem;">'
        + "".join(parts)
        + "</div>"
    )


def match_header_html(prediction: Prediction) -> str:
    """
    HTML for the top row of a card: both logos, both names and "VS".

    Logos that fail to load are swapped for PLACEHOLDER_LOGO.
    """
    return (
        '<div style="display:flex;justify-content:space-between;'
        'align-items:center;font-size:1.4rem;font-weight:600;">'
        f"{_team_html(prediction.homeTeamName, logo_first=True)}"
        '<span style="color:#facc15;font-size:1.8rem;">VS</span>'
        f"{_team_html(prediction.awayTeamName, logo_first=False)}"
        "</div>"
    )
