"""
Global configuration for the FootyCast project.

This module centralizes the upstream API settings, the proxy address the UI
talks to, and display constants, so you can tweak them in one place.
Secrets are read from the environment (a local `.env` file is loaded first).
"""

import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

# Project root = folder that contains "src", "tests", etc.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

load_dotenv(PROJECT_ROOT / ".env")

# Root log level for the proxy and the UI
LOG_LEVEL: str = os.getenv("FOOTYCAST_LOG_LEVEL", "INFO").upper()

# Upstream prediction provider (Predicd)
PREDICD_API_URL: str = os.getenv("PREDICD_API_URL", "https://www.predicd.com/api/v1")
PREDICD_API_KEY: str = os.getenv("PREDICD_API_KEY", "")
TODAY_MATCHES_PATH: str = "/matches/today/"

# Seconds to wait for the upstream before giving up
UPSTREAM_TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "10"))

# Where the UI finds the FootyCast proxy
PROXY_URL: str = os.getenv(
    "FOOTYCAST_PROXY_URL", "http://localhost:8000/api/predictions"
)

# Generic messages surfaced to callers; upstream failure kinds are not exposed.
PROXY_ERROR_MESSAGE: str = "Failed to fetch predictions"
VIEW_ERROR_MESSAGE: str = "Failed to load predictions. Please try again later."

# The view refetches once a day while it is open
REFRESH_INTERVAL: timedelta = timedelta(hours=24)

# The page rerenders on this tick so countdowns stay current
COUNTDOWN_TICK: timedelta = timedelta(minutes=1)

# Team logos
LOGO_URL_TEMPLATE: str = "https://img.icons8.com/color/96/{slug}.png"
PLACEHOLDER_LOGO: str = (
    "data:image/svg+xml;utf8,"
    "%3Csvg xmlns=%22http://www.w3.org/2000/svg%22 width=%2240%22 height=%2240%22%3E"
    "%3Ccircle cx=%2220%22 cy=%2220%22 r=%2218%22 fill=%22%23cbd5e1%22/%3E%3C/svg%3E"
)

# How far the three outcome probabilities may drift from 1 before we warn
PROBABILITY_SUM_TOLERANCE: float = 0.05
