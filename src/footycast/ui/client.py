"""
HTTP client the UI uses to talk to the FootyCast proxy.
"""

from __future__ import annotations

from typing import List, Optional

import requests

from footycast.config import PROXY_URL, UPSTREAM_TIMEOUT
from footycast.data.schema import Prediction, parse_predictions
from footycast.errors import PredictionFetchError
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def fetch_predictions(
    url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> List[Prediction]:
    """
    Load today's predictions from the proxy.

    Raises
    ------
    PredictionFetchError
        If the proxy is unreachable, answers with a non-success status, reports
        an error payload, or returns something that is not a prediction list.
    """
    http = session if session is not None else requests
    target = url or PROXY_URL

    try:
        response = http.get(
            target, timeout=timeout if timeout is not None else UPSTREAM_TIMEOUT
        )
    except requests.RequestException as exc:
        logger.error("Error fetching predictions: %s", exc)
        raise PredictionFetchError(f"Could not reach {target}") from exc

    if not response.ok:
        logger.error("Proxy responded with status %d", response.status_code)
        raise PredictionFetchError(
            f"API responded with status {response.status_code}"
        )

    try:
        data = response.json()
    except ValueError as exc:
        logger.error("Proxy returned a body that is not JSON: %s", exc)
        raise PredictionFetchError("Malformed response from proxy") from exc

    if isinstance(data, dict) and data.get("error"):
        logger.error("Proxy reported an error: %s", data["error"])
        raise PredictionFetchError(str(data["error"]))

    try:
        return parse_predictions(data)
    except ValueError as exc:
        logger.error("Proxy returned invalid predictions: %s", exc)
        raise PredictionFetchError("Invalid predictions payload") from exc
