"""
Client for the Predicd prediction API.

The proxy is the only component that knows the API credential; it asks the
provider for today's matches and hands the JSON back untouched.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests

from footycast.config import (
    PREDICD_API_KEY,
    PREDICD_API_URL,
    TODAY_MATCHES_PATH,
    UPSTREAM_TIMEOUT,
)
from footycast.errors import UpstreamError
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def build_auth_headers(api_key: str) -> dict[str, str]:
    """Return the token header the provider expects."""
    return {"Authorization": f"Token {api_key}"}


def fetch_today_predictions(
    session: Optional[requests.Session] = None,
    base_url: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[Any]:
    """
    Fetch today's predictions from the provider.

    Parameters
    ----------
    session : requests.Session | None
        Session to issue the request with. Defaults to the `requests` module.
    base_url : str | None
        Provider base URL. Defaults to PREDICD_API_URL.
    api_key : str | None
        Provider token. Defaults to PREDICD_API_KEY.
    timeout : float | None
        Request timeout in seconds. Defaults to UPSTREAM_TIMEOUT.

    Returns
    -------
    list
        The decoded JSON array, exactly as the provider sent it.

    Raises
    ------
    UpstreamError
        On a transport failure, a non-success status or a body that is not
        a JSON array.
    """
    http = session if session is not None else requests
    url = f"{(base_url or PREDICD_API_URL).rstrip('/')}{TODAY_MATCHES_PATH}"
    key = api_key if api_key is not None else PREDICD_API_KEY
    if not key:
        logger.warning("PREDICD_API_KEY is not set; the provider will reject us.")

    logger.info("Fetching predictions from Predicd API...")
    try:
        response = http.get(
            url,
            headers=build_auth_headers(key),
            timeout=timeout if timeout is not None else UPSTREAM_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.error("Request to %s failed: %s", url, exc)
        raise UpstreamError(f"Request to {url} failed") from exc

    if not response.ok:
        logger.error("Predicd API responded with status %d", response.status_code)
        logger.error("Error response: %s", response.text)
        raise UpstreamError(f"API responded with status {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        logger.error("Predicd API returned a body that is not JSON: %s", exc)
        raise UpstreamError("API returned malformed JSON") from exc

    if not isinstance(data, list):
        logger.error(
            "Predicd API returned %s instead of an array", type(data).__name__
        )
        raise UpstreamError("API returned an unexpected payload")

    logger.info("Successfully fetched %d predictions", len(data))
    return data
