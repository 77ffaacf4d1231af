# path: src/footycast/api/main.py
"""
FastAPI app exposing the FootyCast prediction proxy.

Endpoints:
- GET /health            -> simple health check
- GET /api/predictions   -> today's predictions, forwarded from Predicd

Run from project root:

    python -m footycast.api.main --port 8000
"""

from __future__ import annotations

import argparse
from typing import Any, Dict, List

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from footycast.config import PROXY_ERROR_MESSAGE
from footycast.data.upstream import fetch_today_predictions
from footycast.errors import UpstreamError
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="FootyCast API",
    version="0.1.0",
    description="Proxy for today's football match predictions",
)


@app.get("/health")
def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/predictions", response_model=None)
def get_predictions() -> List[Any] | JSONResponse:
    """
    Return today's predictions exactly as the provider sent them.

    Response (200):
        [ { "matchId": ..., "homeTeamName": ..., ... }, ... ]

    Response (500):
        { "error": "Failed to fetch predictions" }
    """
    try:
        return fetch_today_predictions()
    except UpstreamError as exc:
        logger.error("Error fetching predictions: %s", exc)
        return JSONResponse(status_code=500, content={"error": PROXY_ERROR_MESSAGE})


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the FootyCast proxy.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    args = parser.parse_args()

    logger.info("Starting FootyCast proxy on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
