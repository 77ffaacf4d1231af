"""
Logging setup shared by the FootyCast proxy and UI.

Both processes log to stdout in one format; the level comes from
FOOTYCAST_LOG_LEVEL (see footycast.config).
"""

import logging
from typing import Optional

from footycast.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a module logger, configuring the root logger on first use.

    Uvicorn and Streamlit may install their own root handlers first; in that
    case their setup is left alone.
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    return logging.getLogger(name if name is not None else "footycast")
