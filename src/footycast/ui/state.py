"""
State of the prediction view.

The view is always in exactly one of three states: loading, error or
loaded. A fetch (on first render, on the daily timer or on a user retry)
always passes through loading, and the list is replaced wholesale when it
succeeds.

The daily refresh is anchored to the first fetch; a manual retry does not
move it. All timestamps are aware UTC datetimes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, List, Optional

from footycast.config import REFRESH_INTERVAL, VIEW_ERROR_MESSAGE
from footycast.data.schema import Prediction
from footycast.errors import PredictionFetchError
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)

Fetcher = Callable[[], List[Prediction]]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ViewStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass
class PredictionViewState:
    """Mutable state owned by a single view session."""

    status: ViewStatus = ViewStatus.LOADING
    predictions: List[Prediction] = field(default_factory=list)
    error: Optional[str] = None
    last_updated: Optional[datetime] = None
    last_attempt: Optional[datetime] = None
    next_refresh: Optional[datetime] = None
    interval: timedelta = REFRESH_INTERVAL

    @property
    def is_empty(self) -> bool:
        return self.status is ViewStatus.LOADED and not self.predictions

    def start_loading(self, now: Optional[datetime] = None) -> None:
        self.status = ViewStatus.LOADING
        self.last_attempt = now or utcnow()
        if self.next_refresh is None:
            self.next_refresh = self.last_attempt + self.interval

    def refresh(self, fetcher: Fetcher, now: Optional[datetime] = None) -> ViewStatus:
        """
        Run one fetch cycle and settle in the error or loaded state.

        Parameters
        ----------
        fetcher : callable
            Returns the new prediction list or raises PredictionFetchError.
        now : datetime | None
            Clock override (aware UTC), used for the attempt and last-updated
            timestamps.

        Returns
        -------
        ViewStatus
            The state the view ended up in.
        """
        now = now or utcnow()
        self.start_loading(now)
        try:
            predictions = fetcher()
        except PredictionFetchError as exc:
            logger.error("Error fetching predictions: %s", exc)
            self.error = VIEW_ERROR_MESSAGE
            self.status = ViewStatus.ERROR
            return self.status

        self.predictions = list(predictions)
        self.error = None
        self.last_updated = now
        self.status = ViewStatus.LOADED
        logger.info("Loaded %d predictions", len(self.predictions))
        return self.status

    def retry(self, fetcher: Fetcher, now: Optional[datetime] = None) -> ViewStatus:
        """User-triggered refetch from the error state; leaves the daily schedule alone."""
        logger.info("Retrying prediction fetch")
        return self.refresh(fetcher, now)

    def is_refresh_due(self, now: Optional[datetime] = None) -> bool:
        """True before the first fetch and whenever the daily refresh time has come."""
        if self.next_refresh is None:
            return True
        return (now or utcnow()) >= self.next_refresh

    def run_scheduled_refresh(
        self, fetcher: Fetcher, now: Optional[datetime] = None
    ) -> Optional[ViewStatus]:
        """
        Fetch if the first load or the daily refresh is due.

        Returns the resulting status, or None when nothing was due. Missed
        slots are skipped rather than fetched one by one.
        """
        now = now or utcnow()
        if not self.is_refresh_due(now):
            return None

        if self.next_refresh is not None:
            while self.next_refresh <= now:
                self.next_refresh += self.interval
        return self.refresh(fetcher, now)
