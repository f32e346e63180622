from __future__ import annotations

# caldata/services/window_svc.py
import datetime as dt
import logging
import os
from dataclasses import dataclass
from typing import Callable

from ..domain.models import CalendarEvent
from .event_svc import fetch_events_in_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowDefaults:
    """Default observation window: days_before today through weeks_after weeks ahead."""
    days_before: int = 1
    weeks_after: int = 12

    def bounds(self, today: dt.date) -> tuple[dt.date, dt.date]:
        return today - dt.timedelta(days=self.days_before), today + dt.timedelta(weeks=self.weeks_after)


class CalendarWindow:
    """
    Mutable date window over a calendar database.

    Every bound change re-queries immediately. Bounds and events are only
    replaced together after a successful query, so a failing refresh leaves
    the previous state intact. Not safe for concurrent mutation.
    """

    def __init__(self, db_path: str | os.PathLike, defaults: WindowDefaults | None = None,
                 clock: Callable[[], dt.date] = dt.date.today):
        logger.info("Creating new CalendarWindow")
        self._db_path = db_path
        self._defaults = defaults or WindowDefaults()
        self._clock = clock
        self._events: tuple[CalendarEvent, ...] = ()
        self._apply(*self._defaults.bounds(self._clock()))

    @property
    def db_path(self):
        return self._db_path

    @property
    def start_date(self) -> dt.date:
        return self._start_date

    @property
    def end_date(self) -> dt.date:
        return self._end_date

    @property
    def events(self) -> tuple[CalendarEvent, ...]:
        return self._events

    def _apply(self, start: dt.date, end: dt.date) -> None:
        events = fetch_events_in_range(self._db_path, start, end)
        self._start_date, self._end_date = start, end
        self._events = tuple(events)
        logger.debug(f"window {start} .. {end}: {len(events)} events")

    def refresh(self) -> None:
        self._apply(self._start_date, self._end_date)

    def extend_start_earlier(self, weeks: int) -> None:
        """Move the start date earlier by a number of weeks and refresh.

        Negative weeks move it later; if that puts start after end, ValueError
        is raised and the window is left unchanged.
        """
        self._apply(self._start_date - dt.timedelta(weeks=weeks), self._end_date)

    def extend_end_later(self, weeks: int) -> None:
        """Move the end date later by a number of weeks and refresh.

        Negative weeks move it earlier; if that puts end before start, ValueError
        is raised and the window is left unchanged.
        """
        self._apply(self._start_date, self._end_date + dt.timedelta(weeks=weeks))

    def reset_to_default(self) -> None:
        # relative to the clock at call time, not creation time
        self._apply(*self._defaults.bounds(self._clock()))
