from __future__ import annotations

# caldata/services/event_svc.py
import datetime as dt
import logging
import os
import sqlite3

from ..db import CalendarDBError, get_conn
from ..domain.models import Attendee, CalendarEvent
from ..domain.timestamps import format_query_date
from ..repository import event_repo

logger = logging.getLogger(__name__)


def _as_date(value: dt.date) -> dt.date:
    return value.date() if isinstance(value, dt.datetime) else value


def fetch_events_in_range(db_path: str | os.PathLike, start_date: dt.date, end_date: dt.date) -> list[CalendarEvent]:
    """
    读取开始日期落在 [start_date, end_date]（含两端，按日期比较）内的全部事件。
    每次调用独立打开/关闭只读连接；无匹配时返回空列表。
    """
    start_date, end_date = _as_date(start_date), _as_date(end_date)
    if start_date > end_date:
        raise ValueError(f"start_date {start_date} is after end_date {end_date}")

    start_dash, end_dash = format_query_date(start_date), format_query_date(end_date)
    logger.info("Fetching calendar events from database")
    logger.debug(f"Selecting dates between {start_dash} and {end_dash}")
    try:
        with get_conn(db_path) as conn:
            rows = event_repo.events_in_range(conn, start_dash, end_dash)
    except sqlite3.Error as e:
        raise CalendarDBError(f"range query on {db_path} failed: {e}") from e
    return _to_events(rows)


def fetch_events_for_attendee(db_path: str | os.PathLike, attendee_id: int) -> list[CalendarEvent]:
    """All events for a participant identity, newest first, no date window."""
    logger.info(f"Fetching events for attendee identity_id {attendee_id}")
    try:
        with get_conn(db_path) as conn:
            rows = event_repo.events_for_attendee(conn, int(attendee_id))
    except sqlite3.Error as e:
        raise CalendarDBError(f"attendee query on {db_path} failed: {e}") from e
    return _to_events(rows)


def fetch_attendees_for_event(db_path: str | os.PathLike, event_rowid: int) -> list[Attendee]:
    logger.info(f"Fetching attendees for event rowid {event_rowid}")
    try:
        with get_conn(db_path) as conn:
            rows = event_repo.attendees_for_event(conn, int(event_rowid))
    except sqlite3.Error as e:
        raise CalendarDBError(f"participant query on {db_path} failed: {e}") from e
    return [Attendee.from_row(r) for r in rows]


def _to_events(rows) -> list[CalendarEvent]:
    events = []
    for r in rows:
        ev = CalendarEvent.from_row(r)
        logger.debug(f"rowid = {ev.rowid} summary = {ev.summary}")
        events.append(ev)
    return events
