from __future__ import annotations

# caldata/services/export_svc.py
import logging
import os
from typing import Iterable

import pandas as pd

from ..domain.models import CalendarEvent

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "rowid", "calendar", "start_date", "end_date", "start_local", "end_local",
    "summary", "description", "location", "all_day", "note",
]


def events_frame(events: Iterable[CalendarEvent]) -> pd.DataFrame:
    rows = []
    for ev in events:
        r = ev.as_dict()
        r["start_local"] = ev.start_date_from_utc()
        r["end_local"] = ev.end_date_from_utc()
        r["note"] = ev.notename()
        rows.append(r)
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_events_csv(events: Iterable[CalendarEvent], out_dir: str, name: str) -> str:
    """Write the events to <out_dir>/<name>.csv and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    df = events_frame(events)
    path = os.path.join(out_dir, f"{name}.csv")
    df.to_csv(path, index=False, encoding="utf-8-sig")
    logger.info(f"exported {len(df)} events to {path}")
    return path
