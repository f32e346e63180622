import datetime as dt
import sqlite3
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from caldata.domain.timestamps import datetime_to_native  # noqa: E402

# Subset of the Calendar.app schema read by the repository layer
SCHEMA = """
CREATE TABLE Calendar (ROWID INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT);
CREATE TABLE Location (ROWID INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT);
CREATE TABLE CalendarItem (
  ROWID INTEGER PRIMARY KEY AUTOINCREMENT,
  summary TEXT,
  location_id INTEGER,
  description TEXT,
  start_date REAL,
  end_date REAL,
  all_day INTEGER,
  calendar_id INTEGER
);
CREATE TABLE Participant (
  ROWID INTEGER PRIMARY KEY AUTOINCREMENT,
  identity_id INTEGER,
  owner_id INTEGER,
  email TEXT,
  phone_number TEXT,
  status INTEGER
);
"""


class CalendarFixture:
    """Writes rows into a throwaway calendar database (tests only)."""

    def __init__(self, path: Path):
        self.path = path

    def _exec(self, sql: str, params=()) -> int:
        conn = sqlite3.connect(str(self.path))
        try:
            cur = conn.execute(sql, params)
            conn.commit()
            return cur.lastrowid
        finally:
            conn.close()

    def add_calendar(self, title) -> int:
        return self._exec("INSERT INTO Calendar(title) VALUES(?)", (title,))

    def add_location(self, title) -> int:
        return self._exec("INSERT INTO Location(title) VALUES(?)", (title,))

    def add_event(self, start: dt.datetime, end: dt.datetime | None = None, summary="event",
                  description="", all_day=0, calendar_id=None, location_id=None) -> int:
        """`start` is the unshifted start time (the value range filtering sees)."""
        end = end or start + dt.timedelta(hours=1)
        return self._exec(
            "INSERT INTO CalendarItem(summary, location_id, description, start_date, end_date, all_day, calendar_id) "
            "VALUES(?,?,?,?,?,?,?)",
            (summary, location_id, description, datetime_to_native(start), datetime_to_native(end),
             all_day, calendar_id),
        )

    def add_participant(self, identity_id, owner_id, email="a@example.com", phone_number="", status=0) -> int:
        return self._exec(
            "INSERT INTO Participant(identity_id, owner_id, email, phone_number, status) VALUES(?,?,?,?,?)",
            (identity_id, owner_id, email, phone_number, status),
        )

    def execute(self, sql: str, params=()):
        return self._exec(sql, params)


@pytest.fixture()
def tmp_db_path(tmp_path):
    path = tmp_path / "Calendar.sqlitedb"
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def cal(tmp_db_path):
    return CalendarFixture(Path(tmp_db_path))
