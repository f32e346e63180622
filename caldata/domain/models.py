from __future__ import annotations

import datetime as dt
from dataclasses import asdict, dataclass
from typing import Any, Mapping

from .row_decoder import (
    NA,
    decode_or_default,
    now_local,
    read_bool,
    read_datetime,
    read_int,
    read_str,
)
from .timestamps import to_local


@dataclass(frozen=True)
class CalendarEvent:
    rowid: int
    calendar: str
    start_date: dt.datetime
    end_date: dt.datetime
    summary: str
    description: str
    location: str
    all_day: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CalendarEvent":
        """Build an event from a query row; undecodable columns fall back to defaults."""
        return cls(
            rowid=decode_or_default(read_int, row["rowid"], 0, "rowid"),
            calendar=decode_or_default(read_str, row["calendar"], NA, "calendar"),
            start_date=decode_or_default(read_datetime, row["start_date"], now_local, "start_date"),
            end_date=decode_or_default(read_datetime, row["end_date"], now_local, "end_date"),
            summary=decode_or_default(read_str, row["summary"], NA, "summary"),
            description=decode_or_default(read_str, row["description"], NA, "description"),
            location=decode_or_default(read_str, row["location"], NA, "location"),
            all_day=decode_or_default(read_bool, row["all_day"], False, "all_day"),
        )

    def start_date_from_utc(self) -> dt.datetime:
        return to_local(self.start_date)

    def end_date_from_utc(self) -> dt.datetime:
        return to_local(self.end_date)

    def dirname(self) -> str:
        """Folder name for notes about this event: local start time + summary."""
        return f"{self.start_date_from_utc():%Y-%m-%d-%H_%M}-{self.summary}"

    def notename(self) -> str:
        return f"{self.dirname()}.md"

    def as_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"[rowid: {self.rowid}] {self.start_date} - {self.end_date} -- {self.summary}\n"
            f"description length: {len(self.description.encode('utf-8'))} | loc: {self.location} "
            f"| all day: {str(self.all_day).lower()}"
        )


@dataclass(frozen=True)
class Attendee:
    identity_id: int
    email: str
    phone_number: str
    status: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Attendee":
        return cls(
            identity_id=decode_or_default(read_int, row["identity_id"], 0, "identity_id"),
            email=decode_or_default(read_str, row["email"], NA, "email"),
            phone_number=decode_or_default(read_str, row["phone_number"], NA, "phone_number"),
            status=decode_or_default(read_int, row["status"], 0, "status"),
        )

    def __str__(self) -> str:
        return f"[identity: {self.identity_id}] {self.email} | phone: {self.phone_number} | status: {self.status}"
