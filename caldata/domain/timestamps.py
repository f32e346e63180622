from __future__ import annotations

import datetime as dt

# Native values are Unix seconds shifted by 31 years (reference date 2001-01-01).
NATIVE_EPOCH_YEARS = 31
# Start times decode one day later than end times; kept for compatibility
# with the output expected from existing calendar databases.
START_DAY_SHIFT = dt.timedelta(days=1)

_UNIX_EPOCH = dt.datetime(1970, 1, 1)
QUERY_DATE_FMT = "%Y-%m-%d"


def _shift_years(value: dt.datetime, years: int) -> dt.datetime:
    """Add calendar years the way SQLite's 'N years' modifier does.

    SQLite keeps month/day and normalises an impossible date forward, so
    Feb 29 in a non-leap target year becomes Mar 1.
    """
    year = value.year + years
    try:
        return value.replace(year=year)
    except ValueError:
        return value.replace(year=year, month=3, day=1)


def native_datetime_sql(column: str, start: bool = False) -> str:
    """SQL expression decoding a native timestamp column to 'YYYY-MM-DD HH:MM:SS'."""
    mods = [f"'{NATIVE_EPOCH_YEARS} years'"]
    if start:
        mods.append(f"'{START_DAY_SHIFT.days} day'")
    return f"datetime({column}, 'unixepoch', {', '.join(mods)})"


def native_to_datetime(value: int | float, start: bool = False) -> dt.datetime:
    """
    Decode a native timestamp to a naive date-time (same result as
    native_datetime_sql). Sub-second precision is truncated like datetime().
    """
    unix = (_UNIX_EPOCH + dt.timedelta(seconds=value)).replace(microsecond=0)
    out = _shift_years(unix, NATIVE_EPOCH_YEARS)
    if start:
        out += START_DAY_SHIFT
    return out


def datetime_to_native(value: dt.datetime, start: bool = False) -> int:
    """Inverse of native_to_datetime for whole-second values."""
    if start:
        value -= START_DAY_SHIFT
    unix = _shift_years(value, -NATIVE_EPOCH_YEARS)
    return int((unix - _UNIX_EPOCH).total_seconds())


def to_local(value: dt.datetime) -> dt.datetime:
    """Treat a naive value as UTC and return the host-local naive date-time."""
    return value.replace(tzinfo=dt.timezone.utc).astimezone().replace(tzinfo=None)


def format_query_date(value: dt.date) -> str:
    return value.strftime(QUERY_DATE_FMT)
