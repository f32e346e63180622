from sqlite3 import Connection

from ..domain.timestamps import native_datetime_sql


# 三个查询共用的事件列：展示用的 start_date 带有额外一天的偏移，end_date 没有
def _event_columns(alias: str, cal: str, loc: str) -> str:
    return f"""
        {alias}.ROWID AS rowid,
        {cal}.title AS calendar,
        {native_datetime_sql(f"{alias}.start_date", start=True)} AS start_date,
        {native_datetime_sql(f"{alias}.end_date")} AS end_date,
        {alias}.summary AS summary,
        {alias}.description AS description,
        {loc}.title AS location,
        {alias}.all_day AS all_day,
        {alias}.start_date AS start_native
    """


def events_in_range(conn: Connection, start_dash: str, end_dash: str):
    """
    Events whose (unshifted) start date lies in [start_dash, end_dash], both YYYY-MM-DD.
    Ordered by the raw start value, all-day flag second.
    """
    sql = f"""
    SELECT {_event_columns("a", "b", "c")}
    FROM CalendarItem a
    LEFT JOIN Calendar b ON a.calendar_id = b.ROWID
    LEFT JOIN Location c ON a.location_id = c.ROWID
    WHERE DATE({native_datetime_sql("a.start_date")}) BETWEEN DATE(?) AND DATE(?)
    ORDER BY a.start_date ASC, a.all_day ASC
    """
    return conn.execute(sql, (start_dash, end_dash)).fetchall()


def events_for_attendee(conn: Connection, identity_id: int):
    """Distinct events a participant identity is attached to, latest start first."""
    sql = f"""
    SELECT DISTINCT {_event_columns("b", "c", "l")}
    FROM Participant p
    JOIN CalendarItem b ON p.owner_id = b.ROWID
    LEFT JOIN Calendar c ON b.calendar_id = c.ROWID
    LEFT JOIN Location l ON b.location_id = l.ROWID
    WHERE p.identity_id = ?
    ORDER BY start_native DESC
    """
    return conn.execute(sql, (identity_id,)).fetchall()


def attendees_for_event(conn: Connection, owner_id: int):
    return conn.execute(
        "SELECT identity_id, email, phone_number, status FROM Participant WHERE owner_id = ? ORDER BY ROWID",
        (owner_id,),
    ).fetchall()
