from __future__ import annotations

# caldata/db.py
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
import os

# Calendar.app 在 macOS 上的默认数据库位置
DEFAULT_DB_PATH = os.path.join("~", "Library", "Calendars", "Calendar.sqlitedb")


class CalendarDBError(Exception):
    """Raised when the calendar database cannot be opened or a query fails."""


def get_db_path(configured: str | None = None) -> str:
    """
    解析数据库路径：显式传入的路径优先，其次使用 Calendar.app 默认位置。
    路径中的 ~ 会被展开；不会创建任何目录或文件（只读访问）。
    """
    path = configured.strip() if isinstance(configured, str) and configured.strip() else DEFAULT_DB_PATH
    return os.path.expanduser(path)


@contextmanager
def get_conn(db_path: str | os.PathLike) -> Iterator[sqlite3.Connection]:
    """
    以只读方式打开 SQLite 连接（mode=ro），文件不存在时直接报错而不是新建空库。
    row_factory 设置为 Row，退出时关闭连接。
    """
    uri = Path(get_db_path(os.fspath(db_path))).resolve().as_uri() + "?mode=ro"
    conn = sqlite3.connect(uri, uri=True)
    try:
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()
