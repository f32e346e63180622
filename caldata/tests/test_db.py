import sqlite3
import threading

import pytest

from caldata.db import get_conn


def test_connection_is_read_only(tmp_db_path):
    with get_conn(tmp_db_path) as conn:
        with pytest.raises(sqlite3.OperationalError):
            conn.execute("INSERT INTO Calendar(title) VALUES('x')")


def test_connection_bound_to_opening_thread(tmp_db_path):
    errors = []
    with get_conn(tmp_db_path) as conn:
        def use():
            try:
                conn.execute("SELECT 1").fetchone()
            except sqlite3.ProgrammingError as e:
                errors.append(e)

        t = threading.Thread(target=use)
        t.start()
        t.join()
    assert len(errors) == 1
