"""
Best-effort column decoding.

Every column of a result row goes through decode_or_default: a value that
cannot be read as the expected type is replaced by that field's default and
the row is kept.
"""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

NA = "<NA>"


def read_int(value: Any) -> int:
    # bool is an int subclass but never a valid SQLite integer read
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected INTEGER, got {type(value).__name__}")
    return value


def read_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected TEXT, got {type(value).__name__}")
    return value


def read_bool(value: Any) -> bool:
    return read_int(value) != 0


def read_datetime(value: Any) -> dt.datetime:
    return dt.datetime.fromisoformat(read_str(value))


def decode_or_default(reader: Callable[[Any], T], value: Any, default: T | Callable[[], T],
                      field: str = "") -> T:
    """
    Apply reader to value; on any decode failure return default instead.
    A callable default is evaluated lazily (used for "now").
    """
    try:
        return reader(value)
    except (TypeError, ValueError) as e:
        logger.debug(f"column {field or '?'} undecodable ({e}); using default")
        return default() if callable(default) else default


def now_local() -> dt.datetime:
    return dt.datetime.now().replace(microsecond=0)
