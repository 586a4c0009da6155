from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def mysql_time(value: Optional[timedelta]) -> Optional[time]:
    """mysql-connector returns TIME columns as ``timedelta`` since midnight."""
    if value is None:
        return None
    total_seconds = int(value.total_seconds()) % 86400
    return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60, second=total_seconds % 60)


def to_json_value(value: Any) -> Any:
    """Convert driver column values into something ``jsonify`` renders as-is."""
    if isinstance(value, timedelta):
        return mysql_time(value).strftime("%H:%M:%S")
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return value


def json_rows(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{k: to_json_value(v) for k, v in r.items()} for r in rows]
