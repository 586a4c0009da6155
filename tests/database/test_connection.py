from __future__ import annotations

import pytest
from mysql.connector.errors import PoolError

from src.fieldforce.fieldforce.core.exceptions import Overloaded
from src.fieldforce.fieldforce.database.connection import DBConfig, DatabaseConnection


class ExhaustedPool:
    def __init__(self):
        self.attempts = 0

    def get_connection(self):
        self.attempts += 1
        raise PoolError("Failed getting connection; pool exhausted")


class RecoveringPool(ExhaustedPool):
    def get_connection(self):
        self.attempts += 1
        if self.attempts < 3:
            raise PoolError("Failed getting connection; pool exhausted")
        return "conn"


def _connection(monkeypatch, pool, *, pool_timeout: float) -> DatabaseConnection:
    conn = DatabaseConnection(
        DBConfig(host="db", port=3306, user="app", password="pw", database="fieldforce", pool_timeout=pool_timeout)
    )
    monkeypatch.setattr(conn, "_create_pool", lambda: pool)
    monkeypatch.setattr(conn, "_retry_interval", 0.01)
    return conn


def test_exhausted_pool_raises_overloaded_after_timeout(monkeypatch):
    pool = ExhaustedPool()
    conn = _connection(monkeypatch, pool, pool_timeout=0.05)

    with pytest.raises(Overloaded) as exc:
        conn.connect()

    assert exc.value.status_code == 503
    assert exc.value.message == "Service overloaded"
    assert pool.attempts > 1


def test_connection_freed_before_timeout_is_returned(monkeypatch):
    pool = RecoveringPool()
    conn = _connection(monkeypatch, pool, pool_timeout=5)

    assert conn.connect() == "conn"
    assert pool.attempts == 3


def test_pool_is_created_once(monkeypatch):
    created = []
    conn = _connection(monkeypatch, RecoveringPool(), pool_timeout=5)
    monkeypatch.setattr(conn, "_create_pool", lambda: created.append(1) or RecoveringPool())

    conn._get_pool()
    conn._get_pool()

    assert created == [1]
