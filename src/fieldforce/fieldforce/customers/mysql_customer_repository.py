from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, json_rows
from .model import CustomerRow
from .repository import CustomerRepository


class MySQLCustomerRepository(CustomerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_assigned(self, employee_id: Optional[Any], *, limit: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT * FROM customers WHERE (%s IS NULL OR assigned_to=%s) LIMIT %s",
                (employee_id, employee_id, int(limit)),
            )
            return json_rows(fetchall(cur))

    def set_assignment(self, customer_id: Any, employee_id: Optional[Any]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE customers SET assigned_to=%s WHERE id=%s", (employee_id, customer_id))
            return cur.rowcount > 0

    def insert_many(self, rows: Sequence[CustomerRow]) -> int:
        if not rows:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO customers(name, phone, address, assigned_to) VALUES(%s,%s,%s,%s)",
                [(r.name, r.phone, r.address, r.assigned_to) for r in rows],
            )
            return len(rows)
