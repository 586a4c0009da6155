from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, json_rows
from .model import CreateEmployeeRequest
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM employees ORDER BY id DESC")
            return json_rows(fetchall(cur))

    def create(self, req: CreateEmployeeRequest, *, photo: Optional[str], resume: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees
                    (emp_id, user_id, name, designation, manager, dob, join_date, relieve_date, address, photo, resume)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    req.emp_id,
                    req.user_id,
                    req.name,
                    req.designation,
                    req.manager,
                    req.dob,
                    req.join_date,
                    req.relieve_date,
                    req.address,
                    photo,
                    resume,
                ),
            )
