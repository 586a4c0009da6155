from __future__ import annotations

from datetime import date, time
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, date, login, logout, status
                FROM attendance
                WHERE employee_id=%s
                ORDER BY date DESC
                """,
                (employee_id,),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    employee_id=int(r["employee_id"]),
                    work_date=r["date"],
                    login=mysql_time(r.get("login")),
                    logout=mysql_time(r.get("logout")),
                    status=AttendanceStatus(r["status"]),
                )
                for r in rows
            ]

    def upsert_checkin(self, *, employee_id: int, work_date: date, login: time, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, date, login, status)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE login=VALUES(login), status=VALUES(status)
                """,
                (employee_id, work_date, login, status.value),
            )

    def update_checkout(self, *, employee_id: int, work_date: date, logout: time) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET logout=%s WHERE employee_id=%s AND date=%s",
                (logout, employee_id, work_date),
            )
            return cur.rowcount > 0
