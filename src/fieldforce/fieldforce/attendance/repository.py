from __future__ import annotations

from datetime import date, time
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert_checkin(self, *, employee_id: int, work_date: date, login: time, status: AttendanceStatus) -> None:
        raise NotImplementedError

    def update_checkout(self, *, employee_id: int, work_date: date, logout: time) -> bool:
        """Returns False when there was no row for that day."""
        raise NotImplementedError
