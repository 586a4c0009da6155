from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One row per (employee, date); no row means the employee has not checked in."""

    employee_id: int
    work_date: date
    login: Optional[time]
    logout: Optional[time]
    status: AttendanceStatus

    @property
    def checked_out(self) -> bool:
        return self.logout is not None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "login": self.login.strftime("%H:%M:%S") if self.login else None,
            "logout": self.logout.strftime("%H:%M:%S") if self.logout else None,
            "status": self.status.value,
        }
