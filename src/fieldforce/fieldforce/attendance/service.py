from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Daily check-in/check-out for the calling user.

    Check-in upserts today's row (a second check-in overwrites the login time).
    Check-out only touches an existing row; without one it is a silent no-op.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._attendance = attendance
        self._clock = clock or now_local

    def history(self, employee_id: int):
        return self._attendance.list_for_employee(employee_id)

    def check_in(self, employee_id: int, *, now: datetime | None = None) -> None:
        now = now or self._clock()
        self._attendance.upsert_checkin(
            employee_id=employee_id,
            work_date=now.date(),
            login=now.time().replace(microsecond=0),
            status=AttendanceStatus.PRESENT,
        )

    def check_out(self, employee_id: int, *, now: datetime | None = None) -> None:
        now = now or self._clock()
        updated = self._attendance.update_checkout(
            employee_id=employee_id,
            work_date=now.date(),
            logout=now.time().replace(microsecond=0),
        )
        if not updated:
            logger.info("check-out without check-in for employee %s on %s", employee_id, now.date())
