from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_clock_in(
        self,
        *,
        user_id: int,
        work_date: date,
        clock_in: datetime,
        notes: Optional[str] = None,
    ) -> int:
        """Insert the day's record; raise ValidationError if (user, date) already exists."""

        raise NotImplementedError

    def update_clock_out(
        self,
        *,
        attendance_id: int,
        clock_out: datetime,
        no_break: bool,
    ) -> bool:
        """Set clock-out once; returns False if the record is missing or already clocked out."""

        raise NotImplementedError
