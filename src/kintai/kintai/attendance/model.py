from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per (user, work date)."""

    attendance_id: int
    user_id: int
    work_date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    no_break: bool = False
    overtime_minutes: int = 0
    holiday_overtime_minutes: int = 0
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_clocked_in(self) -> bool:
        return self.clock_in is not None

    @property
    def is_clocked_out(self) -> bool:
        return self.clock_out is not None


@dataclass(frozen=True)
class AttendanceStatusView:
    """Read-model answering "where is this user in today's workday"."""

    is_clocked_in: bool
    is_clocked_out: bool

    @classmethod
    def of(cls, record: Optional[AttendanceRecord]) -> "AttendanceStatusView":
        if record is None:
            return cls(is_clocked_in=False, is_clocked_out=False)
        return cls(is_clocked_in=record.is_clocked_in, is_clocked_out=record.is_clocked_out)

    def to_json(self) -> dict:
        return {"isClockedIn": self.is_clocked_in, "isClockedOut": self.is_clocked_out}
