from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import CLOCK_IN_NOTE
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import AttendanceStatusView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock-in / clock-out ledger.

    A user has at most one record per work date. Clock-in creates it with no
    clock-out; clock-out fills clock-out exactly once. Each write is a single
    repository call running in its own transaction.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_status(self, user_id: int, *, work_date: Optional[date] = None) -> AttendanceStatusView:
        work_date = work_date or today_local()
        record = self._attendance.get_for_user_and_date(int(user_id), work_date)
        return AttendanceStatusView.of(record)

    def clock_in(self, user_id: int, clock_in_time: datetime, *, work_date: Optional[date] = None) -> int:
        work_date = work_date or today_local()

        existing = self._attendance.get_for_user_and_date(int(user_id), work_date)
        if existing:
            raise ValidationError("本日は既に出勤済みです")

        attendance_id = self._attendance.create_clock_in(
            user_id=int(user_id),
            work_date=work_date,
            clock_in=clock_in_time,
            notes=CLOCK_IN_NOTE,
        )
        logger.info("user %s clocked in for %s", user_id, work_date.isoformat())
        return attendance_id

    def clock_out(
        self,
        user_id: Optional[int],
        clock_out_time: datetime,
        *,
        no_break: bool = False,
        today: Optional[date] = None,
    ) -> None:
        if user_id is None:
            raise AuthorizationError("認証エラー：ユーザー情報が取得できません")

        today = today or today_local()
        record = self._attendance.get_for_user_and_date(int(user_id), today)
        if not record:
            raise NotFoundError("本日の出勤記録が見つかりません")
        if record.is_clocked_out:
            raise ValidationError("本日は既に退勤済みです")
        if record.clock_in is not None and clock_out_time < record.clock_in:
            raise ValidationError("退勤時刻は出勤時刻より後にしてください")

        if not self._attendance.update_clock_out(
            attendance_id=record.attendance_id,
            clock_out=clock_out_time,
            no_break=bool(no_break),
        ):
            # a concurrent clock-out got there first
            raise ValidationError("本日は既に退勤済みです")
        logger.info("user %s clocked out for %s", user_id, today.isoformat())
