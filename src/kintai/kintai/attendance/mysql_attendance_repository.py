from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import mysql.connector

from ..core.exceptions import AuthorizationError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key, is_missing_reference
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        clock_in=r.get("clock_in"),
        clock_out=r.get("clock_out"),
        no_break=bool(r.get("no_break")),
        overtime_minutes=int(r.get("overtime_minutes") or 0),
        holiday_overtime_minutes=int(r.get("holiday_overtime_minutes") or 0),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, user_id, work_date, clock_in, clock_out, no_break,
                       overtime_minutes, holiday_overtime_minutes, notes, created_at, updated_at
                FROM attendance_records
                WHERE user_id=%s AND work_date=%s
                """,
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_clock_in(
        self,
        *,
        user_id: int,
        work_date: date,
        clock_in: datetime,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        user_id, work_date, clock_in, clock_out, no_break,
                        overtime_minutes, holiday_overtime_minutes, notes
                    )
                    VALUES(%s,%s,%s,NULL,0,0,0,%s)
                    """,
                    (int(user_id), work_date, clock_in, notes),
                )
            except mysql.connector.IntegrityError as exc:
                # uq_attendance_user_date lost a race with a concurrent clock-in
                if is_duplicate_key(exc):
                    raise ValidationError("本日は既に出勤済みです") from exc
                if is_missing_reference(exc):
                    # token outlived its user
                    raise AuthorizationError("認証エラー：ユーザー情報が取得できません") from exc
                raise
            return int(cur.lastrowid)

    def update_clock_out(
        self,
        *,
        attendance_id: int,
        clock_out: datetime,
        no_break: bool,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out=%s, no_break=%s
                WHERE attendance_id=%s AND clock_in IS NOT NULL AND clock_out IS NULL
                """,
                (clock_out, int(bool(no_break)), int(attendance_id)),
            )
            return cur.rowcount > 0
