from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import LeaveStatus
from ..core.exceptions import AuthorizationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_missing_reference
from .model import LeaveRequest, LeaveRequestAdminRow
from .repository import LeaveRepository

_LEAVE_COLUMNS = """
    lr.request_id, lr.user_id, lr.leave_date, lr.leave_type, lr.reason,
    lr.status, lr.approver_email, lr.created_at, lr.updated_at
"""


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        user_id=int(r["user_id"]),
        leave_date=r["leave_date"],
        leave_type=r["leave_type"],
        reason=r["reason"],
        status=LeaveStatus(r["status"]),
        approver_email=r.get("approver_email"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        user_id: int,
        leave_date: date,
        leave_type: str,
        reason: str,
        approver_email: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO leave_requests(user_id, leave_date, leave_type, reason, status, approver_email)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (int(user_id), leave_date, leave_type, reason, LeaveStatus.PENDING.value, approver_email),
                )
            except mysql.connector.IntegrityError as exc:
                if is_missing_reference(exc):
                    raise AuthorizationError("認証エラー：ユーザー情報が取得できません") from exc
                raise
            return int(cur.lastrowid)

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_LEAVE_COLUMNS} FROM leave_requests lr WHERE lr.request_id=%s",
                (int(request_id),),
            )
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_LEAVE_COLUMNS}
                FROM leave_requests lr
                WHERE lr.user_id=%s
                ORDER BY lr.created_at ASC, lr.request_id ASC
                """,
                (int(user_id),),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def list_all_with_users(self) -> Sequence[LeaveRequestAdminRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_LEAVE_COLUMNS}, u.user_name, u.email
                FROM leave_requests lr
                JOIN users u ON u.user_id = lr.user_id
                ORDER BY lr.leave_date DESC, lr.request_id DESC
                """
            )
            return [
                LeaveRequestAdminRow(request=_to_leave(r), user_name=r["user_name"], email=r["email"])
                for r in fetchall(cur)
            ]

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s
                WHERE request_id=%s AND status=%s
                """,
                (status.value, int(request_id), LeaveStatus.PENDING.value),
            )
            return cur.rowcount > 0
