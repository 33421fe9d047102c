from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import User
from .repository import UserRepository

_USER_COLUMNS = """
    user_id, email, user_name, password_hash, role, salary,
    paid_leave_total, paid_leave_remaining, created_at, updated_at
"""


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        email=row["email"],
        user_name=row["user_name"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        salary=int(row.get("salary") or 0),
        paid_leave_total=int(row.get("paid_leave_total") or 0),
        paid_leave_remaining=int(row.get("paid_leave_remaining") or 0),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(
        self,
        *,
        email: str,
        user_name: str,
        password_hash: str,
        role: Role,
        salary: int,
        paid_leave_total: int,
        paid_leave_remaining: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO users(email, user_name, password_hash, role, salary,
                                      paid_leave_total, paid_leave_remaining)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (email, user_name, password_hash, role.value, salary, paid_leave_total, paid_leave_remaining),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc):
                    raise ValidationError("既にこのメールアドレスは使用されています") from exc
                raise
            return int(cur.lastrowid)
