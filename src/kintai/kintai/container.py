from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .settings import Settings
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.tokens import TokenIssuer


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository

    tokens: TokenIssuer
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    leave_service: LeaveService


def assemble(
    settings: Settings,
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    leaves_repo: LeaveRepository,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""

    tokens = TokenIssuer(settings.secret_key, ttl_seconds=settings.token_ttl_seconds)
    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        tokens=tokens,
        auth_service=AuthService(users_repo, tokens),
        user_service=UserService(users_repo),
        attendance_service=AttendanceService(attendance_repo),
        leave_service=LeaveService(leaves_repo, approver_email=settings.approver_email),
    )


def build_container(settings: Settings) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(settings.db_config))
    return assemble(
        settings,
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
    )
