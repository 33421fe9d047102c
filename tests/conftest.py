from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from kintai.attendance.model import AttendanceRecord
from kintai.container import Container, assemble
from kintai.core.enums import LeaveStatus, Role
from kintai.core.exceptions import ValidationError
from kintai.leaves.model import LeaveRequest, LeaveRequestAdminRow
from kintai.main import create_app
from kintai.settings import Settings
from kintai.users.model import User

ADMIN_EMAIL = "admin@company.com"
ADMIN_PASSWORD = "admin-pw"


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, email, user_name, password_hash, role, salary, paid_leave_total, paid_leave_remaining) -> int:
        if self.get_by_email(email):
            raise ValidationError("duplicate email")
        self._id += 1
        self._by_id[self._id] = User(
            user_id=self._id,
            email=email,
            user_name=user_name,
            password_hash=password_hash,
            role=role,
            salary=salary,
            paid_leave_total=paid_leave_total,
            paid_leave_remaining=paid_leave_remaining,
        )
        return self._id

    def add(self, *, email: str, password: str, role: Role = Role.STAFF, user_name: str = "User") -> User:
        user_id = self.create_user(
            email=email,
            user_name=user_name,
            password_hash=generate_password_hash(password),
            role=role,
            salary=0,
            paid_leave_total=20,
            paid_leave_remaining=20,
        )
        return self._by_id[user_id]


class InMemoryAttendance:
    def __init__(self):
        self._by_user_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_user_date.get((user_id, work_date))

    def create_clock_in(self, *, user_id: int, work_date: date, clock_in: datetime, notes=None) -> int:
        if (user_id, work_date) in self._by_user_date:
            raise ValidationError("duplicate (user, date)")
        self._id += 1
        self._by_user_date[(user_id, work_date)] = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            work_date=work_date,
            clock_in=clock_in,
            clock_out=None,
            notes=notes,
        )
        return self._id

    def update_clock_out(self, *, attendance_id: int, clock_out: datetime, no_break: bool) -> bool:
        for key, rec in self._by_user_date.items():
            if rec.attendance_id == attendance_id and rec.clock_out is None:
                self._by_user_date[key] = replace(rec, clock_out=clock_out, no_break=no_break)
                return True
        return False

    def records(self) -> list[AttendanceRecord]:
        return list(self._by_user_date.values())


class InMemoryLeaves:
    def __init__(self, users: InMemoryUsers):
        self._users = users
        self._by_id: dict[int, LeaveRequest] = {}
        self._id = 0
        self.decide_calls = 0

    def create(self, *, user_id, leave_date, leave_type, reason, approver_email) -> int:
        self._id += 1
        self._by_id[self._id] = LeaveRequest(
            request_id=self._id,
            user_id=user_id,
            leave_date=leave_date,
            leave_type=leave_type,
            reason=reason,
            status=LeaveStatus.PENDING,
            approver_email=approver_email,
            created_at=datetime(2024, 1, 1, 9, 0, self._id % 60),
        )
        return self._id

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        return self._by_id.get(request_id)

    def list_for_user(self, user_id: int):
        return [r for r in self._by_id.values() if r.user_id == user_id]

    def list_all_with_users(self):
        rows = sorted(self._by_id.values(), key=lambda r: (r.leave_date, r.request_id), reverse=True)
        out = []
        for r in rows:
            owner = self._users.get_by_id(r.user_id)
            out.append(LeaveRequestAdminRow(request=r, user_name=owner.user_name, email=owner.email))
        return out

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        self.decide_calls += 1
        req = self._by_id.get(request_id)
        if not req or req.status != LeaveStatus.PENDING:
            return False
        self._by_id[request_id] = replace(req, status=status)
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 9, 0, 0)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        secret_key="test-secret",
        db_config={"host": "localhost", "user": "root", "password": "", "database": "kintai_test"},
        testing=True,
        log_level="WARNING",
    )


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def leaves_repo(users_repo) -> InMemoryLeaves:
    return InMemoryLeaves(users_repo)


@pytest.fixture
def container(settings, users_repo, attendance_repo, leaves_repo) -> Container:
    return assemble(
        settings,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
    )


@pytest.fixture
def app(settings, container):
    return create_app(settings=settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(users_repo) -> User:
    return users_repo.add(email=ADMIN_EMAIL, password=ADMIN_PASSWORD, role=Role.ADMIN, user_name="Admin")


@pytest.fixture
def admin_headers(container, admin_user) -> dict:
    return {"Authorization": f"Bearer {container.tokens.issue(admin_user.user_id)}"}
