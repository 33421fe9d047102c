from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_PAID_LEAVE_DAYS, DEFAULT_SALARY
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an employee account.

    Plain data object; no database access lives here.
    """

    user_id: int
    email: str
    user_name: str
    password_hash: str
    role: Role = Role.STAFF
    salary: int = DEFAULT_SALARY
    paid_leave_total: int = DEFAULT_PAID_LEAVE_DAYS
    paid_leave_remaining: int = DEFAULT_PAID_LEAVE_DAYS
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_public_json(self) -> dict:
        return {"id": self.user_id, "email": self.email, "userName": self.user_name}
