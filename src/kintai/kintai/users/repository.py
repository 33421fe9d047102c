from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

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
        """Insert a user; raise ValidationError when the email is taken."""

        raise NotImplementedError
