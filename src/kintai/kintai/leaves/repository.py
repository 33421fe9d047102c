from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest, LeaveRequestAdminRow


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        user_id: int,
        leave_date: date,
        leave_type: str,
        reason: str,
        approver_email: Optional[str],
    ) -> int:
        """Insert a pending request and return its id."""

        raise NotImplementedError

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        """Requests owned by ``user_id`` in creation order."""

        raise NotImplementedError

    def list_all_with_users(self) -> Sequence[LeaveRequestAdminRow]:
        """Every request joined with its owner, newest leave date first."""

        raise NotImplementedError

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        """Move a pending request to ``status``.

        Compare-and-swap: returns False when the request is missing or no
        longer pending.
        """

        raise NotImplementedError
