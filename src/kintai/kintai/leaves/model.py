from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import iso_or_none
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    user_id: int
    leave_date: date
    leave_type: str
    reason: str
    status: LeaveStatus
    approver_email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_json(self) -> dict:
        return {
            "id": self.request_id,
            "leaveDate": iso_or_none(self.leave_date),
            "leaveType": self.leave_type,
            "reason": self.reason,
            "status": self.status.value,
            "statusLabel": self.status.label,
            "approverEmail": self.approver_email,
            "createdAt": iso_or_none(self.created_at),
            "updatedAt": iso_or_none(self.updated_at),
        }


@dataclass(frozen=True)
class LeaveRequestAdminRow:
    """Read-model for the admin list: a request joined with its owner."""

    request: LeaveRequest
    user_name: str
    email: str

    def to_json(self) -> dict:
        data = self.request.to_json()
        data.pop("approverEmail")
        data["userId"] = self.request.user_id
        data["userName"] = self.user_name
        data["email"] = self.email
        return data
