from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..common.validators import require_date, require_mapping, require_non_empty
from ..core.constants import MAX_LEAVE_TYPE_LENGTH, MAX_REASON_LENGTH
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveSubmitRequest:
    leave_date: date
    leave_type: str
    reason: str

    @classmethod
    def from_json(cls, payload: Any) -> "LeaveSubmitRequest":
        data = require_mapping(payload)
        return cls(
            leave_date=require_date(data.get("leaveDate"), "leaveDate"),
            leave_type=require_non_empty(data.get("leaveType"), "leaveType", MAX_LEAVE_TYPE_LENGTH),
            reason=require_non_empty(data.get("reason"), "reason", MAX_REASON_LENGTH),
        )


@dataclass(frozen=True)
class LeaveDecisionRequest:
    status: LeaveStatus

    @classmethod
    def from_json(cls, payload: Any) -> "LeaveDecisionRequest":
        data = require_mapping(payload)
        return cls(status=LeaveStatus.parse_decision(data.get("status")))
