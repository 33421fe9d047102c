from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class Role(str, Enum):
    """Role used for authorization checks."""

    ADMIN = "admin"
    STAFF = "staff"


class LeaveStatus(str, Enum):
    """Leave request lifecycle: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        return _LEAVE_LABELS[self]

    @property
    def is_terminal(self) -> bool:
        return self is not LeaveStatus.PENDING

    @classmethod
    def parse_decision(cls, raw: object) -> "LeaveStatus":
        """Accept an admin decision as the English value or the Japanese label."""

        value = raw.strip() if isinstance(raw, str) else ""
        for status in (cls.APPROVED, cls.REJECTED):
            if value.lower() == status.value or value == status.label:
                return status
        raise ValidationError("無効なステータスです")


_LEAVE_LABELS = {
    LeaveStatus.PENDING: "申請中",
    LeaveStatus.APPROVED: "承認",
    LeaveStatus.REJECTED: "却下",
}
