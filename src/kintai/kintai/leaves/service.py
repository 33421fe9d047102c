from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_APPROVER_EMAIL
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import LeaveRequest, LeaveRequestAdminRow
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave requests: staff submit, admins approve or reject.

    ``pending`` is the only non-terminal state; a decided request is never
    touched again. The decision itself is a compare-and-swap on the stored
    status so two admins cannot both win.
    """

    def __init__(self, leaves: LeaveRepository, *, approver_email: str = DEFAULT_APPROVER_EMAIL):
        self._leaves = leaves
        self._approver_email = approver_email

    def submit(self, *, user_id: int, leave_date: Optional[date], leave_type: str, reason: str) -> int:
        if not isinstance(leave_date, date):
            raise ValidationError("すべての項目を入力してください")
        leave_type = require_non_empty(leave_type, "leaveType")
        reason = require_non_empty(reason, "reason")

        request_id = self._leaves.create(
            user_id=int(user_id),
            leave_date=leave_date,
            leave_type=leave_type,
            reason=reason,
            approver_email=self._approver_email,
        )
        logger.info("user %s submitted leave request %s for %s", user_id, request_id, leave_date.isoformat())
        return request_id

    def list_own(self, *, user_id: int) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_user(int(user_id))

    def list_all(self, *, current_role: Role) -> Sequence[LeaveRequestAdminRow]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("この操作を行う権限がありません")
        return self._leaves.list_all_with_users()

    def update_status(
        self,
        *,
        current_role: Role,
        request_id: int,
        status: LeaveStatus | str,
        require_match: bool = True,
    ) -> Optional[LeaveRequest]:
        """Decide a pending request.

        With ``require_match`` a missing id raises NotFoundError; without it
        the call is a no-op that returns None.
        """

        if current_role != Role.ADMIN:
            raise AuthorizationError("この操作を行う権限がありません")
        decision = LeaveStatus.parse_decision(status.value if isinstance(status, LeaveStatus) else status)

        current = self._leaves.get(int(request_id))
        if current is None:
            if require_match:
                raise NotFoundError("該当の申請が見つかりません")
            logger.info("leave request %s not found, nothing to update", request_id)
            return None
        if current.status.is_terminal:
            raise ValidationError(f"この申請は既に{current.status.label}されています")

        if not self._leaves.decide(request_id=int(request_id), status=decision):
            latest = self._leaves.get(int(request_id))
            label = latest.status.label if latest else decision.label
            raise ValidationError(f"この申請は既に{label}されています")

        logger.info("leave request %s moved to %s", request_id, decision.value)
        return self._leaves.get(int(request_id))
