from __future__ import annotations

from datetime import date, datetime

import pytest

from kintai.attendance.service import AttendanceService
from kintai.core.constants import CLOCK_IN_NOTE
from kintai.core.exceptions import AuthorizationError, NotFoundError, ValidationError

WORK_DAY = date(2024, 1, 1)


def test_status_without_record_is_not_clocked_in(attendance_repo):
    svc = AttendanceService(attendance_repo)

    view = svc.get_status(1, work_date=WORK_DAY)

    assert view.to_json() == {"isClockedIn": False, "isClockedOut": False}


def test_clock_in_then_out_moves_status(attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)

    svc.clock_in(1, fixed_now, work_date=WORK_DAY)
    assert svc.get_status(1, work_date=WORK_DAY).to_json() == {"isClockedIn": True, "isClockedOut": False}

    svc.clock_out(1, datetime(2024, 1, 1, 18, 0), no_break=True, today=WORK_DAY)
    assert svc.get_status(1, work_date=WORK_DAY).to_json() == {"isClockedIn": True, "isClockedOut": True}

    rec = attendance_repo.get_for_user_and_date(1, WORK_DAY)
    assert rec.no_break is True
    assert rec.notes == CLOCK_IN_NOTE
    assert rec.overtime_minutes == 0


def test_clock_in_twice_same_day_is_rejected(attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)
    svc.clock_in(1, fixed_now, work_date=WORK_DAY)

    with pytest.raises(ValidationError):
        svc.clock_in(1, fixed_now, work_date=WORK_DAY)

    assert len(attendance_repo.records()) == 1


def test_clock_in_for_other_day_or_user_is_independent(attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)

    svc.clock_in(1, fixed_now, work_date=WORK_DAY)
    svc.clock_in(1, fixed_now, work_date=date(2024, 1, 2))
    svc.clock_in(2, fixed_now, work_date=WORK_DAY)

    assert len(attendance_repo.records()) == 3


def test_clock_out_without_record_is_not_found(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(NotFoundError):
        svc.clock_out(1, datetime(2024, 1, 1, 18, 0), today=WORK_DAY)


def test_clock_out_without_identity_is_forbidden(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(AuthorizationError):
        svc.clock_out(None, datetime(2024, 1, 1, 18, 0), today=WORK_DAY)


def test_clock_out_is_applied_once(attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)
    svc.clock_in(1, fixed_now, work_date=WORK_DAY)
    svc.clock_out(1, datetime(2024, 1, 1, 18, 0), today=WORK_DAY)

    with pytest.raises(ValidationError):
        svc.clock_out(1, datetime(2024, 1, 1, 19, 0), today=WORK_DAY)

    assert attendance_repo.get_for_user_and_date(1, WORK_DAY).clock_out == datetime(2024, 1, 1, 18, 0)


def test_clock_out_before_clock_in_is_rejected(attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)
    svc.clock_in(1, fixed_now, work_date=WORK_DAY)

    with pytest.raises(ValidationError):
        svc.clock_out(1, datetime(2024, 1, 1, 8, 0), today=WORK_DAY)

    assert attendance_repo.get_for_user_and_date(1, WORK_DAY).clock_out is None
