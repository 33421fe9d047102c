from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.validators import require_bool, require_date, require_datetime, require_mapping


@dataclass(frozen=True)
class ClockInRequest:
    clock_in_time: datetime
    work_date: Optional[date] = None

    @classmethod
    def from_json(cls, payload: Any) -> "ClockInRequest":
        data = require_mapping(payload)
        raw_date = data.get("workDate")
        return cls(
            clock_in_time=require_datetime(data.get("clockInTime"), "clockInTime"),
            work_date=require_date(raw_date, "workDate") if raw_date else None,
        )


@dataclass(frozen=True)
class ClockOutRequest:
    clock_out_time: datetime
    no_break: bool = False

    @classmethod
    def from_json(cls, payload: Any) -> "ClockOutRequest":
        data = require_mapping(payload)
        raw_no_break = data.get("noBreak", False)
        return cls(
            clock_out_time=require_datetime(data.get("clockOutTime"), "clockOutTime"),
            no_break=require_bool(raw_no_break if raw_no_break is not None else False, "noBreak"),
        )
