from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def iso_or_none(value: Optional[date | datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None
