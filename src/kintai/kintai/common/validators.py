from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Any, field_name: str, max_length: Optional[int] = None) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name}を入力してください")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name}は{max_length}文字以内で入力してください")
    return value


def require_email(value: Any, field_name: str = "email", max_length: Optional[int] = None) -> str:
    email = require_non_empty(value, field_name, max_length)
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name}の形式が正しくありません")
    return email.lower()


def require_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    # 0/1 as sent by forms and some clients
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValidationError(f"{field_name}は true か false で指定してください")


def require_date(value: Any, field_name: str) -> date:
    raw = require_non_empty(value, field_name)
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name}は YYYY-MM-DD 形式で指定してください")


def require_datetime(value: Any, field_name: str) -> datetime:
    """Parse an ISO-8601 timestamp into naive server-local time.

    An explicit offset (or a trailing ``Z`` for UTC) is converted to local time
    first, so values sent from different zones stay comparable.
    """

    raw = require_non_empty(value, field_name)
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"{field_name}は ISO-8601 形式で指定してください")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.replace(tzinfo=None)


def require_mapping(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("リクエストボディが不正です")
    return payload


def require_secret(value: Any, field_name: str) -> str:
    """Like require_non_empty but keeps surrounding whitespace intact."""

    require_non_empty(value, field_name)
    return value
