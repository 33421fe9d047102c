from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import require_email, require_mapping, require_non_empty, require_secret
from ..core.constants import MAX_EMAIL_LENGTH, MAX_USER_NAME_LENGTH


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_json(cls, payload: Any) -> "LoginRequest":
        data = require_mapping(payload)
        return cls(
            email=require_email(data.get("email"), "email"),
            password=require_secret(data.get("password"), "password"),
        )


@dataclass(frozen=True)
class RegisterRequest:
    email: str
    user_name: str
    password: str

    @classmethod
    def from_json(cls, payload: Any) -> "RegisterRequest":
        data = require_mapping(payload)
        return cls(
            email=require_email(data.get("email"), "email", MAX_EMAIL_LENGTH),
            user_name=require_non_empty(data.get("userName"), "userName", MAX_USER_NAME_LENGTH),
            password=require_secret(data.get("password"), "password"),
        )
