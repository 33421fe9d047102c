from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_non_empty, require_secret
from ..core.constants import DEFAULT_PAID_LEAVE_DAYS, DEFAULT_SALARY
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What a successful login hands back to the client."""

    token: str
    user: User

    def to_json(self) -> dict:
        return {"token": self.token, "user": _login_user_json(self.user)}


def _login_user_json(user: User) -> dict:
    return {"id": user.user_id, "userName": user.user_name, "email": user.email}


class AuthService:
    """Use cases: register an account, log in, resolve a token to a user."""

    def __init__(self, users: UserRepository, tokens: TokenIssuer):
        self._users = users
        self._tokens = tokens

    def register(self, *, email: str, user_name: str, password: str) -> int:
        email = require_email(email, "email")
        user_name = require_non_empty(user_name, "userName")
        password = require_secret(password, "password")

        if self._users.get_by_email(email):
            raise ValidationError("既にこのメールアドレスは使用されています")

        user_id = self._users.create_user(
            email=email,
            user_name=user_name,
            password_hash=generate_password_hash(password),
            role=Role.STAFF,
            salary=DEFAULT_SALARY,
            paid_leave_total=DEFAULT_PAID_LEAVE_DAYS,
            paid_leave_remaining=DEFAULT_PAID_LEAVE_DAYS,
        )
        logger.info("registered user %s", user_id)
        return user_id

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email(require_email(email, "email"))
        if not user:
            raise NotFoundError("ユーザーが見つかりません")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("wrong password for user %s", user.user_id)
            raise AuthenticationError("パスワードが間違っています")

        return SessionUser(token=self._tokens.issue(user.user_id), user=user)

    def identify(self, token: str | None) -> int:
        """Turn a bearer token into the acting user id.

        Token problems raise AuthenticationError subclasses; a valid token that
        carries no usable identity raises AuthorizationError.
        """

        claims = self._tokens.verify(token)
        if claims.user_id is None:
            raise AuthorizationError("認証エラー：ユーザー情報が取得できません")
        return claims.user_id

    def require_role(self, user_id: int, role: Role) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise AuthorizationError("認証エラー：ユーザー情報が取得できません")
        if user.role != role:
            logger.warning("user %s denied: role %s required", user_id, role.value)
            raise AuthorizationError("この操作を行う権限がありません")
        return user


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    def get_profile(self, user_id: int) -> dict:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("ユーザーが見つかりません")
        return user.to_public_json()
