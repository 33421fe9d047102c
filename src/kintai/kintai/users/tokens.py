"""Bearer token issuing and verification.

Tokens are itsdangerous signed payloads carrying the user id; the signature
timestamp gives the expiry, so no clock value is stored in the payload.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_TTL_SECONDS, TOKEN_SALT
from ..core.exceptions import InvalidTokenError, MissingTokenError, TokenExpiredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    user_id: Optional[int]


class TokenIssuer:
    def __init__(self, secret: str, *, ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS):
        self._serializer = URLSafeTimedSerializer(secret, salt=TOKEN_SALT)
        self._ttl_seconds = int(ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, user_id: int) -> str:
        return self._serializer.dumps({"id": int(user_id)})

    def verify(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise MissingTokenError("トークンがありません")
        try:
            payload = self._serializer.loads(token, max_age=self._ttl_seconds)
        except SignatureExpired:
            logger.warning("rejected expired token")
            raise TokenExpiredError("トークンが期限切れです。再ログインしてください。")
        except BadSignature:
            logger.warning("rejected malformed token")
            raise InvalidTokenError("認証に失敗しました: 無効なトークン")
        return TokenClaims(user_id=_user_id_from(payload))


def _user_id_from(payload: Any) -> Optional[int]:
    if not isinstance(payload, dict):
        return None
    raw = payload.get("id")
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None
    return raw


def bearer_token_from(header_value: Optional[str]) -> Optional[str]:
    """Extract ``<token>`` from an ``Authorization: Bearer <token>`` header."""

    if not header_value:
        return None
    scheme, _, token = header_value.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None
