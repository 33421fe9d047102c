from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Callable

from flask import g, request

from ..core.enums import Role
from .tokens import bearer_token_from

if TYPE_CHECKING:
    from ..container import Container


def token_required(container: "Container") -> Callable:
    """Decorator factory: verify the bearer token and expose ``g.user_id``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token_from(request.headers.get("Authorization"))
            g.user_id = container.auth_service.identify(token)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(container: "Container") -> Callable:
    """Like token_required, and the resolved user must hold the admin role."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token_from(request.headers.get("Authorization"))
            g.user_id = container.auth_service.identify(token)
            g.user = container.auth_service.require_role(g.user_id, Role.ADMIN)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_user_id() -> int:
    return int(g.user_id)
