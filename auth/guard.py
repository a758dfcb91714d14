"""Request guard: authenticate the bearer token, then optionally require admin.

Token checks run through Flask-JWT-Extended. Its rejections (missing or
malformed header, bad or expired token, deleted user) are answered by the
loaders registered on ``extensions.jwt``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from flask_jwt_extended import get_current_user, verify_jwt_in_request

from errors import InsufficientPrivilege


@dataclass(frozen=True)
class Principal:
    """Resolved identity of an authenticated request."""

    id: int
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def authenticate() -> Principal:
    """Verify the request's token and resolve it to a live user."""

    verify_jwt_in_request()
    user = get_current_user()

    return Principal(id=user.id, username=user.username, role=user.role)


def authorize_admin(principal: Principal) -> Principal:
    if not principal.is_admin:
        raise InsufficientPrivilege()
    return principal


def auth_required(view):
    """Reject the request unless it carries a valid token for an existing user."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        authenticate()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """Like ``auth_required``, and the user must hold the admin role."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        authorize_admin(authenticate())
        return view(*args, **kwargs)

    return wrapper
