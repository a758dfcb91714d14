"""Authentication: token service and request guard."""

from .guard import Principal, admin_required, auth_required, authenticate, authorize_admin
from .tokens import issue_token, verify_token

__all__ = [
    "Principal",
    "admin_required",
    "auth_required",
    "authenticate",
    "authorize_admin",
    "issue_token",
    "verify_token",
]
