"""Bearer token issuance and verification.

Tokens are HS256 JWTs produced by Flask-JWT-Extended. They carry the user's
id as ``sub`` plus ``username``, ``email`` and ``role``, and expire after
``JWT_ACCESS_TOKEN_EXPIRES`` (8 hours). There is no revocation list.
"""

from __future__ import annotations

from datetime import timedelta

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from errors import InvalidToken
from models.user import User


def issue_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Create a signed access token for ``user``."""

    claims = {
        "username": user.username,
        "email": user.email,
        "role": user.role,
    }
    return create_access_token(
        identity=str(user.id),
        additional_claims=claims,
        expires_delta=expires_delta,
    )


def verify_token(token: object) -> dict:
    """Return the decoded claims or raise ``InvalidToken``.

    Any malformed, tampered or expired token ends up as ``InvalidToken``;
    no other exception escapes for attacker-supplied input.
    """

    if not isinstance(token, str) or not token.strip():
        raise InvalidToken()
    try:
        payload = decode_token(token)
    except (PyJWTError, JWTExtendedException, ValueError, TypeError) as exc:
        raise InvalidToken() from exc

    if payload.get("type") != "access" or not str(payload.get("sub", "")).isdigit():
        raise InvalidToken()
    return payload
