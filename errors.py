"""Error taxonomy shared by the guard, repositories and routes.

Every error is a Werkzeug ``HTTPException`` so the JSON error handler
registered in ``app.create_app`` renders it with the right status code.
"""

from __future__ import annotations

import uuid

from flask import g, jsonify
from werkzeug.exceptions import (
    BadRequest,
    Conflict,
    Forbidden,
    InternalServerError,
    NotFound,
    Unauthorized,
)


class ValidationError(BadRequest):
    """Missing or invalid input."""


class AuthError(Unauthorized):
    """The request could not be authenticated."""

    description = "Authentication required."


class MissingCredential(AuthError):
    description = "Missing Authorization header."


class MalformedCredential(AuthError):
    description = "Malformed Authorization header."


class InvalidCredential(AuthError):
    description = "Invalid or expired token."


class InvalidToken(InvalidCredential):
    """Raised by the token service for any token that does not verify."""


class PrivilegeError(Forbidden):
    """Authenticated, but the role does not allow the operation."""


class InsufficientPrivilege(PrivilegeError):
    description = "Admin privileges required."


class NotFoundError(NotFound):
    """The requested entity does not exist."""


class ConflictError(Conflict):
    """A uniqueness constraint would be violated."""


class DuplicateCredential(ConflictError):
    description = "Username or email already exists."


class DuplicateEntity(ConflictError):
    description = "Entity already exists."


class StoreError(InternalServerError):
    """Unexpected persistence failure."""

    description = "Database error."


def error_response(message: str, status_code: int):
    """JSON error body carrying the request id, as every failed request returns."""

    request_id = g.get("request_id") or str(uuid.uuid4())
    response = jsonify({"error": message, "request_id": request_id})
    response.status_code = status_code
    response.headers.setdefault("X-Request-ID", request_id)
    return response
