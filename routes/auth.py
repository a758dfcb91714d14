"""Authentication blueprint providing login and register endpoints."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from auth.guard import admin_required
from auth.tokens import issue_token
from errors import AuthError, ValidationError
from extensions import limiter
from models import db
from models.user import USER_ROLES, User, hash_password
from repositories.users import UserRepository
from utils.request_validation import is_blank, parse_json_request

DEFAULT_ROLE = "admin"
auth_bp = Blueprint("auth", __name__)


def _normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()


def _extract_role(raw_role: object) -> str:
    """Return a valid role, defaulting to admin when none was given."""
    if is_blank(raw_role):
        return DEFAULT_ROLE
    role = str(raw_role).strip().lower()
    if role not in USER_ROLES:
        raise ValidationError('role must be "admin" or "user".')
    return role


def create_account(payload: dict, *, email_required: bool) -> User:
    """Validate an account payload and persist the new user."""

    username = str(payload.get("username") or "").strip()
    password = str(payload.get("password") or "")
    email = _normalize_email(str(payload.get("email") or ""))

    if not username or not password:
        raise ValidationError("username & password are required.")
    if email_required and not email:
        raise ValidationError("email is required.")
    role = _extract_role(payload.get("role"))

    user = UserRepository(db.session).create(
        username=username,
        email=email or None,
        password_hash=hash_password(password),
        role=role,
    )
    current_app.logger.info("Created %s account %s", user.role, user.username)
    return user


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(lambda: current_app.config.get("LOGIN_RATE_LIMIT", "5 per 5 minutes"))
def login() -> tuple:
    """Authenticate a user and return a bearer token."""
    payload = parse_json_request(request, allow_empty=True)
    username = str(payload.get("username") or "").strip()
    password = str(payload.get("password") or "")

    if not username or not password:
        raise ValidationError("username & password required.")

    user = UserRepository(db.session).find_by_username(username)
    if user is None or not user.check_password(password):
        current_app.logger.info("Failed login for %s", username)
        raise AuthError("Invalid credentials.")

    return (
        jsonify({"token": issue_token(user), "user": user.to_dict()}),
        HTTPStatus.OK,
    )


@auth_bp.route("/register", methods=["POST"])
@admin_required
def register() -> tuple:
    """Register a new user; only admins may create accounts."""
    payload = parse_json_request(request)
    user = create_account(payload, email_required=True)
    return jsonify(user.to_dict()), HTTPStatus.CREATED
