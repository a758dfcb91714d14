"""Flask extension instances, bound to the app in ``create_app``."""

from flask import current_app, request
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate

from errors import (
    AuthError,
    InvalidCredential,
    MalformedCredential,
    MissingCredential,
    error_response,
)
from models import db
from repositories.users import UserRepository

migrate = Migrate()
jwt = JWTManager()
limiter = Limiter(key_func=get_remote_address)


def _reject(error: AuthError):
    return error_response(error.description, error.code)


def _authorization_header() -> str:
    return request.headers.get(current_app.config["JWT_HEADER_NAME"], "")


def _header_is_malformed() -> bool:
    parts = _authorization_header().split()
    return len(parts) != 2 or parts[0] != current_app.config["JWT_HEADER_TYPE"]


@jwt.user_lookup_loader
def _load_user(_jwt_header, jwt_data):
    subject = str(jwt_data.get("sub", ""))
    if not subject.isdigit():
        return None
    return UserRepository(db.session).get(int(subject))


@jwt.unauthorized_loader
def _unauthorized(reason: str):
    # No usable "Bearer <token>" value in the header.
    if not _authorization_header().strip():
        return _reject(MissingCredential())
    return _reject(MalformedCredential())


@jwt.invalid_token_loader
def _invalid_token(reason: str):
    if _header_is_malformed():
        return _reject(MalformedCredential())
    current_app.logger.info("Rejected token: %s", reason)
    return _reject(InvalidCredential())


@jwt.expired_token_loader
def _expired_token(_jwt_header, _jwt_data):
    return _reject(InvalidCredential())


@jwt.user_lookup_error_loader
def _unknown_user(_jwt_header, jwt_data):
    current_app.logger.info("Token subject %s no longer exists", jwt_data.get("sub"))
    return _reject(InvalidCredential())
