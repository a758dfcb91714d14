"""User management blueprint (admin only)."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from auth.guard import admin_required
from models import db
from repositories.users import UserRepository
from utils.request_validation import parse_json_request

from .auth import create_account

users_bp = Blueprint("users", __name__)


@users_bp.route("", methods=["GET"])
@admin_required
def list_users():
    """Return all accounts ordered by username, without password hashes."""

    users = UserRepository(db.session).list_all()
    return jsonify(
        [{"id": user.id, "username": user.username, "role": user.role} for user in users]
    )


@users_bp.route("", methods=["POST"])
@admin_required
def create_user():
    payload = parse_json_request(request)
    user = create_account(payload, email_required=False)
    return jsonify(user.to_dict()), HTTPStatus.CREATED
