"""Blueprints for the editable welcome and urgency HTML blocks."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from auth.guard import admin_required, auth_required
from errors import ValidationError
from models import db
from models.site_block import SiteBlockMixin, Urgency, Welcome
from repositories.site_blocks import SiteBlockRepository
from utils.request_validation import parse_json_request


def build_site_block_blueprint(name: str, model: type[SiteBlockMixin]) -> Blueprint:
    """Create a blueprint exposing GET (any user) and PUT (admin) for one block."""

    blueprint = Blueprint(name, __name__)

    @blueprint.route("", methods=["GET"])
    @auth_required
    def get_block():
        block = SiteBlockRepository(db.session, model).get()
        return jsonify({"html": block.html})

    @blueprint.route("", methods=["PUT"])
    @admin_required
    def put_block():
        """Replace the whole block, e.g. ``{"html": "<p>...</p>"}``."""

        payload = parse_json_request(request, allow_empty=True)
        html = payload.get("html")
        if not isinstance(html, str):
            raise ValidationError("html field required.")

        block = SiteBlockRepository(db.session, model).upsert(html)
        return jsonify(block.to_dict())

    return blueprint


welcome_bp = build_site_block_blueprint("welcome", Welcome)
urgency_bp = build_site_block_blueprint("urgency", Urgency)
