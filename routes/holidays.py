"""Holidays blueprint (admin only)."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from auth.guard import admin_required
from models import db
from repositories.holidays import HolidayRepository
from utils.request_validation import parse_json_request

holidays_bp = Blueprint("holidays", __name__)


@holidays_bp.route("", methods=["GET"])
@admin_required
def list_holidays():
    holidays = HolidayRepository(db.session).list()
    return jsonify([holiday.to_dict() for holiday in holidays])


@holidays_bp.route("/<int:holiday_id>", methods=["GET"])
@admin_required
def get_holiday(holiday_id: int):
    return jsonify(HolidayRepository(db.session).get(holiday_id).to_dict())


@holidays_bp.route("", methods=["POST"])
@admin_required
def create_holiday():
    payload = parse_json_request(request)
    holiday = HolidayRepository(db.session).create(payload)
    return jsonify(holiday.to_dict()), HTTPStatus.CREATED


@holidays_bp.route("/<int:holiday_id>", methods=["PUT"])
@admin_required
def update_holiday(holiday_id: int):
    payload = parse_json_request(request, allow_empty=True)
    holiday = HolidayRepository(db.session).update(holiday_id, payload)
    return jsonify(holiday.to_dict())


@holidays_bp.route("/<int:holiday_id>", methods=["DELETE"])
@admin_required
def delete_holiday(holiday_id: int):
    HolidayRepository(db.session).delete(holiday_id)
    return jsonify({"message": "Holiday deleted"})
