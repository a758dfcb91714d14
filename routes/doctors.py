"""Doctors blueprint: profile CRUD with avatar uploads."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from auth.guard import admin_required, auth_required
from models import db
from repositories.doctors import DoctorRepository
from repositories.schedule import doctors_with_holidays
from storage import get_image_store
from utils.request_validation import parse_payload
from utils.uploads import get_uploaded_image

doctors_bp = Blueprint("doctors", __name__)


def _repository() -> DoctorRepository:
    return DoctorRepository(db.session, get_image_store())


@doctors_bp.route("", methods=["GET"])
@auth_required
def list_doctors():
    repository = _repository()
    return jsonify([repository.to_api(doctor) for doctor in repository.list()])


@doctors_bp.route("/doctors-with-holidays", methods=["GET"])
@auth_required
def list_doctors_with_holidays():
    """Return every doctor with the holidays that have not ended yet."""

    repository = _repository()
    payload = []
    for doctor, holidays in doctors_with_holidays(db.session):
        item = repository.to_api(doctor)
        item["holidays"] = [holiday.to_dict(include_doctor=False) for holiday in holidays]
        payload.append(item)
    return jsonify(payload)


@doctors_bp.route("/<int:doctor_id>", methods=["GET"])
@auth_required
def get_doctor(doctor_id: int):
    repository = _repository()
    return jsonify(repository.to_api(repository.get(doctor_id)))


@doctors_bp.route("", methods=["POST"])
@admin_required
def create_doctor():
    """Create a doctor from multipart form data (optional ``image`` file) or JSON."""

    payload = parse_payload(request)
    image = get_uploaded_image(request.files)

    repository = _repository()
    doctor = repository.create(payload, image=image)
    return jsonify(repository.to_api(doctor)), HTTPStatus.CREATED


@doctors_bp.route("/<int:doctor_id>", methods=["PUT"])
@admin_required
def update_doctor(doctor_id: int):
    """Update the supplied fields only; other fields keep their stored values."""

    payload = parse_payload(request)
    image = get_uploaded_image(request.files)

    repository = _repository()
    doctor = repository.update(doctor_id, payload, image=image)
    return jsonify(repository.to_api(doctor))


@doctors_bp.route("/<int:doctor_id>", methods=["DELETE"])
@admin_required
def delete_doctor(doctor_id: int):
    image_removed = _repository().delete(doctor_id)
    return jsonify({"message": "Doctor deleted", "imageRemoved": image_removed})
