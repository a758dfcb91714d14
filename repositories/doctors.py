"""Doctor repository, including the avatar image lifecycle."""

from __future__ import annotations

from flask import current_app
from sqlalchemy import select
from sqlalchemy.orm import Session
from werkzeug.datastructures import FileStorage

from errors import NotFoundError, ValidationError
from models.doctor import Doctor
from storage import ImageStore
from utils.request_validation import missing_fields
from utils.uploads import build_unique_filename

from .base import Repository
from .patch import apply_patch, collect_patch

# Request key -> model attribute
DOCTOR_FIELDS = {
    "firstname": "firstname",
    "lastname": "lastname",
    "email": "email",
    "phone": "phone",
    "agendaUrl": "agenda_url",
}
DOCTOR_CONVERTERS = {key: str for key in DOCTOR_FIELDS}


class DoctorRepository(Repository):
    def __init__(self, session: Session, image_store: ImageStore):
        super().__init__(session)
        self.image_store = image_store

    def list(self) -> list[Doctor]:
        query = select(Doctor).order_by(Doctor.lastname, Doctor.firstname, Doctor.id)
        return list(self.session.scalars(query))

    def get(self, doctor_id: int) -> Doctor:
        doctor = self._get_row(Doctor, doctor_id)
        if doctor is None:
            raise NotFoundError("Doctor not found.")
        return doctor

    def to_api(self, doctor: Doctor) -> dict:
        return doctor.to_dict(image_url=self.image_store.resolve(doctor.image))

    def create(self, data: dict, image: FileStorage | None = None) -> Doctor:
        missing = missing_fields(data, DOCTOR_FIELDS)
        if missing:
            raise ValidationError(
                "Missing required fields: {}.".format(", ".join(sorted(missing)))
            )

        reference = self._store_image(image)
        doctor = Doctor(**collect_patch(data, DOCTOR_FIELDS, DOCTOR_CONVERTERS), image=reference)
        self.session.add(doctor)
        try:
            self._commit()
        except Exception:
            self._discard_image(reference)
            raise
        return doctor

    def update(
        self, doctor_id: int, data: dict, image: FileStorage | None = None
    ) -> Doctor:
        """Merge supplied fields into the stored doctor.

        Fields missing from ``data`` keep their stored values. A new image
        replaces the previous one, whose resource is discarded once the row
        has been written; without a new image the old reference is kept.
        """

        doctor = self.get(doctor_id)
        previous_image = doctor.image

        patch = collect_patch(data, DOCTOR_FIELDS, DOCTOR_CONVERTERS)
        new_image = self._store_image(image)
        if new_image is not None:
            patch["image"] = new_image
        apply_patch(doctor, patch)

        try:
            self._commit()
        except Exception:
            self._discard_image(new_image)
            raise

        if new_image is not None and previous_image:
            self._discard_image(previous_image)
        return doctor

    def delete(self, doctor_id: int) -> bool:
        """Delete the doctor and its holidays.

        Returns whether the stored image (if any) was removed as well.
        """

        doctor = self.get(doctor_id)
        reference = doctor.image

        self.session.delete(doctor)
        self._commit()
        current_app.logger.info("Deleted doctor %s", doctor_id)

        return self._discard_image(reference)

    def _store_image(self, image: FileStorage | None) -> str | None:
        if image is None:
            return None
        return self.image_store.store(image, build_unique_filename(image.filename or ""))

    def _discard_image(self, reference: str | None) -> bool:
        """Best-effort removal; failures are logged, never raised."""

        if not reference:
            return True
        try:
            self.image_store.discard(reference)
        except (OSError, ValueError):
            current_app.logger.warning(
                "Could not remove stored image %s", reference[:80], exc_info=True
            )
            return False
        return True
