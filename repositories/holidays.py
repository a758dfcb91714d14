"""Holiday repository."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from errors import NotFoundError, ValidationError
from models.doctor import Doctor
from models.holiday import Holiday
from utils.request_validation import missing_fields, parse_int, parse_iso_date

from .base import Repository
from .patch import apply_patch, collect_patch

HOLIDAY_FIELDS = {
    "doctorId": "doctor_id",
    "startDate": "start_date",
    "endDate": "end_date",
}

HOLIDAY_CONVERTERS = {
    "doctorId": lambda value: parse_int(value, "doctorId"),
    "startDate": lambda value: parse_iso_date(value, "startDate"),
    "endDate": lambda value: parse_iso_date(value, "endDate"),
}


class HolidayRepository(Repository):
    def list(self) -> list[Holiday]:
        query = (
            select(Holiday)
            .options(joinedload(Holiday.doctor))
            .order_by(Holiday.start_date.desc(), Holiday.id.desc())
        )
        return list(self.session.scalars(query))

    def get(self, holiday_id: int) -> Holiday:
        holiday = self._get_row(Holiday, holiday_id)
        if holiday is None:
            raise NotFoundError("Holiday not found.")
        return holiday

    def create(self, data: dict) -> Holiday:
        missing = missing_fields(data, HOLIDAY_FIELDS)
        if missing:
            raise ValidationError("doctorId, startDate and endDate are required.")

        patch = collect_patch(data, HOLIDAY_FIELDS, HOLIDAY_CONVERTERS)
        self._validate(patch["doctor_id"], patch["start_date"], patch["end_date"])

        holiday = Holiday(**patch)
        self.session.add(holiday)
        self._commit()
        return holiday

    def update(self, holiday_id: int, data: dict) -> Holiday:
        holiday = self.get(holiday_id)
        patch = collect_patch(data, HOLIDAY_FIELDS, HOLIDAY_CONVERTERS)
        # Validate the merged record before touching the tracked instance.
        self._validate(
            patch.get("doctor_id", holiday.doctor_id),
            patch.get("start_date", holiday.start_date),
            patch.get("end_date", holiday.end_date),
        )

        apply_patch(holiday, patch)
        self._commit()
        return holiday

    def delete(self, holiday_id: int) -> None:
        holiday = self.get(holiday_id)
        self.session.delete(holiday)
        self._commit()

    def _validate(self, doctor_id: int, start_date: date, end_date: date) -> None:
        if end_date < start_date:
            raise ValidationError("endDate must not be before startDate.")
        if self._get_row(Doctor, doctor_id) is None:
            raise ValidationError("doctorId does not reference an existing doctor.")
