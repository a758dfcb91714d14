"""Doctors joined with their upcoming holidays."""

from __future__ import annotations

from datetime import UTC, date, datetime

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from models.doctor import Doctor
from models.holiday import Holiday


def utc_today() -> date:
    return datetime.now(UTC).date()


def doctors_with_holidays(
    session: Session, today: date | None = None
) -> list[tuple[Doctor, list[Holiday]]]:
    """Return every doctor paired with holidays ending strictly after ``today``.

    The holiday filter lives in the join condition of a left outer join, so a
    doctor without upcoming holidays still yields exactly one row (with a null
    holiday) and ends up with an empty list. Holidays are ordered by start date.
    """

    today = today or utc_today()
    query = (
        select(Doctor, Holiday)
        .outerjoin(
            Holiday,
            and_(Holiday.doctor_id == Doctor.id, Holiday.end_date > today),
        )
        .order_by(Doctor.lastname, Doctor.firstname, Doctor.id, Holiday.start_date, Holiday.id)
    )

    grouped: dict[int, tuple[Doctor, list[Holiday]]] = {}
    for doctor, holiday in session.execute(query):
        _, holidays = grouped.setdefault(doctor.id, (doctor, []))
        if holiday is not None:
            holidays.append(holiday)
    return list(grouped.values())
