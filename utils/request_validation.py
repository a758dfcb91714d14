"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from flask import Request

from errors import ValidationError

SQL_INTEGER_MAX = 2**63 - 1


def parse_json_request(
    req: Request,
    *,
    required_keys: Iterable[str] | None = None,
    allow_empty: bool = False,
) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise ValidationError("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise ValidationError("Request JSON body is required.")

    if not isinstance(data, dict):
        raise ValidationError("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise ValidationError("Request JSON body must not be empty.")

    if required_keys:
        missing = missing_fields(data, required_keys)
        if missing:
            raise ValidationError(
                "Missing required fields: {}.".format(", ".join(sorted(missing)))
            )

    return data


def parse_payload(req: Request) -> dict:
    """Return the body of a JSON or form-encoded (multipart) request."""

    if req.is_json:
        return parse_json_request(req, allow_empty=True)
    return req.form.to_dict()


def is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def missing_fields(data: dict, required_keys: Iterable[str]) -> list[str]:
    """Return the required keys whose values are absent or blank."""

    return [key for key in required_keys if is_blank(data.get(key))]


def parse_iso_date(value: object, field: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date or raise a 400 error."""

    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be an ISO 8601 date (YYYY-MM-DD).") from None


def parse_int(value: object, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer.")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be an integer.") from None
    if not fits_sql_integer(number):
        raise ValidationError(f"{field} is out of range.")
    return number


def fits_sql_integer(value: int) -> bool:
    """Whether ``value`` fits a signed 64-bit SQL ``INTEGER`` column."""

    return -SQL_INTEGER_MAX - 1 <= value <= SQL_INTEGER_MAX
