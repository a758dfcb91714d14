"""Repositories mapping API operations onto the relational store."""

from .doctors import DoctorRepository
from .holidays import HolidayRepository
from .schedule import doctors_with_holidays
from .site_blocks import SiteBlockRepository
from .users import UserRepository

__all__ = [
    "DoctorRepository",
    "HolidayRepository",
    "SiteBlockRepository",
    "UserRepository",
    "doctors_with_holidays",
]
