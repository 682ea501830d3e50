"""Data models for checkin_selector."""

from .attendance import AttendanceRecord
from .candidates import (
    CheckInFamily,
    CheckInGroup,
    CheckInGroupType,
    CheckInLocation,
    CheckInPerson,
    CheckInSchedule,
    CheckInState,
)

__all__ = [
    "AttendanceRecord",
    "CheckInFamily",
    "CheckInGroup",
    "CheckInGroupType",
    "CheckInLocation",
    "CheckInPerson",
    "CheckInSchedule",
    "CheckInState",
]
