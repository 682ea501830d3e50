"""Selection engine for checkin_selector."""

from .selector import AttendanceSelector, Selection, months_before
from .stores import (
    AttendanceStore,
    InMemoryAttendanceStore,
    InMemoryOccupancy,
    OccupancyService,
)

__all__ = [
    "AttendanceSelector",
    "Selection",
    "months_before",
    "AttendanceStore",
    "OccupancyService",
    "InMemoryAttendanceStore",
    "InMemoryOccupancy",
]
