from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """A past check-in of a person into a group, location and schedule."""

    person_id: int
    group_type_id: int
    group_id: int
    location_id: Optional[int]
    schedule_id: Optional[int]
    start_date_time: datetime
