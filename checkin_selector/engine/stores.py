"""Host collaborators consumed by the selector.

The host application owns attendance history and the live occupancy cache.
The selector only sees them through the two protocols below; the in-memory
implementations back the command line tool and the tests.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Protocol, Sequence

from ..models.attendance import AttendanceRecord


class AttendanceStore(Protocol):
    def find_recent_attendance(
        self, person_id: int, group_type_ids: Iterable[int], since: datetime
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class OccupancyService(Protocol):
    def current_occupancy(self, location_id: int) -> int:
        raise NotImplementedError


class InMemoryAttendanceStore:
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: List[AttendanceRecord] = list(records)

    def find_recent_attendance(
        self, person_id: int, group_type_ids: Iterable[int], since: datetime
    ) -> List[AttendanceRecord]:
        wanted = set(group_type_ids)
        return [
            r
            for r in self._records
            if r.person_id == person_id
            and r.group_type_id in wanted
            and r.start_date_time >= since
        ]


class InMemoryOccupancy:
    """Occupancy counts keyed by location id; unknown locations are empty."""

    def __init__(self, counts: Dict[int, int] | None = None):
        self._counts: Dict[int, int] = dict(counts or {})

    def set_count(self, location_id: int, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        self._counts[location_id] = count

    def current_occupancy(self, location_id: int) -> int:
        return self._counts.get(location_id, 0)
