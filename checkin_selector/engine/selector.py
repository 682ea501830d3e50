from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Optional, Tuple

from .. import logger
from ..models.attendance import AttendanceRecord
from ..models.candidates import (
    CheckInGroup,
    CheckInGroupType,
    CheckInLocation,
    CheckInPerson,
    CheckInSchedule,
)
from .stores import AttendanceStore, OccupancyService

LOOKBACK_MONTHS = 6


def months_before(day: date, months: int) -> date:
    """Return ``day`` moved back by calendar months, clamping to the month end."""
    index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


@dataclass(frozen=True)
class Selection:
    """One attendance record applied to the candidate tree."""

    person_id: int
    group_type_id: int
    group_id: int
    location_id: int
    schedule_id: int
    rationale: str


class AttendanceSelector:
    """Select the services a person last attended.

    For every selected person the attendance history of the last six months is
    narrowed to the most recent day attended. Each record of that day is mapped
    back onto the candidate tree one level at a time:

    1. group type matching the record
    2. group: the only open one, else the one attended, optionally replaced by
       the least occupied group
    3. location: the only open one, else the one attended, optionally replaced
       by the least occupied location
    4. schedule: the only open one, else the one attended

    A record that cannot be mapped at some level is skipped. Records are applied
    in store order so a later record overwrites shared ancestors.
    """

    def __init__(self, attendance_store: AttendanceStore, occupancy: OccupancyService):
        self._attendance = attendance_store
        self._occupancy = occupancy

    def select(
        self,
        people: Iterable[CheckInPerson],
        balance_by_group: bool = False,
        balance_by_location: bool = False,
        today: date | None = None,
    ) -> List[Selection]:
        """Run the selection for every person handed over by the workflow."""
        today = today or date.today()
        since = datetime.combine(months_before(today, LOOKBACK_MONTHS), time.min)
        selections: List[Selection] = []
        for person in people:
            selections.extend(
                self.select_person(person, since, balance_by_group, balance_by_location)
            )
        logger.info("Applied %d attendance selection(s)", len(selections))
        return selections

    def select_person(
        self,
        person: CheckInPerson,
        since: datetime,
        balance_by_group: bool = False,
        balance_by_location: bool = False,
    ) -> List[Selection]:
        records = list(
            self._attendance.find_recent_attendance(
                person.person_id, person.group_type_ids(), since
            )
        )
        if not records:
            logger.debug("No attendance since %s for person %s", since, person.person_id)
            return []

        last_date = max(r.start_date_time for r in records).date()
        last_day_start = datetime.combine(last_date, time.min)
        selections: List[Selection] = []
        for record in records:
            if record.start_date_time < last_day_start:
                continue
            selection = self.apply_record(
                person, record, balance_by_group, balance_by_location
            )
            if selection is not None:
                selections.append(selection)
        return selections

    def apply_record(
        self,
        person: CheckInPerson,
        record: AttendanceRecord,
        balance_by_group: bool = False,
        balance_by_location: bool = False,
    ) -> Optional[Selection]:
        """Mark the chain matching ``record``; return ``None`` if it cannot be mapped."""
        # Abnormal age or grade can leave the attended group type out of the tree
        group_type = person.find_group_type(record.group_type_id)
        if group_type is None:
            logger.debug(
                "Person %s: group type %s not open", person.person_id, record.group_type_id
            )
            return None

        group, group_reason = self.resolve_group(group_type, record, balance_by_group)
        if group is None:
            return None

        location, location_reason = self.resolve_location(
            group, record, balance_by_location
        )
        if location is None:
            return None

        schedule, schedule_reason = self.resolve_schedule(location, record)
        if schedule is None:
            return None

        schedule.selected = True
        location.selected = True
        group.selected = True
        group_type.selected = True
        return Selection(
            person_id=person.person_id,
            group_type_id=group_type.group_type_id,
            group_id=group.group_id,
            location_id=location.location_id,
            schedule_id=schedule.schedule_id,
            rationale="; ".join([group_reason, location_reason, schedule_reason]),
        )

    def resolve_group(
        self, group_type: CheckInGroupType, record: AttendanceRecord, balance: bool
    ) -> Tuple[Optional[CheckInGroup], str]:
        if len(group_type.groups) == 1:
            group, reason = group_type.groups[0], "only open group"
        else:
            group, reason = group_type.find_group(record.group_id), "last attended group"

        if balance:
            # Balancing respects filtering
            candidates = [g for g in group_type.groups if not g.excluded_by_filter]
            if candidates:
                group = min(candidates, key=self.group_occupancy)
                reason = "least occupied group"
        return group, reason if group is not None else ""

    def resolve_location(
        self, group: CheckInGroup, record: AttendanceRecord, balance: bool
    ) -> Tuple[Optional[CheckInLocation], str]:
        if len(group.locations) == 1:
            location, reason = group.locations[0], "only open location"
        else:
            location = group.find_location(record.location_id)
            reason = "last attended location"

        if balance:
            candidates = [
                l
                for l in group.locations
                if not l.excluded_by_filter and l.has_active_schedule()
            ]
            if candidates:
                location = min(candidates, key=self.location_occupancy)
                reason = "least occupied location"
        return location, reason if location is not None else ""

    @staticmethod
    def resolve_schedule(
        location: CheckInLocation, record: AttendanceRecord
    ) -> Tuple[Optional[CheckInSchedule], str]:
        if len(location.schedules) == 1:
            return location.schedules[0], "only open schedule"
        schedule = location.find_schedule(record.schedule_id)
        return schedule, "last attended schedule" if schedule is not None else ""

    def location_occupancy(self, location: CheckInLocation) -> int:
        return self._occupancy.current_occupancy(location.location_id)

    def group_occupancy(self, group: CheckInGroup) -> int:
        """Return the number of people currently checked into all of a group's locations."""
        return sum(self.location_occupancy(l) for l in group.locations)
