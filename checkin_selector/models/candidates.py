from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


def _check_id(value: int, label: str) -> None:
    if value < 0:
        raise ValueError(f"{label} must be non-negative")


@dataclass(eq=False)
class CheckInSchedule:
    """A schedule a person may check into at a given location."""

    schedule_id: int
    is_check_in_active: bool = True
    excluded_by_filter: bool = False
    selected: bool = False

    def __post_init__(self) -> None:
        _check_id(self.schedule_id, "schedule_id")


@dataclass(eq=False)
class CheckInLocation:
    """A location open for a group, owning its candidate schedules."""

    location_id: int
    schedules: List[CheckInSchedule] = field(default_factory=list)
    excluded_by_filter: bool = False
    selected: bool = False

    def __post_init__(self) -> None:
        _check_id(self.location_id, "location_id")

    def find_schedule(self, schedule_id: Optional[int]) -> Optional[CheckInSchedule]:
        return next((s for s in self.schedules if s.schedule_id == schedule_id), None)

    def has_active_schedule(self) -> bool:
        """Return True if any schedule survived filtering and is open for check-in."""
        return any(
            not s.excluded_by_filter and s.is_check_in_active for s in self.schedules
        )


@dataclass(eq=False)
class CheckInGroup:
    """A group open for a group type, owning its candidate locations."""

    group_id: int
    locations: List[CheckInLocation] = field(default_factory=list)
    excluded_by_filter: bool = False
    selected: bool = False

    def __post_init__(self) -> None:
        _check_id(self.group_id, "group_id")

    def find_location(self, location_id: Optional[int]) -> Optional[CheckInLocation]:
        return next((l for l in self.locations if l.location_id == location_id), None)


@dataclass(eq=False)
class CheckInGroupType:
    """A group type the person is eligible for during this session."""

    group_type_id: int
    groups: List[CheckInGroup] = field(default_factory=list)
    selected: bool = False

    def __post_init__(self) -> None:
        _check_id(self.group_type_id, "group_type_id")

    def find_group(self, group_id: Optional[int]) -> Optional[CheckInGroup]:
        return next((g for g in self.groups if g.group_id == group_id), None)


SelectedChain = Tuple[CheckInGroupType, CheckInGroup, CheckInLocation, CheckInSchedule]


@dataclass(eq=False)
class CheckInPerson:
    """A family member taking part in the check-in session."""

    person_id: int
    name: str = ""
    selected: bool = True
    group_types: List[CheckInGroupType] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_id(self.person_id, "person_id")
        self.name = self.name.strip()

    def group_type_ids(self) -> List[int]:
        """Return the ids of every group type the person is eligible for."""
        return [gt.group_type_id for gt in self.group_types]

    def find_group_type(self, group_type_id: Optional[int]) -> Optional[CheckInGroupType]:
        return next(
            (gt for gt in self.group_types if gt.group_type_id == group_type_id), None
        )

    def selected_chains(self) -> Iterator[SelectedChain]:
        """Yield every fully selected group type/group/location/schedule path."""
        for group_type in self.group_types:
            if not group_type.selected:
                continue
            for group in group_type.groups:
                if not group.selected:
                    continue
                for location in group.locations:
                    if not location.selected:
                        continue
                    for schedule in location.schedules:
                        if schedule.selected:
                            yield group_type, group, location, schedule


@dataclass(eq=False)
class CheckInFamily:
    family_id: int
    selected: bool = True
    people: List[CheckInPerson] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_id(self.family_id, "family_id")


@dataclass
class CheckInState:
    """Snapshot of an in-progress check-in handed over by earlier workflow steps."""

    families: List[CheckInFamily] = field(default_factory=list)

    def selected_people(self) -> Iterator[CheckInPerson]:
        for family in self.families:
            if not family.selected:
                continue
            for person in family.people:
                if person.selected:
                    yield person
