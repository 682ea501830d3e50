import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checkin_selector.models.candidates import (
    CheckInFamily,
    CheckInGroup,
    CheckInGroupType,
    CheckInLocation,
    CheckInPerson,
    CheckInSchedule,
    CheckInState,
)


def test_negative_ids_rejected():
    with pytest.raises(ValueError):
        CheckInSchedule(schedule_id=-1)
    with pytest.raises(ValueError):
        CheckInPerson(person_id=-5)


def test_lookup_helpers_return_first_match_or_none():
    first = CheckInSchedule(1)
    duplicate = CheckInSchedule(1)
    location = CheckInLocation(10, schedules=[first, duplicate])
    assert location.find_schedule(1) is first
    assert location.find_schedule(None) is None

    group = CheckInGroup(5, locations=[location])
    assert group.find_location(10) is location
    assert group.find_location(11) is None

    group_type = CheckInGroupType(3, groups=[group])
    person = CheckInPerson(7, name="  Ada ", group_types=[group_type])
    assert person.name == "Ada"
    assert person.group_type_ids() == [3]
    assert person.find_group_type(3).find_group(5) is group


def test_has_active_schedule_ignores_filtered_and_closed():
    location = CheckInLocation(
        10,
        schedules=[
            CheckInSchedule(1, excluded_by_filter=True),
            CheckInSchedule(2, is_check_in_active=False),
        ],
    )
    assert not location.has_active_schedule()
    location.schedules.append(CheckInSchedule(3))
    assert location.has_active_schedule()


def test_selected_chains_require_every_level():
    schedule = CheckInSchedule(1, selected=True)
    location = CheckInLocation(10, schedules=[schedule], selected=True)
    group = CheckInGroup(5, locations=[location], selected=True)
    group_type = CheckInGroupType(3, groups=[group])
    person = CheckInPerson(7, group_types=[group_type])

    assert list(person.selected_chains()) == []
    group_type.selected = True
    assert list(person.selected_chains()) == [(group_type, group, location, schedule)]


def test_selected_people_skips_unselected_families_and_people():
    ada = CheckInPerson(1)
    ben = CheckInPerson(2, selected=False)
    cy = CheckInPerson(3)
    state = CheckInState(
        families=[
            CheckInFamily(1, people=[ada, ben]),
            CheckInFamily(2, selected=False, people=[cy]),
        ]
    )
    assert list(state.selected_people()) == [ada]
