import sys
from datetime import date, datetime
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checkin_selector.actions import (
    ActionContext,
    SelectByMultipleAttended,
    as_boolean,
    build_actions,
    create_action,
)
from checkin_selector.engine.stores import InMemoryAttendanceStore, InMemoryOccupancy
from checkin_selector.io.action_loader import ActionDefinition
from checkin_selector.models.attendance import AttendanceRecord
from checkin_selector.models.candidates import (
    CheckInFamily,
    CheckInGroup,
    CheckInGroupType,
    CheckInLocation,
    CheckInPerson,
    CheckInSchedule,
    CheckInState,
)


def make_state():
    gt = CheckInGroupType(
        100,
        groups=[
            CheckInGroup(1, locations=[CheckInLocation(10, schedules=[CheckInSchedule(90)])]),
            CheckInGroup(2, locations=[CheckInLocation(20, schedules=[CheckInSchedule(90)])]),
        ],
    )
    person = CheckInPerson(7, group_types=[gt])
    return CheckInState(families=[CheckInFamily(1, people=[person])]), gt


def make_context():
    record = AttendanceRecord(
        person_id=7,
        group_type_id=100,
        group_id=1,
        location_id=10,
        schedule_id=90,
        start_date_time=datetime(2024, 3, 3, 9),
    )
    return ActionContext(
        attendance_store=InMemoryAttendanceStore([record]),
        occupancy=InMemoryOccupancy({10: 6, 20: 1}),
        today=date(2024, 3, 10),
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("True", True),
        (" yes ", True),
        ("Y", True),
        ("1", True),
        ("false", False),
        ("maybe", False),
        (1, True),
        (0, False),
    ],
)
def test_as_boolean(value, expected):
    assert as_boolean(value) is expected


def test_as_boolean_blank_uses_default():
    assert as_boolean(None) is False
    assert as_boolean("", default=True) is True


def test_attributes_default_to_false():
    action = SelectByMultipleAttended(name="select_by_multiple_attended")
    assert action.get_attribute_value("RoomBalanceByGroup") is False
    assert action.get_attribute_value("RoomBalanceByLocation") is False
    with pytest.raises(KeyError):
        action.get_attribute_value("Unknown")


def test_execute_selects_last_attended_group():
    state, gt = make_state()
    action = SelectByMultipleAttended(name="select_by_multiple_attended")

    result = action.execute(state, make_context())

    assert result.success
    assert result.error_messages == []
    assert [s.group_id for s in result.selections] == [1]
    assert gt.groups[0].selected and not gt.groups[1].selected


def test_execute_reads_room_balance_attribute():
    state, gt = make_state()
    action = SelectByMultipleAttended(
        name="select_by_multiple_attended", attributes={"RoomBalanceByGroup": "True"}
    )

    result = action.execute({"check_in_state": state}, make_context())

    assert result.success
    assert gt.groups[1].selected and not gt.groups[0].selected


def test_execute_without_state_fails():
    action = SelectByMultipleAttended(name="select_by_multiple_attended")
    result = action.execute({"something": "else"}, make_context())
    assert not result.success
    assert result.error_messages == ["Check-in state could not be loaded."]
    assert result.selections == []


def test_registry_builds_sorted_actions():
    actions = build_actions(
        [
            ActionDefinition(name="select_by_multiple_attended", order=2),
            ActionDefinition(
                name="select_by_multiple_attended",
                order=1,
                attributes={"RoomBalanceByLocation": True},
            ),
        ]
    )
    assert [a.order for a in actions] == [1, 2]
    assert all(isinstance(a, SelectByMultipleAttended) for a in actions)
    assert actions[0].get_attribute_value("RoomBalanceByLocation") is True

    with pytest.raises(KeyError):
        create_action(ActionDefinition(name="select_by_age"))
