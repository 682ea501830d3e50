from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checkin_selector.engine.selector import AttendanceSelector

from .base import ActionContext, ActionResult, CheckInActionComponent, as_boolean


@dataclass
class SelectByMultipleAttended(CheckInActionComponent):
    """Select multiple services this person last checked into."""

    slug = "select_by_multiple_attended"

    attribute_definitions = {
        "RoomBalanceByGroup": (
            "Select the group with the least number of current people. "
            "Best for groups having a 1:1 ratio with locations.",
            False,
        ),
        "RoomBalanceByLocation": (
            "Select the location with the least number of current people. "
            "Best for groups having 1 to many ratio with locations.",
            False,
        ),
    }

    def execute(self, entity: Any, context: ActionContext) -> ActionResult:
        balance_by_group = as_boolean(self.get_attribute_value("RoomBalanceByGroup"))
        balance_by_location = as_boolean(
            self.get_attribute_value("RoomBalanceByLocation")
        )
        state, errors = self.get_check_in_state(entity)
        if state is None:
            return ActionResult(success=False, error_messages=errors)

        selector = AttendanceSelector(context.attendance_store, context.occupancy)
        selections = selector.select(
            state.selected_people(),
            balance_by_group=balance_by_group,
            balance_by_location=balance_by_location,
            today=context.today,
        )
        return ActionResult(success=True, error_messages=errors, selections=selections)
