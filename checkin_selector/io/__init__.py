"""Input/output helpers for :mod:`checkin_selector`."""

from .action_loader import ActionDefinition, load_action_objects, load_actions
from .attendance_loader import load_attendance
from .occupancy_loader import load_occupancy
from .state_loader import load_check_in_state

__all__ = [
    "load_check_in_state",
    "load_attendance",
    "load_occupancy",
    "load_action_objects",
    "load_actions",
    "ActionDefinition",
]
