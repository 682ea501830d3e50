from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

from checkin_selector import logger
from checkin_selector.engine.selector import Selection
from checkin_selector.engine.stores import AttendanceStore, OccupancyService
from checkin_selector.models.candidates import CheckInState

TRUE_STRINGS = {"true", "t", "yes", "y", "1"}
MISSING_STATE_MESSAGE = "Check-in state could not be loaded."


def as_boolean(value: Any, default: bool = False) -> bool:
    """Interpret an attribute value as a boolean.

    ``None`` and blank strings give ``default``; any other string is true only
    if it is one of ``true``, ``t``, ``yes``, ``y`` or ``1``.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if not text:
        return default
    return text in TRUE_STRINGS


@dataclass
class ActionContext:
    """Request-scoped collaborators supplied by the host for one run."""

    attendance_store: AttendanceStore
    occupancy: OccupancyService
    today: Optional[date] = None


@dataclass
class ActionResult:
    success: bool
    error_messages: List[str] = field(default_factory=list)
    selections: List[Selection] = field(default_factory=list)


@dataclass
class ActionComponent(ABC):
    """Base class for all workflow actions."""

    name: str
    order: int = 0
    attributes: Dict[str, Any] = field(default_factory=dict)

    # attribute key -> (description, default)
    attribute_definitions: ClassVar[Dict[str, Tuple[str, Any]]] = {}

    def get_attribute_value(self, key: str) -> Any:
        """Return the configured value for ``key`` or its declared default."""
        if key in self.attributes:
            return self.attributes[key]
        if key in self.attribute_definitions:
            return self.attribute_definitions[key][1]
        raise KeyError(f"{self.name} has no attribute {key}")

    @abstractmethod
    def execute(self, entity: Any, context: ActionContext) -> ActionResult:
        """Run the action against the workflow entity."""


@dataclass
class CheckInActionComponent(ActionComponent):
    """Action operating on the check-in state carried by the workflow."""

    @staticmethod
    def get_check_in_state(entity: Any) -> Tuple[Optional[CheckInState], List[str]]:
        if isinstance(entity, CheckInState):
            return entity, []
        if isinstance(entity, Mapping):
            state = entity.get("check_in_state")
            if isinstance(state, CheckInState):
                return state, []
        logger.warning("No check-in state found on %r", type(entity).__name__)
        return None, [MISSING_STATE_MESSAGE]
