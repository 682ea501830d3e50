"""Workflow actions for checkin_selector."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Type

from .base import (
    ActionComponent,
    ActionContext,
    ActionResult,
    CheckInActionComponent,
    as_boolean,
)
from .library import SelectByMultipleAttended

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from checkin_selector.io.action_loader import ActionDefinition


ACTION_REGISTRY: Dict[str, Type[ActionComponent]] = {
    SelectByMultipleAttended.slug: SelectByMultipleAttended,
}


def create_action(defn: "ActionDefinition") -> ActionComponent:
    """Instantiate a concrete :class:`ActionComponent` from an :class:`ActionDefinition`."""
    cls = ACTION_REGISTRY.get(defn.name)
    if cls is None:
        raise KeyError(f"Unknown action: {defn.name}")
    return cls(name=defn.name, order=defn.order, attributes=dict(defn.attributes))


def build_actions(definitions: List["ActionDefinition"]) -> List[ActionComponent]:
    """Build and sort action objects from definitions."""
    actions = [create_action(d) for d in definitions]
    return sorted(actions, key=lambda a: a.order)


__all__ = [
    "ACTION_REGISTRY",
    "ActionComponent",
    "ActionContext",
    "ActionResult",
    "CheckInActionComponent",
    "SelectByMultipleAttended",
    "as_boolean",
    "create_action",
    "build_actions",
]
