"""Load and validate workflow action definitions from YAML files."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from checkin_selector.actions import ActionComponent, build_actions


@dataclass
class ActionDefinition:
    """Data representation of a configured workflow action."""

    name: str
    order: int = 0
    attributes: Dict[str, Any] = field(default_factory=dict)


def _validate_action(index: int, data: Dict[str, Any]) -> ActionDefinition:
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Action {index}: name is required")

    order = data.get("order", index)
    if not isinstance(order, int) or isinstance(order, bool):
        raise ValueError(f"Action {index}: order must be an integer")

    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise ValueError(f"Action {index}: attributes must be a mapping if provided")

    return ActionDefinition(name=name.strip(), order=order, attributes=attributes)


def load_actions(path: str) -> List[ActionDefinition]:
    """Parse a YAML file into :class:`ActionDefinition` objects."""
    with open(path, "r", encoding="utf8") as handle:
        data = yaml.safe_load(handle)

    if not isinstance(data, list):
        raise ValueError("Action file must contain a list of action definitions")

    actions: List[ActionDefinition] = []
    for idx, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ValueError(
                f"Action {idx}: expected mapping but found {type(item).__name__}"
            )
        actions.append(_validate_action(idx, item))

    return actions


def load_action_objects(path: str) -> List[ActionComponent]:
    """Load action definitions from ``path`` and build action objects."""
    return build_actions(load_actions(path))
