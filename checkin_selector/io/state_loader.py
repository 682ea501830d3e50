"""Utilities for loading a :class:`~checkin_selector.models.candidates.CheckInState` from YAML files."""
from __future__ import annotations

from typing import Any, Dict, List

import yaml

from ..models.candidates import (
    CheckInFamily,
    CheckInGroup,
    CheckInGroupType,
    CheckInLocation,
    CheckInPerson,
    CheckInSchedule,
    CheckInState,
)


def _require_id(data: Dict[str, Any], where: str) -> int:
    value = data.get("id")
    if value is None:
        raise ValueError(f"{where}: 'id' is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: id must be an integer")
    if value < 0:
        raise ValueError(f"{where}: id must be non-negative")
    return value


def _flag(data: Dict[str, Any], key: str, default: bool, where: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{where}: {key} must be true or false")
    return value


def _children(data: Dict[str, Any], key: str, where: str) -> List[Dict[str, Any]]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"{where}: {key} must be a list")
    for idx, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise ValueError(
                f"{where}: {key}[{idx}] expected mapping but found {type(item).__name__}"
            )
    return items


def _parse_schedule(data: Dict[str, Any], where: str) -> CheckInSchedule:
    return CheckInSchedule(
        schedule_id=_require_id(data, where),
        is_check_in_active=_flag(data, "is_check_in_active", True, where),
        excluded_by_filter=_flag(data, "excluded_by_filter", False, where),
        selected=_flag(data, "selected", False, where),
    )


def _parse_location(data: Dict[str, Any], where: str) -> CheckInLocation:
    return CheckInLocation(
        location_id=_require_id(data, where),
        schedules=[
            _parse_schedule(item, f"{where} > schedule {idx}")
            for idx, item in enumerate(_children(data, "schedules", where), start=1)
        ],
        excluded_by_filter=_flag(data, "excluded_by_filter", False, where),
        selected=_flag(data, "selected", False, where),
    )


def _parse_group(data: Dict[str, Any], where: str) -> CheckInGroup:
    return CheckInGroup(
        group_id=_require_id(data, where),
        locations=[
            _parse_location(item, f"{where} > location {idx}")
            for idx, item in enumerate(_children(data, "locations", where), start=1)
        ],
        excluded_by_filter=_flag(data, "excluded_by_filter", False, where),
        selected=_flag(data, "selected", False, where),
    )


def _parse_group_type(data: Dict[str, Any], where: str) -> CheckInGroupType:
    return CheckInGroupType(
        group_type_id=_require_id(data, where),
        groups=[
            _parse_group(item, f"{where} > group {idx}")
            for idx, item in enumerate(_children(data, "groups", where), start=1)
        ],
        selected=_flag(data, "selected", False, where),
    )


def _parse_person(data: Dict[str, Any], where: str) -> CheckInPerson:
    name = data.get("name") or ""
    if not isinstance(name, str):
        raise ValueError(f"{where}: name must be a string")
    return CheckInPerson(
        person_id=_require_id(data, where),
        name=name,
        selected=_flag(data, "selected", True, where),
        group_types=[
            _parse_group_type(item, f"{where} > group type {idx}")
            for idx, item in enumerate(_children(data, "group_types", where), start=1)
        ],
    )


def _parse_family(data: Dict[str, Any], where: str) -> CheckInFamily:
    return CheckInFamily(
        family_id=_require_id(data, where),
        selected=_flag(data, "selected", True, where),
        people=[
            _parse_person(item, f"{where} > person {idx}")
            for idx, item in enumerate(_children(data, "people", where), start=1)
        ],
    )


def load_check_in_state(path: str) -> CheckInState:
    """Load a check-in state snapshot from a YAML file.

    The document is a mapping with a ``families`` list. Families hold
    ``people``, people hold ``group_types`` and so on down through
    ``groups``, ``locations`` and ``schedules``. Every node needs an integer
    ``id``; flags default to the values of the model classes.

    Raises
    ------
    ValueError
        If the document is not shaped as described. The message names the
        offending node, e.g. ``Family 1 > person 2 > group type 1: 'id' is required``.
    """
    with open(path, "r", encoding="utf8") as handle:
        data = yaml.safe_load(handle)

    if not isinstance(data, dict):
        raise ValueError("State file must contain a mapping with a 'families' list")

    families = data.get("families") or []
    if not isinstance(families, list):
        raise ValueError("State file: families must be a list")

    state = CheckInState()
    for idx, item in enumerate(families, start=1):
        if not isinstance(item, dict):
            raise ValueError(
                f"Family {idx}: expected mapping but found {type(item).__name__}"
            )
        state.families.append(_parse_family(item, f"Family {idx}"))
    return state
