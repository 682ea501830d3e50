"""Utilities for exporting check-in selections.

This module turns a :class:`~checkin_selector.models.candidates.CheckInState`
and the :class:`~checkin_selector.engine.selector.Selection` entries produced
for it into structures suitable for YAML or CSV output. Selected chains are
read back from the tree flags, so they reflect the final state after later
records overwrote earlier ones.
"""
from __future__ import annotations

import csv
from typing import Dict, List, Sequence

import yaml

from ..engine.selector import Selection
from ..models.candidates import CheckInState

CHAIN_FIELDS = ["person_id", "group_type_id", "group_id", "location_id", "schedule_id"]


def format_selected_chains(state: CheckInState) -> Dict[int, List[Dict[str, int]]]:
    """Return selected chains grouped by person.

    Returns
    -------
    dict[int, list[dict[str, int]]]
        Mapping of person id -> list of ``group_type``/``group``/``location``/``schedule`` ids.
        People without any selection are left out.
    """
    chains: Dict[int, List[Dict[str, int]]] = {}
    for family in state.families:
        for person in family.people:
            for group_type, group, location, schedule in person.selected_chains():
                chains.setdefault(person.person_id, []).append(
                    {
                        "group_type": group_type.group_type_id,
                        "group": group.group_id,
                        "location": location.location_id,
                        "schedule": schedule.schedule_id,
                    }
                )
    return chains


def export_yaml(
    state: CheckInState,
    selections: Sequence[Selection],
    selection_file: str,
    rationale_file: str,
) -> None:
    """Write selected chains and selection rationales to YAML files.

    Parameters
    ----------
    state:
        Check-in state after the selection actions ran.
    selections:
        Applied selections in the order they were made.
    selection_file:
        Path to write the selected chains YAML.
    rationale_file:
        Path to write the per-record rationale YAML.
    """
    rationales = [
        {
            "person": s.person_id,
            "group_type": s.group_type_id,
            "group": s.group_id,
            "location": s.location_id,
            "schedule": s.schedule_id,
            "rationale": s.rationale,
        }
        for s in selections
    ]
    with open(selection_file, "w", encoding="utf8") as handle:
        yaml.safe_dump(format_selected_chains(state), handle, sort_keys=True)
    with open(rationale_file, "w", encoding="utf8") as handle:
        yaml.safe_dump({"selections": rationales}, handle, sort_keys=False)


def export_csv(
    state: CheckInState,
    selections: Sequence[Selection],
    selection_file: str,
    rationale_file: str,
) -> None:
    """Write selected chains and selection rationales to CSV files.

    The selection CSV has one row per selected chain. The rationale CSV has
    the same columns plus ``rationale``, one row per applied selection.
    """
    chains = format_selected_chains(state)
    with open(selection_file, "w", newline="", encoding="utf8") as handle:
        writer = csv.writer(handle)
        writer.writerow(CHAIN_FIELDS)
        for person_id in sorted(chains):
            for chain in chains[person_id]:
                writer.writerow(
                    [
                        person_id,
                        chain["group_type"],
                        chain["group"],
                        chain["location"],
                        chain["schedule"],
                    ]
                )

    with open(rationale_file, "w", newline="", encoding="utf8") as handle:
        writer = csv.writer(handle)
        writer.writerow(CHAIN_FIELDS + ["rationale"])
        for s in selections:
            writer.writerow(
                [
                    s.person_id,
                    s.group_type_id,
                    s.group_id,
                    s.location_id,
                    s.schedule_id,
                    s.rationale,
                ]
            )
