from __future__ import annotations

import argparse
import os
from datetime import date, datetime
from typing import List

from .. import logger
from ..actions import ActionContext, SelectByMultipleAttended, build_actions
from ..engine.stores import InMemoryAttendanceStore, InMemoryOccupancy
from ..io.action_loader import ActionDefinition, load_action_objects
from ..io.attendance_loader import load_attendance
from ..io.occupancy_loader import load_occupancy
from ..io.state_loader import load_check_in_state
from ..reporting.selection import export_csv, export_yaml


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string for argparse."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}") from exc


def _load_actions(path: str | None) -> List:
    """Load the configured actions or fall back to a single attendance selection."""
    if path:
        return load_action_objects(path)
    return build_actions([ActionDefinition(name=SelectByMultipleAttended.slug)])


def _apply_overrides(actions: List, args: argparse.Namespace) -> None:
    """Force room balancing on when requested on the command line."""
    for action in actions:
        if not isinstance(action, SelectByMultipleAttended):
            continue
        if args.balance_by_group:
            action.attributes["RoomBalanceByGroup"] = True
        if args.balance_by_location:
            action.attributes["RoomBalanceByLocation"] = True


# ---------------------------------------------------------------------------
# Command implementations
# ---------------------------------------------------------------------------

def cmd_select(args: argparse.Namespace) -> int:
    state = load_check_in_state(args.state)
    attendance = InMemoryAttendanceStore(load_attendance(args.attendance))
    occupancy = InMemoryOccupancy(load_occupancy(args.occupancy) if args.occupancy else {})

    actions = _load_actions(args.actions)
    _apply_overrides(actions, args)

    context = ActionContext(
        attendance_store=attendance, occupancy=occupancy, today=args.today
    )
    selections = []
    for action in actions:
        logger.info("Running action %s", action.name)
        result = action.execute(state, context)
        if not result.success:
            for message in result.error_messages:
                print(f"{action.name}: {message}")
            return 1
        selections.extend(result.selections)

    os.makedirs(args.output, exist_ok=True)
    if args.format == "csv":
        selection_file = os.path.join(args.output, "selection.csv")
        rationale_file = os.path.join(args.output, "rationale.csv")
        export_csv(state, selections, selection_file, rationale_file)
    else:
        selection_file = os.path.join(args.output, "selection.yaml")
        rationale_file = os.path.join(args.output, "rationale.yaml")
        export_yaml(state, selections, selection_file, rationale_file)

    print(f"Wrote selection to {selection_file} and rationale to {rationale_file}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser setup
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="checkin-selector")
    sub = parser.add_subparsers(dest="command", required=True)

    # select
    p_select = sub.add_parser("select", help="Select services people last attended")
    p_select.add_argument("--state", required=True, help="Check-in state YAML path")
    p_select.add_argument("--attendance", required=True, help="Attendance history CSV path")
    p_select.add_argument("--occupancy", help="Current occupancy CSV path")
    p_select.add_argument("--actions", help="Workflow actions YAML path")
    p_select.add_argument(
        "--balance-by-group",
        action="store_true",
        help="Prefer the group with the fewest people checked in",
    )
    p_select.add_argument(
        "--balance-by-location",
        action="store_true",
        help="Prefer the location with the fewest people checked in",
    )
    p_select.add_argument(
        "--today",
        type=_parse_date,
        default=None,
        help="Date of the check-in session, YYYY-MM-DD (default: today)",
    )
    p_select.add_argument("--output", required=True, help="Output directory")
    p_select.add_argument(
        "--format",
        choices=["yaml", "csv"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    p_select.set_defaults(func=cmd_select)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
