"""Utilities for loading :class:`~checkin_selector.models.attendance.AttendanceRecord` objects from CSV files."""
from __future__ import annotations

import csv
from datetime import datetime
from typing import List, Optional

from ..models.attendance import AttendanceRecord

REQUIRED_COLUMNS = {
    "person_id",
    "group_type_id",
    "group_id",
    "location_id",
    "schedule_id",
    "start_date_time",
}


def _parse_id(raw: Optional[str], column: str, lineno: int, optional: bool = False) -> Optional[int]:
    text = (raw or "").strip()
    if not text:
        if optional:
            return None
        raise ValueError(f"Row {lineno}: '{column}' is required")
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"Row {lineno}: {column} must be an integer") from exc


def load_attendance(path: str) -> List[AttendanceRecord]:
    """Load attendance history from a CSV file.

    Every column of :data:`REQUIRED_COLUMNS` must be present. ``location_id``
    and ``schedule_id`` may be left blank; ``start_date_time`` is an ISO 8601
    timestamp; one carrying a UTC offset is converted to naive local time.

    Parameters
    ----------
    path:
        Path to the CSV file.

    Returns
    -------
    list[AttendanceRecord]
        Records in file order.

    Raises
    ------
    ValueError
        If required columns are missing or data is invalid.
    """

    with open(path, newline="") as handle:
        reader = csv.DictReader(handle)
        fieldnames = reader.fieldnames or []
        missing = REQUIRED_COLUMNS - set(fieldnames)
        if missing:
            raise ValueError(f"Missing required columns: {', '.join(sorted(missing))}")

        records: List[AttendanceRecord] = []
        for lineno, row in enumerate(reader, start=2):
            start_raw = (row.get("start_date_time") or "").strip()
            try:
                start = datetime.fromisoformat(start_raw)
            except ValueError as exc:
                raise ValueError(
                    f"Row {lineno}: start_date_time must be an ISO 8601 timestamp"
                ) from exc
            if start.tzinfo is not None:
                # Stored as naive local time
                start = start.astimezone().replace(tzinfo=None)

            records.append(
                AttendanceRecord(
                    person_id=_parse_id(row.get("person_id"), "person_id", lineno),
                    group_type_id=_parse_id(row.get("group_type_id"), "group_type_id", lineno),
                    group_id=_parse_id(row.get("group_id"), "group_id", lineno),
                    location_id=_parse_id(
                        row.get("location_id"), "location_id", lineno, optional=True
                    ),
                    schedule_id=_parse_id(
                        row.get("schedule_id"), "schedule_id", lineno, optional=True
                    ),
                    start_date_time=start,
                )
            )

    return records
