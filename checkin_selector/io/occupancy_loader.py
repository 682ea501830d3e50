"""Load current occupancy counts from CSV files."""
from __future__ import annotations

import csv
from typing import Dict


def load_occupancy(path: str) -> Dict[int, int]:
    """Return a mapping of location id to the number of people checked in.

    The CSV must include ``location_id`` and ``current_count`` columns.
    """

    with open(path, newline="") as handle:
        reader = csv.DictReader(handle)
        fieldnames = reader.fieldnames or []
        missing = {"location_id", "current_count"} - set(fieldnames)
        if missing:
            raise ValueError(f"Missing required columns: {', '.join(sorted(missing))}")

        counts: Dict[int, int] = {}
        for lineno, row in enumerate(reader, start=2):
            try:
                location_id = int((row.get("location_id") or "").strip())
                count = int((row.get("current_count") or "0").strip() or "0")
            except ValueError as exc:
                raise ValueError(
                    f"Row {lineno}: location_id and current_count must be integers"
                ) from exc
            if count < 0:
                raise ValueError(f"Row {lineno}: current_count must be non-negative")
            counts[location_id] = count

    return counts
