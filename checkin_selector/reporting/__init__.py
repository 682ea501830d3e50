"""Reporting utilities for checkin_selector."""

from .selection import (
    format_selected_chains,
    export_yaml,
    export_csv,
)

__all__ = ["format_selected_chains", "export_yaml", "export_csv"]
