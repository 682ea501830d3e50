"""Command line interface for checkin_selector."""
