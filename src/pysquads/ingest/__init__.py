"""Input adapters that normalize raw roster data."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    RosterRow,
    load_records_from_csv,
    load_roster_csv,
    parse_roster_text,
    rows_to_records,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "RosterRow",
    "load_records_from_csv",
    "load_roster_csv",
    "parse_roster_text",
    "rows_to_records",
]
