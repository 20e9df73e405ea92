"""Balanced two-team assignment for rated rosters."""

__version__ = "0.1.0"
