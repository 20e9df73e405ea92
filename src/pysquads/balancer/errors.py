"""Exceptions raised by the team balancer."""

from __future__ import annotations


class TeamBalancingError(Exception):
    """Base class for balancer failures."""


class InvalidRosterSizeError(TeamBalancingError, ValueError):
    """Raised when a roster cannot be split into two equal squads."""

    def __init__(self, size: int, message: str | None = None):
        super().__init__(message or f"Player count must be an even number >= 2, got {size}")
        self.size = size


class DuplicatePlayerError(TeamBalancingError, ValueError):
    def __init__(self, player_ids: list[str]):
        preview = ", ".join(player_ids[:5])
        super().__init__(f"Duplicate player ids in roster: {preview}")
        self.player_ids = player_ids


class InternalInvariantViolation(TeamBalancingError, RuntimeError):
    """A partition lost its shape; this is a bug, never a user error."""
