"""Pydantic models for API I/O."""

from .formats import MatchFormatResponse
from .teams import (
    BalancerOptions,
    ImbalanceResponse,
    TeamAssignmentResponse,
    TeamRequest,
    TeamSummaryResponse,
)

__all__ = [
    "BalancerOptions",
    "ImbalanceResponse",
    "MatchFormatResponse",
    "TeamAssignmentResponse",
    "TeamRequest",
    "TeamSummaryResponse",
]
