from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from pysquads.models import PlayerRecord


class BalancerOptions(BaseModel):
    iterations: int | None = Field(default=None, ge=0, le=200_000)
    initial_temperature: float | None = Field(default=None, gt=0.0)
    final_temperature: float | None = Field(default=None, gt=0.0)
    tier_epsilon: float | None = Field(default=None, ge=0.0)


class TeamRequest(BaseModel):
    players: List[PlayerRecord]
    format: str | None = None
    seed: int | None = None
    options: BalancerOptions = Field(default_factory=BalancerOptions)


class TeamSummaryResponse(BaseModel):
    size: int
    composite_score: float
    averages: Dict[str, float]
    positions: Dict[str, int]


class ImbalanceResponse(BaseModel):
    score: float
    attributes: float
    positions: float
    total: float


class TeamAssignmentResponse(BaseModel):
    team_a: List[str]
    team_b: List[str]
    imbalance: float
    initial_imbalance: float
    breakdown: ImbalanceResponse
    summary_a: TeamSummaryResponse
    summary_b: TeamSummaryResponse
    iterations: int
    seed: int | None = None
