"""Canonical player models shared across ingestion and balancer layers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


DEFENSIVE_MAX = 3.0
MIDFIELD_MAX = 6.0


class Position(str, Enum):
    """Positional label derived from the attack/defense rating."""

    DEF = "DEF"
    MID = "MID"
    ATT = "ATT"


def position_for_rating(attack_defense: float) -> Position:
    if attack_defense <= DEFENSIVE_MAX:
        return Position.DEF
    if attack_defense <= MIDFIELD_MAX:
        return Position.MID
    return Position.ATT


class PlayerRecord(BaseModel):
    """Rated player payload consumed by the team balancer.

    ``attack_defense`` runs from 0 (pure defender) to 10 (pure attacker) with 5
    as neutral; the remaining ratings are 0-10, typically 1-10.
    """

    player_id: str = Field(..., min_length=1, alias="id")
    name: str = ""
    attack_defense: float = Field(5.0, ge=0.0, le=10.0, alias="attackDefense")
    stamina: float = Field(7.0, ge=0.0, le=10.0)
    skills: float = Field(7.0, ge=0.0, le=10.0)
    team_player: float = Field(7.0, ge=0.0, le=10.0, alias="teamPlayer")
    physicality: float = Field(7.0, ge=0.0, le=10.0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def position(self) -> Position:
        return position_for_rating(self.attack_defense)
