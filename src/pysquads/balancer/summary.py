"""Per-team averages and position counts for reporting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from pysquads.models import PlayerRecord, Position

from .attributes import AttributeModel


SUMMARY_ATTRIBUTES = ("attack_defense", "stamina", "skills", "team_player", "physicality")


@dataclass(frozen=True)
class TeamSummary:
    size: int
    composite_score: float
    averages: Dict[str, float]
    positions: Dict[str, int]


def summarize_team(players: Sequence[PlayerRecord], attributes: AttributeModel) -> TeamSummary:
    positions = {position.value: 0 for position in Position}
    for player in players:
        positions[attributes.position_of(player).value] += 1
    if not players:
        return TeamSummary(
            size=0,
            composite_score=0.0,
            averages={name: 0.0 for name in SUMMARY_ATTRIBUTES},
            positions=positions,
        )
    size = len(players)
    averages = {
        name: sum(float(getattr(player, name)) for player in players) / size
        for name in SUMMARY_ATTRIBUTES
    }
    composite = sum(attributes.composite_score(player) for player in players) / size
    return TeamSummary(size=size, composite_score=composite, averages=averages, positions=positions)
