"""Composite scoring and positional labels for rated players."""

from __future__ import annotations

from pysquads.config import ScoreWeights
from pysquads.models import PlayerRecord, Position, position_for_rating


RATING_ATTRIBUTES = ("skills", "stamina", "physicality", "team_player")
NEUTRAL_ATTACK_DEFENSE = 5.0
MAX_RATING = 10.0


def expressiveness(attack_defense: float) -> float:
    """Specialization strength of an attack/defense rating.

    Pure defenders (0) and pure attackers (10) score 5; the neutral midpoint
    scores 10.
    """

    return MAX_RATING - abs(attack_defense - NEUTRAL_ATTACK_DEFENSE)


def position_of(player: PlayerRecord) -> Position:
    return position_for_rating(player.attack_defense)


class AttributeModel:
    """Weighted five-attribute composite score used for seeding and evaluation."""

    def __init__(self, weights: ScoreWeights | None = None):
        self.weights = weights or ScoreWeights()

    def composite_score(self, player: PlayerRecord) -> float:
        weights = self.weights
        return (
            player.skills * weights.skills
            + player.stamina * weights.stamina
            + player.physicality * weights.physicality
            + player.team_player * weights.team_player
            + expressiveness(player.attack_defense) * weights.attack_defense
        )

    def position_of(self, player: PlayerRecord) -> Position:
        return position_of(player)
