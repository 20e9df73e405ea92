"""Scalar imbalance objective minimized by the annealing search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from pysquads.config import ImbalanceWeights
from pysquads.models import PlayerRecord, Position

from .attributes import RATING_ATTRIBUTES, AttributeModel


@dataclass(frozen=True)
class ImbalanceBreakdown:
    score: float
    attributes: float
    positions: float

    @property
    def total(self) -> float:
        return self.score + self.attributes + self.positions


@dataclass(frozen=True)
class _Profile:
    score: float
    ratings: Tuple[float, ...]
    position: Position


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


class ImbalanceEvaluator:
    """Weighted sum of score, attribute and position differences between two teams.

    Player profiles (composite score, ratings, position) are computed on first
    sight and cached by the frozen record itself, so a re-rated player with the
    same ``player_id`` gets a fresh profile.
    """

    def __init__(self, attributes: AttributeModel, weights: ImbalanceWeights | None = None):
        self.attributes = attributes
        self.weights = weights or ImbalanceWeights()
        self._attribute_names = RATING_ATTRIBUTES + (
            ("attack_defense",) if self.weights.include_attack_defense else ()
        )
        self._profiles: Dict[PlayerRecord, _Profile] = {}

    def _profile(self, player: PlayerRecord) -> _Profile:
        profile = self._profiles.get(player)
        if profile is None:
            profile = _Profile(
                score=self.attributes.composite_score(player),
                ratings=tuple(float(getattr(player, name)) for name in self._attribute_names),
                position=self.attributes.position_of(player),
            )
            self._profiles[player] = profile
        return profile

    def breakdown(self, team_a: Sequence[PlayerRecord], team_b: Sequence[PlayerRecord]) -> ImbalanceBreakdown:
        if not team_a or not team_b:
            raise ValueError("Cannot evaluate imbalance with an empty team")
        profiles_a = [self._profile(player) for player in team_a]
        profiles_b = [self._profile(player) for player in team_b]

        score_gap = abs(_mean([p.score for p in profiles_a]) - _mean([p.score for p in profiles_b]))

        attribute_gap = 0.0
        for idx in range(len(self._attribute_names)):
            mean_a = _mean([p.ratings[idx] for p in profiles_a])
            mean_b = _mean([p.ratings[idx] for p in profiles_b])
            attribute_gap += abs(mean_a - mean_b)

        position_gap = 0
        for position in Position:
            count_a = sum(1 for p in profiles_a if p.position is position)
            count_b = sum(1 for p in profiles_b if p.position is position)
            position_gap += abs(count_a - count_b)

        return ImbalanceBreakdown(
            score=self.weights.score * score_gap,
            attributes=self.weights.attribute * attribute_gap,
            positions=self.weights.position * position_gap,
        )

    def imbalance(self, team_a: Sequence[PlayerRecord], team_b: Sequence[PlayerRecord]) -> float:
        return self.breakdown(team_a, team_b).total
