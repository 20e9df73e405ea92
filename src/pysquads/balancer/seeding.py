"""Tiered snake-draft seeding for the initial two-team split."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from pysquads.models import PlayerRecord

from .attributes import AttributeModel
from .partition import Partition


logger = logging.getLogger(__name__)

DEFAULT_TIER_EPSILON = 0.5


def snake_draft(ordered: Sequence[PlayerRecord]) -> Partition:
    """Deal players in pairs as A,B then B,A, repeating (A,B,B,A,A,B,...)."""

    team_a: List[PlayerRecord] = []
    team_b: List[PlayerRecord] = []
    for idx, player in enumerate(ordered):
        pair = idx // 2
        first_in_pair = idx % 2 == 0
        if first_in_pair == (pair % 2 == 0):
            team_a.append(player)
        else:
            team_b.append(player)
    return Partition(tuple(team_a), tuple(team_b))


class SeedPartitioner:
    def __init__(
        self,
        attributes: AttributeModel,
        *,
        rng: random.Random,
        tier_epsilon: float = DEFAULT_TIER_EPSILON,
    ):
        self.attributes = attributes
        self.rng = rng
        self.tier_epsilon = tier_epsilon

    def tiers(self, players: Sequence[PlayerRecord]) -> List[List[PlayerRecord]]:
        """Group players by composite score, best first.

        A tier closes once a player's score falls more than ``tier_epsilon``
        below the score of the tier's first member.
        """

        scored: List[Tuple[float, PlayerRecord]] = sorted(
            ((self.attributes.composite_score(player), player) for player in players),
            key=lambda item: item[0],
            reverse=True,
        )
        tiers: List[List[PlayerRecord]] = []
        anchor = 0.0
        for score, player in scored:
            if not tiers or anchor - score > self.tier_epsilon:
                tiers.append([])
                anchor = score
            tiers[-1].append(player)
        return tiers

    def seed(self, players: Sequence[PlayerRecord]) -> Partition:
        tiers = self.tiers(players)
        ordered: List[PlayerRecord] = []
        for tier in tiers:
            shuffled = list(tier)
            self.rng.shuffle(shuffled)
            ordered.extend(shuffled)
        logger.debug(
            "Seeded %s players across %s tiers (sizes %s)",
            len(ordered),
            len(tiers),
            [len(tier) for tier in tiers],
        )
        partition = snake_draft(ordered)
        partition.check_sizes(len(ordered) // 2)
        return partition
