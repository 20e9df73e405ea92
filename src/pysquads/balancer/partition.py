"""Immutable two-team partition used by the seeding and annealing stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pysquads.models import PlayerRecord

from .errors import InternalInvariantViolation


@dataclass(frozen=True)
class Partition:
    team_a: Tuple[PlayerRecord, ...]
    team_b: Tuple[PlayerRecord, ...]

    def swapped(self, index_a: int, index_b: int) -> "Partition":
        """Return a new partition with ``team_a[index_a]`` and ``team_b[index_b]`` exchanged."""

        team_a = list(self.team_a)
        team_b = list(self.team_b)
        team_a[index_a], team_b[index_b] = team_b[index_b], team_a[index_a]
        return Partition(tuple(team_a), tuple(team_b))

    def check_sizes(self, team_size: int) -> None:
        if len(self.team_a) != team_size or len(self.team_b) != team_size:
            raise InternalInvariantViolation(
                f"Partition drifted from {team_size}/{team_size}: "
                f"got {len(self.team_a)}/{len(self.team_b)}"
            )
