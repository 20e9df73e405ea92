"""Entry points that turn a rated roster into two balanced id lists."""

from __future__ import annotations

import logging
import random
import time
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pysquads.config import BalancerConfig, get_format
from pysquads.models import PlayerRecord

from .annealing import AnnealingOptimizer
from .attributes import AttributeModel
from .errors import DuplicatePlayerError, InternalInvariantViolation, InvalidRosterSizeError
from .objective import ImbalanceBreakdown, ImbalanceEvaluator
from .partition import Partition
from .seeding import SeedPartitioner
from .summary import TeamSummary, summarize_team


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamAssignment:
    team_a: Tuple[str, ...]
    team_b: Tuple[str, ...]
    imbalance: float
    initial_imbalance: float
    breakdown: ImbalanceBreakdown
    summary_a: TeamSummary
    summary_b: TeamSummary
    iterations: int
    seed: Optional[int] = None


def validate_roster(
    players: Sequence[PlayerRecord],
    *,
    match_format: str | None = None,
) -> List[PlayerRecord]:
    """Return the roster as a list, rejecting sizes that cannot be split evenly."""

    roster = list(players)
    size = len(roster)
    if size < 2 or size % 2 != 0:
        raise InvalidRosterSizeError(size)
    if match_format is not None:
        fmt = get_format(match_format)
        if size != fmt.players:
            raise InvalidRosterSizeError(
                size,
                f"Format {fmt.key} needs {fmt.players} players, got {size}",
            )
    counts = Counter(player.player_id for player in roster)
    duplicates = sorted(pid for pid, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicatePlayerError(duplicates)
    return roster


def project(
    partition: Partition,
    roster: Sequence[PlayerRecord] | None = None,
) -> Tuple[List[str], List[str]]:
    """Convert a partition of player records into two id lists.

    When ``roster`` is given the two lists must cover exactly its ids.
    """

    ids_a = [player.player_id for player in partition.team_a]
    ids_b = [player.player_id for player in partition.team_b]
    projected = set(ids_a) | set(ids_b)
    if len(projected) != len(ids_a) + len(ids_b):
        raise InternalInvariantViolation("Projected teams share or repeat player ids")
    if roster is not None and projected != {player.player_id for player in roster}:
        raise InternalInvariantViolation("Projected teams do not cover the input roster")
    return ids_a, ids_b


def assign_teams(
    players: Sequence[PlayerRecord],
    *,
    config: BalancerConfig | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    match_format: str | None = None,
) -> TeamAssignment:
    """Split ``players`` into two equally sized, balanced teams.

    Pass ``seed`` (or an explicit ``rng``) for a reproducible split; otherwise
    every call draws a fresh random source.
    """

    roster = validate_roster(players, match_format=match_format)
    config = config or BalancerConfig()
    rng = rng if rng is not None else random.Random(seed)

    attributes = AttributeModel(config.score_weights)
    evaluator = ImbalanceEvaluator(attributes, config.imbalance_weights)
    seeder = SeedPartitioner(attributes, rng=rng, tier_epsilon=config.seeding.tier_epsilon)
    optimizer = AnnealingOptimizer(evaluator, rng=rng, schedule=config.schedule)

    start = time.perf_counter()
    logger.info(
        "Balancing %s players – iterations=%s, temperature %.3f -> %.3f, seed=%s",
        len(roster),
        config.schedule.iterations,
        config.schedule.initial_temperature,
        config.schedule.final_temperature,
        "random" if seed is None else seed,
    )

    initial = seeder.seed(roster)
    result = optimizer.run(initial)
    best = result.best
    best.check_sizes(len(roster) // 2)

    ids_a, ids_b = project(best, roster)

    logger.info(
        "Balanced %s players in %.3fs – imbalance %.3f (seed %.3f)",
        len(roster),
        time.perf_counter() - start,
        result.best_score,
        result.initial_score,
    )
    return TeamAssignment(
        team_a=tuple(ids_a),
        team_b=tuple(ids_b),
        imbalance=result.best_score,
        initial_imbalance=result.initial_score,
        breakdown=evaluator.breakdown(best.team_a, best.team_b),
        summary_a=summarize_team(best.team_a, attributes),
        summary_b=summarize_team(best.team_b, attributes),
        iterations=result.iterations,
        seed=seed,
    )


def balance_teams(
    players: Sequence[PlayerRecord],
    *,
    config: BalancerConfig | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    match_format: str | None = None,
) -> Tuple[List[str], List[str]]:
    """Return just the two id lists for ``players``."""

    assignment = assign_teams(players, config=config, seed=seed, rng=rng, match_format=match_format)
    return list(assignment.team_a), list(assignment.team_b)
