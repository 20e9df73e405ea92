"""Simulated-annealing refinement of a two-team partition."""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass

from pysquads.config import AnnealingSchedule

from .objective import ImbalanceEvaluator
from .partition import Partition


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnealingResult:
    best: Partition
    best_score: float
    initial_score: float
    iterations: int
    accepted: int
    improvements: int
    final_temperature: float


def anneal(
    initial: Partition,
    evaluator: ImbalanceEvaluator,
    schedule: AnnealingSchedule,
    rng: random.Random,
) -> AnnealingResult:
    """Search single-pair swaps from ``initial`` and return the best partition seen.

    Uphill moves are accepted with probability ``exp(-delta / temperature)``.
    The returned ``best_score`` never exceeds ``initial_score``.
    """

    team_size = len(initial.team_a)
    initial.check_sizes(team_size)

    initial_score = evaluator.imbalance(initial.team_a, initial.team_b)
    current, current_score = initial, initial_score
    best, best_score = initial, initial_score

    temperature = schedule.initial_temperature
    cooling = schedule.cooling_factor
    accepted = 0
    improvements = 0

    for _ in range(schedule.iterations):
        candidate = current.swapped(rng.randrange(team_size), rng.randrange(team_size))
        candidate.check_sizes(team_size)
        candidate_score = evaluator.imbalance(candidate.team_a, candidate.team_b)
        delta = candidate_score - current_score

        if delta < 0 or rng.random() < math.exp(-delta / temperature):
            current, current_score = candidate, candidate_score
            accepted += 1
            if current_score < best_score:
                best, best_score = current, current_score
                improvements += 1
        temperature *= cooling

    return AnnealingResult(
        best=best,
        best_score=best_score,
        initial_score=initial_score,
        iterations=schedule.iterations,
        accepted=accepted,
        improvements=improvements,
        final_temperature=temperature,
    )


class AnnealingOptimizer:
    def __init__(
        self,
        evaluator: ImbalanceEvaluator,
        *,
        rng: random.Random,
        schedule: AnnealingSchedule | None = None,
    ):
        self.evaluator = evaluator
        self.rng = rng
        self.schedule = schedule or AnnealingSchedule()

    def run(self, initial: Partition) -> AnnealingResult:
        start = time.perf_counter()
        result = anneal(initial, self.evaluator, self.schedule, self.rng)
        logger.info(
            "Annealing finished – imbalance %.3f -> %.3f over %s iterations "
            "(accepted %s, improved %s, %.3fs)",
            result.initial_score,
            result.best_score,
            result.iterations,
            result.accepted,
            result.improvements,
            time.perf_counter() - start,
        )
        return result

    def optimize(self, initial: Partition) -> Partition:
        return self.run(initial).best
