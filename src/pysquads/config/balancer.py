"""Tunable weights and schedules for the team balancer."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Mapping


logger = logging.getLogger(__name__)

_ITERATIONS_ENV = "PYSQUADS_ITERATIONS"
_INITIAL_TEMPERATURE_ENV = "PYSQUADS_INITIAL_TEMPERATURE"
_FINAL_TEMPERATURE_ENV = "PYSQUADS_FINAL_TEMPERATURE"
_TIER_EPSILON_ENV = "PYSQUADS_TIER_EPSILON"

_WEIGHT_SUM_TOLERANCE = 1e-6


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of the composite score; must be non-negative and sum to 1."""

    skills: float = 0.30
    stamina: float = 0.25
    physicality: float = 0.20
    team_player: float = 0.15
    attack_defense: float = 0.10

    def __post_init__(self) -> None:
        values = asdict(self)
        negative = [name for name, value in values.items() if value < 0]
        if negative:
            raise ValueError(f"Score weights must be non-negative: {', '.join(negative)}")
        total = sum(values.values())
        if not math.isclose(total, 1.0, abs_tol=_WEIGHT_SUM_TOLERANCE):
            raise ValueError(f"Score weights must sum to 1, got {total:.6f}")


@dataclass(frozen=True)
class ImbalanceWeights:
    score: float = 3.0
    attribute: float = 0.5
    position: float = 2.5
    include_attack_defense: bool = True

    def __post_init__(self) -> None:
        for name in ("score", "attribute", "position"):
            if getattr(self, name) < 0:
                raise ValueError(f"Imbalance weight {name!r} must be non-negative")


@dataclass(frozen=True)
class AnnealingSchedule:
    """Geometric cooling from ``initial_temperature`` to ``final_temperature``."""

    iterations: int = 10_000
    initial_temperature: float = 2.5
    final_temperature: float = 0.001

    def __post_init__(self) -> None:
        if self.iterations < 0:
            raise ValueError("iterations must be >= 0")
        if self.initial_temperature <= 0 or self.final_temperature <= 0:
            raise ValueError("temperatures must be positive")
        if self.final_temperature > self.initial_temperature:
            raise ValueError("final_temperature must not exceed initial_temperature")

    @property
    def cooling_factor(self) -> float:
        if self.iterations == 0:
            return 1.0
        return (self.final_temperature / self.initial_temperature) ** (1.0 / self.iterations)


@dataclass(frozen=True)
class SeedingOptions:
    tier_epsilon: float = 0.5

    def __post_init__(self) -> None:
        if self.tier_epsilon < 0:
            raise ValueError("tier_epsilon must be >= 0")


@dataclass(frozen=True)
class BalancerConfig:
    score_weights: ScoreWeights = field(default_factory=ScoreWeights)
    imbalance_weights: ImbalanceWeights = field(default_factory=ImbalanceWeights)
    schedule: AnnealingSchedule = field(default_factory=AnnealingSchedule)
    seeding: SeedingOptions = field(default_factory=SeedingOptions)

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> "BalancerConfig":
        """Return a copy with sections updated from a nested mapping.

        ``{"schedule": {"iterations": 500}}`` replaces just that value; unknown
        sections or keys raise ``ValueError``.
        """

        updated: dict[str, Any] = {}
        for section, values in overrides.items():
            if section not in _SECTIONS:
                raise ValueError(f"Unknown config section {section!r}")
            current = getattr(self, section)
            known = set(asdict(current))
            unknown = set(values) - known
            if unknown:
                raise ValueError(f"Unknown keys for {section}: {', '.join(sorted(unknown))}")
            updated[section] = replace(current, **dict(values))
        return replace(self, **updated)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {section: asdict(getattr(self, section)) for section in _SECTIONS}


_SECTIONS = ("score_weights", "imbalance_weights", "schedule", "seeding")


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.4f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def load_balancer_config(base: BalancerConfig | None = None) -> BalancerConfig:
    """Apply ``PYSQUADS_*`` environment overrides on top of ``base``."""

    config = base or BalancerConfig()
    schedule = config.schedule
    initial = _env_float(_INITIAL_TEMPERATURE_ENV, schedule.initial_temperature, clamp_min=1e-6)
    final = _env_float(_FINAL_TEMPERATURE_ENV, schedule.final_temperature, clamp_min=1e-6)
    if final > initial:
        logger.warning(
            "Final temperature %.4f exceeds initial %.4f; keeping configured schedule",
            final,
            initial,
        )
        initial, final = schedule.initial_temperature, schedule.final_temperature
    schedule = AnnealingSchedule(
        iterations=_env_int(_ITERATIONS_ENV, schedule.iterations, min_value=0),
        initial_temperature=initial,
        final_temperature=final,
    )
    seeding = SeedingOptions(
        tier_epsilon=_env_float(_TIER_EPSILON_ENV, config.seeding.tier_epsilon, clamp_min=0.0)
    )
    return replace(config, schedule=schedule, seeding=seeding)
