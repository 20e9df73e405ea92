"""Configuration helpers for match formats and balancer tuning."""

from .balancer import (
    AnnealingSchedule,
    BalancerConfig,
    ImbalanceWeights,
    ScoreWeights,
    SeedingOptions,
    load_balancer_config,
)
from .formats import MatchFormat, get_format, get_format_by_size, iter_formats

__all__ = [
    "AnnealingSchedule",
    "BalancerConfig",
    "ImbalanceWeights",
    "MatchFormat",
    "ScoreWeights",
    "SeedingOptions",
    "get_format",
    "get_format_by_size",
    "iter_formats",
    "load_balancer_config",
]
