"""Team balancing engine: tiered snake-draft seeding refined by simulated annealing."""

from .annealing import AnnealingOptimizer, AnnealingResult, anneal
from .attributes import AttributeModel, expressiveness, position_of
from .errors import (
    DuplicatePlayerError,
    InternalInvariantViolation,
    InvalidRosterSizeError,
    TeamBalancingError,
)
from .objective import ImbalanceBreakdown, ImbalanceEvaluator
from .partition import Partition
from .seeding import SeedPartitioner, snake_draft
from .service import TeamAssignment, assign_teams, balance_teams, project, validate_roster
from .summary import TeamSummary, summarize_team

__all__ = [
    "AnnealingOptimizer",
    "AnnealingResult",
    "AttributeModel",
    "DuplicatePlayerError",
    "ImbalanceBreakdown",
    "ImbalanceEvaluator",
    "InternalInvariantViolation",
    "InvalidRosterSizeError",
    "Partition",
    "SeedPartitioner",
    "TeamAssignment",
    "TeamBalancingError",
    "TeamSummary",
    "anneal",
    "assign_teams",
    "balance_teams",
    "expressiveness",
    "position_of",
    "project",
    "snake_draft",
    "summarize_team",
    "validate_roster",
]
