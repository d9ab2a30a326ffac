"""
Scoring Logic Module

Provides the deterministic scoring engine for NYC high school program
recommendations.
"""

from .contracts import (
    ProgramRow,
    SlotState,
    MustHaves,
    EnvironmentPrefs,
    WeightModel,
    WeightOverrides,
    ScoredProgram,
    ProgramResult,
    PillarBreakdown,
    ProgramsMeta,
)
from .engine import score_programs, score_program
from .presets import DEFAULT_WEIGHTS, WEIGHT_PRESETS

__all__ = [
    # Main engine
    "score_programs",
    "score_program",

    # Contracts
    "ProgramRow",
    "SlotState",
    "MustHaves",
    "EnvironmentPrefs",
    "WeightModel",
    "WeightOverrides",
    "ScoredProgram",
    "ProgramResult",
    "PillarBreakdown",
    "ProgramsMeta",

    # Weights
    "DEFAULT_WEIGHTS",
    "WEIGHT_PRESETS",
]
