"""
Scoring Engine Constants

Defines pillar adjustments, penalty magnitudes, rationale thresholds and
defaults used by the scoring engine.
All values are deterministic with no AI/ML components.
"""

from typing import Dict

ENGINE_VERSION = "1.0.0"

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_SCORE = 0.5             # Neutral fit when data is unknown
DEFAULT_COMMUTE_CAP_MINS = 90   # Used by the Commute pillar when no cap is given

# =============================================================================
# PROGRAM FIT
# =============================================================================

ARTS_MUST_HAVE_BONUS = 0.10     # All requested arts tags present
DIA_PREFERENCE_BONUS = 0.06     # Diversity-eligible family, program uses DIA set-asides

# =============================================================================
# COMMUTE
# =============================================================================

# fit = 1 - (min(commute, cap) / cap) * COMMUTE_DECAY, so an at-cap commute floors at 0.2
COMMUTE_DECAY = 0.8

# =============================================================================
# SUPPORTS
# =============================================================================

# Symmetric bonus/penalty per requested support need
SUPPORT_ADJUSTMENTS: Dict[str, float] = {
    "IEP": 0.25,
    "ELL": 0.20,
    "Accessibility": 0.10,
}

# =============================================================================
# OUTCOMES
# =============================================================================

OUTCOME_BLEND: Dict[str, float] = {
    "grad": 0.5,
    "attendance": 0.3,
    "survey": 0.2,
}

# 0.5 + (value / median - 1) * MEDIAN_RATIO_SLOPE; 20% above median -> 0.6
MEDIAN_RATIO_SLOPE = 0.5

# =============================================================================
# ENVIRONMENT
# =============================================================================

SMALL_SCHOOL_MAX = 600      # exclusive
MEDIUM_SCHOOL_MAX = 1200    # inclusive

# (match bonus, mismatch penalty)
SIZE_ADJUSTMENT = (0.15, 0.10)
CAMPUS_ADJUSTMENT = (0.08, 0.04)
PEDAGOGY_ADJUSTMENT = (0.12, 0.08)

# =============================================================================
# PENALTIES
# =============================================================================

AUDITION_OPT_OUT_PENALTY = 0.15
SCREENED_OPT_OUT_PENALTY = 0.10
OVER_COMMUTE_CAP_PENALTY = 0.25
EXCLUDED_PROGRAM_PENALTY = 1.00

UNKNOWN_COMMUTE_MINS = 999      # Stand-in for a missing estimate in the over-cap check

# =============================================================================
# RATIONALE
# =============================================================================

RATIONALE_THRESHOLDS: Dict[str, float] = {
    "program_fit": 0.7,
    "supports": 0.6,
    "commute": 0.6,
    "outcomes": 0.6,
}

FALLBACK_RATIONALE = "Balanced option with solid fit"
