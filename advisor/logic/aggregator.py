"""
Score Aggregator

Combines pillar fits and penalties into a final 0-100 score.
"""

from typing import Iterable, List

from .contracts import (
    PillarBreakdown,
    PillarFits,
    ProgramRow,
    ScoredProgram,
    SlotState,
    WeightModel,
)
from .constants import (
    AUDITION_OPT_OUT_PENALTY,
    EXCLUDED_PROGRAM_PENALTY,
    OVER_COMMUTE_CAP_PENALTY,
    SCREENED_OPT_OUT_PENALTY,
    UNKNOWN_COMMUTE_MINS,
)
from .dimension_scorers import score_all_pillars
from .normalize import clamp01, round_half_up
from .rationale import build_rationale


def compute_penalties(program: ProgramRow, slots: SlotState) -> float:
    """
    Sum the negative adjustments applied to the raw score.

    The over-cap penalty is independent of the Commute pillar: a program past
    the cap still keeps its (floored) pillar fit.
    """
    penalties = 0.0

    if slots.admissions_opt_out == "no_audition" and program.admissions_method == "Audition":
        penalties -= AUDITION_OPT_OUT_PENALTY
    if slots.admissions_opt_out == "no_screened" and program.admissions_method == "Screened":
        penalties -= SCREENED_OPT_OUT_PENALTY

    if slots.commute_cap_mins:
        # Unknown commute counts as over the cap
        minutes = UNKNOWN_COMMUTE_MINS if program.est_commute_mins is None else program.est_commute_mins
        if minutes > slots.commute_cap_mins:
            penalties -= OVER_COMMUTE_CAP_PENALTY

    if program.program_id in slots.excludes:
        penalties -= EXCLUDED_PROGRAM_PENALTY

    return penalties


def weighted_sum(fits: PillarFits, weights: WeightModel) -> float:
    return (
        weights.program_fit * fits.program_fit
        + weights.commute * fits.commute
        + weights.supports * fits.supports
        + weights.outcomes * fits.outcomes
        + weights.environment * fits.environment
    )


def build_breakdown(fits: PillarFits, weights: WeightModel, penalties: float) -> PillarBreakdown:
    """
    Per-pillar display values, each rounded on its own.

    They add up to the final score only approximately.
    """
    return PillarBreakdown(
        program_fit=round_half_up(fits.program_fit * weights.program_fit * 100),
        commute=round_half_up(fits.commute * weights.commute * 100),
        supports=round_half_up(fits.supports * weights.supports * 100),
        outcomes=round_half_up(fits.outcomes * weights.outcomes * 100),
        environment=round_half_up(fits.environment * weights.environment * 100),
        penalties=round_half_up(penalties * 100),
    )


def aggregate_scores(
    program: ProgramRow,
    slots: SlotState,
    weights: WeightModel
) -> ScoredProgram:
    """
    Compute all pillar fits and aggregate into a ScoredProgram.

    Args:
        program: Program record to score
        slots: Family preferences
        weights: Pillar weights (used as given, not renormalized)

    Returns:
        ScoredProgram with score, breakdown and rationale
    """
    fits = score_all_pillars(program, slots)
    penalties = compute_penalties(program, slots)

    raw = weighted_sum(fits, weights) + penalties
    score = round_half_up(clamp01(raw) * 100)

    return ScoredProgram(
        program_id=program.program_id,
        school_id=program.school_id,
        name=program.program_name,
        school_name=program.school_name,
        admission_method=program.admissions_method,
        est_commute_mins=program.est_commute_mins,
        score=score,
        pillars=build_breakdown(fits, weights, penalties),
        rationale=build_rationale(program, fits),
        data_as_of=program.data_as_of,
    )


def batch_aggregate(
    programs: Iterable[ProgramRow],
    slots: SlotState,
    weights: WeightModel
) -> List[ScoredProgram]:
    return [aggregate_scores(p, slots, weights) for p in programs]
