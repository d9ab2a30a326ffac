"""
Pillar Scorers

Individual scoring functions for each pillar.
Each scorer produces a normalized fit between 0.0 and 1.0 and depends only on
the program and the slot state, never on another pillar.
All logic is deterministic - no AI/ML components.
"""

from typing import Optional

from .contracts import ProgramRow, SlotState, PillarFits
from .constants import (
    ARTS_MUST_HAVE_BONUS,
    CAMPUS_ADJUSTMENT,
    COMMUTE_DECAY,
    DEFAULT_COMMUTE_CAP_MINS,
    DEFAULT_SCORE,
    DIA_PREFERENCE_BONUS,
    MEDIAN_RATIO_SLOPE,
    MEDIUM_SCHOOL_MAX,
    OUTCOME_BLEND,
    PEDAGOGY_ADJUSTMENT,
    SIZE_ADJUSTMENT,
    SMALL_SCHOOL_MAX,
    SUPPORT_ADJUSTMENTS,
)
from .normalize import clamp01


def score_program_fit(program: ProgramRow, slots: SlotState) -> float:
    """
    Score how well the program's tags match the family's ordered interests.

    Interest at rank r carries weight 1/(r+1); the fit is the weighted share of
    interests the program offers. No interests given -> neutral.
    """
    fit = DEFAULT_SCORE
    interests = slots.program_interests
    if interests:
        weights = [1 / (rank + 1) for rank in range(len(interests))]
        hit = sum(
            weight
            for interest, weight in zip(interests, weights)
            if interest in program.program_tags
        )
        fit = clamp01(hit / sum(weights))

    arts = slots.must_haves.arts
    if arts and all(tag in program.arts_tags for tag in arts):
        fit = min(1.0, fit + ARTS_MUST_HAVE_BONUS)

    # Preference bump only; says nothing about eligibility
    if slots.diversity_eligible and program.uses_dia:
        fit = min(1.0, fit + DIA_PREFERENCE_BONUS)

    return fit


def score_commute(program: ProgramRow, slots: SlotState) -> float:
    """
    Linear decay from 1.0 (no commute) to 0.2 (at the cap).
    Over-cap commutes are handled by a separate penalty.
    """
    if not program.est_commute_mins:
        return DEFAULT_SCORE
    cap = slots.commute_cap_mins or DEFAULT_COMMUTE_CAP_MINS
    minutes = min(program.est_commute_mins, cap)
    return clamp01(1 - (minutes / cap) * COMMUTE_DECAY)


def score_supports(program: ProgramRow, slots: SlotState) -> float:
    fit = DEFAULT_SCORE
    needs = slots.support_needs

    if "IEP" in needs:
        step = SUPPORT_ADJUSTMENTS["IEP"]
        fit += step if (program.has_inclusion or program.has_iep_supports) else -step

    if "ELL" in needs:
        step = SUPPORT_ADJUSTMENTS["ELL"]
        fit += step if program.has_ell_supports else -step

    if "Accessibility" in needs:
        step = SUPPORT_ADJUSTMENTS["Accessibility"]
        fit += step if program.accessibility_notes else -step

    return clamp01(fit)


def score_outcomes(program: ProgramRow) -> float:
    """
    Blend graduation, attendance and survey results.

    Graduation and attendance are compared against the borough median so that
    schools are judged relative to their peers.
    """
    grad = ratio_vs_median(program.grad_rate, program.borough_grad_rate_median)
    attendance = ratio_vs_median(program.attendance_rate, program.borough_attendance_median)
    survey = DEFAULT_SCORE if program.survey_satisfaction is None else clamp01(program.survey_satisfaction)

    return clamp01(
        OUTCOME_BLEND["grad"] * grad
        + OUTCOME_BLEND["attendance"] * attendance
        + OUTCOME_BLEND["survey"] * survey
    )


def score_environment(program: ProgramRow, slots: SlotState) -> float:
    env = DEFAULT_SCORE
    prefs = slots.environment_prefs

    if slots.school_size_pref and program.school_size:
        bonus, penalty = SIZE_ADJUSTMENT
        env += bonus if size_band(program.school_size) == slots.school_size_pref else -penalty

    if prefs.campus_type and program.campus_type:
        bonus, penalty = CAMPUS_ADJUSTMENT
        env += bonus if prefs.campus_type == program.campus_type else -penalty

    if prefs.pedagogy and prefs.pedagogy != "Either" and program.pedagogy_style:
        bonus, penalty = PEDAGOGY_ADJUSTMENT
        env += bonus if prefs.pedagogy == program.pedagogy_style else -penalty

    return clamp01(env)


def score_all_pillars(program: ProgramRow, slots: SlotState) -> PillarFits:
    return PillarFits(
        program_fit=score_program_fit(program, slots),
        commute=score_commute(program, slots),
        supports=score_supports(program, slots),
        outcomes=score_outcomes(program),
        environment=score_environment(program, slots),
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def ratio_vs_median(value: Optional[float], median: Optional[float]) -> float:
    """Map value/median onto [0, 1] around 0.5; missing or zero inputs are neutral."""
    if not value or not median:
        return DEFAULT_SCORE
    ratio = value / median
    return clamp01(0.5 + (ratio - 1) * MEDIAN_RATIO_SLOPE)


def size_band(enrollment: int) -> str:
    if enrollment < SMALL_SCHOOL_MAX:
        return "Small"
    if enrollment <= MEDIUM_SCHOOL_MAX:
        return "Medium"
    return "Large"
