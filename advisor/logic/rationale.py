"""
Rationale Builder

Turns pillar fits into a short, templated sentence explaining a match.
Deterministic: the same program and fits always yield the same text.
"""

from typing import List

from .contracts import ProgramRow, PillarFits
from .constants import FALLBACK_RATIONALE, RATIONALE_THRESHOLDS
from .normalize import round_half_up


def build_rationale(program: ProgramRow, fits: PillarFits) -> str:
    """
    Build a one-sentence blurb, e.g.
    "Bronx Science: STEM Academy aligns with your interests, ~35-min morning commute."
    """
    clauses: List[str] = []

    if fits.program_fit > RATIONALE_THRESHOLDS["program_fit"]:
        clauses.append(f"{program.program_name} aligns with your interests")

    if fits.supports > RATIONALE_THRESHOLDS["supports"]:
        suffix = " (inclusion)" if program.has_inclusion else ""
        clauses.append(f"robust student supports{suffix}")

    if fits.commute > RATIONALE_THRESHOLDS["commute"] and program.est_commute_mins:
        clauses.append(f"~{program.est_commute_mins}-min morning commute")

    if fits.outcomes > RATIONALE_THRESHOLDS["outcomes"]:
        clause = _grad_rate_clause(program)
        if clause:
            clauses.append(clause)

    sentence = ", ".join(clauses) if clauses else FALLBACK_RATIONALE
    return f"{program.school_name}: {sentence}."


def _grad_rate_clause(program: ProgramRow) -> str:
    if not program.grad_rate or not program.borough_grad_rate_median:
        return ""
    delta = round_half_up((program.grad_rate - program.borough_grad_rate_median) * 100)
    if delta == 0:
        return ""
    direction = "above" if delta > 0 else "below"
    return f"grad rate {abs(delta)} pts {direction} borough avg"
