"""
Hard Filters

Discards programs that violate non-negotiable constraints before any scoring.
A failing program is excluded entirely, never merely down-scored.
"""

from typing import Iterable, List

from .contracts import ProgramRow, SlotState


def passes_hard_filters(program: ProgramRow, slots: SlotState) -> bool:
    """
    Return True when the program satisfies every hard rule.

    Rules:
    - excluded program IDs never pass
    - inclusion required -> program must offer inclusion
    - single-sex opt-out -> program must not be single-sex
    - non-empty borough set -> program borough must be a member
    - must-have arts, sports and AP courses: all-of
    - must-have languages: any-of
    """
    if program.program_id in slots.excludes:
        return False

    if slots.iep_inclusion_required and not program.has_inclusion:
        return False

    if slots.environment_prefs.single_sex_ok is False and program.single_sex:
        return False

    if slots.boroughs and program.borough not in slots.boroughs:
        return False

    must = slots.must_haves

    if must.arts and not all(tag in program.arts_tags for tag in must.arts):
        return False

    if must.sports and not all(sport in program.sports for sport in must.sports):
        return False

    # Languages are intentionally looser: one match is enough
    if must.languages and not any(lang in program.languages for lang in must.languages):
        return False

    if must.ap_courses and not all(course in program.ap_courses for course in must.ap_courses):
        return False

    return True


def apply_hard_filters(programs: Iterable[ProgramRow], slots: SlotState) -> List[ProgramRow]:
    """Keep passing programs in their input order."""
    return [p for p in programs if passes_hard_filters(p, slots)]
