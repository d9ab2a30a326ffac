"""
Output Assembler

Joins scored programs with display fields from their source records and
builds the final ScoreResponse contract.
"""

from typing import Dict, List, Optional, Sequence

from .contracts import (
    ProgramResult,
    ProgramRow,
    ProgramsMeta,
    ScoredProgram,
    ScoreResponse,
)


def label_admissions(method: Optional[str]) -> str:
    """Human-readable admissions label for result cards."""
    if not method:
        return "Other"
    text = method.lower()
    if "audition" in text:
        return "Audition"
    if "screen" in text:
        return "Screened"
    if "edopt" in text:
        return "Educational Option"
    if "open" in text:
        return "Open"
    if "zone" in text:
        return "Zoned"
    return "Other"


def assemble_result(scored: ScoredProgram, source: Optional[ProgramRow]) -> ProgramResult:
    """
    Convert a ScoredProgram into a ProgramResult.

    Args:
        scored: The scored program
        source: Record the program was scored from, if still available

    Returns:
        ProgramResult carrying both scoring and source display fields
    """
    display = {}
    if source is not None:
        display = {
            "borough": source.borough,
            "admissions_priorities": list(source.admissions_priorities),
            "eligibility_text": source.eligibility_text,
            "program_code": source.program_code,
            "tags": list(source.program_tags),
        }

    return ProgramResult(
        **scored.model_dump(),
        admissions_label=label_admissions(scored.admission_method),
        **display,
    )


def join_with_sources(
    scored: Sequence[ScoredProgram],
    programs: Sequence[ProgramRow]
) -> List[ProgramResult]:
    """Join each scored program with its source record by program ID, keeping rank order."""
    by_id: Dict[str, ProgramRow] = {}
    for program in programs:
        # First record wins when an ID repeats, matching the filter order
        by_id.setdefault(program.program_id, program)

    return [assemble_result(s, by_id.get(s.program_id)) for s in scored]


def assemble_output(
    scored: Sequence[ScoredProgram],
    programs: Sequence[ProgramRow],
    meta: ProgramsMeta
) -> ScoreResponse:
    return ScoreResponse(
        ok=True,
        results=join_with_sources(scored, programs),
        meta=meta,
    )
