"""
Scoring Engine

Main entry point that combines hard filters, pillar scoring, penalties,
rationale and ranking into a single pure pipeline.

Pipeline flow:
1. Hard filters - drop programs that break non-negotiable constraints
2. Pillar scoring - score each pillar independently
3. Aggregation - weight pillars, apply penalties, scale to 0-100
4. Rationale - templated one-sentence explanation
5. Ranking - highest score first, ties keep input order

The engine performs no I/O and keeps no state; it is safe to call
concurrently for independent requests.
"""

import logging
from typing import List, Sequence

from .aggregator import aggregate_scores, batch_aggregate
from .contracts import ProgramRow, ScoredProgram, SlotState, WeightModel
from .filters import apply_hard_filters
from .ranker import rank_programs

logger = logging.getLogger(__name__)


def score_programs(
    programs: Sequence[ProgramRow],
    slots: SlotState,
    weights: WeightModel
) -> List[ScoredProgram]:
    """
    Filter, score and rank programs for one family.

    Args:
        programs: Candidate program records
        slots: Family preferences
        weights: Pillar weights, passed explicitly

    Returns:
        Scored programs sorted by score (descending). Never contains a
        program that failed a hard filter.
    """
    survivors = apply_hard_filters(programs, slots)
    logger.debug("Hard filters kept %d of %d programs", len(survivors), len(programs))

    return rank_programs(batch_aggregate(survivors, slots, weights))


def score_program(
    program: ProgramRow,
    slots: SlotState,
    weights: WeightModel
) -> ScoredProgram:
    """
    Score a single program without applying hard filters.

    Useful for detail views of a program the family asked about directly;
    penalties (including the exclusion penalty) still apply.
    """
    return aggregate_scores(program, slots, weights)
