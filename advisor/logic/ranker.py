"""
Ranker

Orders scored programs for display.
"""

from typing import List

from .contracts import ScoredProgram


def rank_programs(scored: List[ScoredProgram]) -> List[ScoredProgram]:
    """
    Sort by score, highest first.

    The sort is stable, so programs with equal scores keep their input
    (post-filter) order.
    """
    return sorted(scored, key=lambda s: s.score, reverse=True)
