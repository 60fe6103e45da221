"""
Ranker

Orders the unordered set of scored programs collected from the scoring
workers. Scored programs come first by final score; programs whose profile
was incomplete are kept (they still carry narrative context) but sort last.
"""

from typing import List, Optional

from .contracts import ScoredProgram
from .constants import ScoreStatus


def _sort_key(scored: ScoredProgram):
    if scored.status == ScoreStatus.COMPLETE and scored.final_score is not None:
        return (0, -scored.final_score, scored.program.program_id)
    return (1, 0.0, scored.program.program_id)


def rank_programs(scored_programs: List[ScoredProgram]) -> List[ScoredProgram]:
    """
    Rank programs by final score (descending).

    Ties break on program_id so the order never depends on the order in
    which workers finished.
    """
    return sorted(scored_programs, key=_sort_key)


def select_top(
    ranked: List[ScoredProgram],
    limit: Optional[int] = None,
) -> List[ScoredProgram]:
    """Top N of an already ranked list; None keeps everything."""
    if limit is None:
        return list(ranked)
    return ranked[:limit]
