"""
Output Assembler

Transforms internal scoring data into the ScoreResult / ScoringOutput
contracts. Numeric fields are rounded here, once, after the final score has
been computed from unrounded component scores.
"""

import logging
import uuid
from typing import List, Optional

from .contracts import (
    CountryProfile,
    ScoredProgram,
    ScoreResult,
    ScoringOutput,
    UserProfile,
)
from .constants import (
    COMPONENT_LABELS,
    SCORE_DECIMALS,
    ScoreComponent,
    ScoreStatus,
    Tier,
)
from .ranker import select_top


logger = logging.getLogger(__name__)


def _round(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, SCORE_DECIMALS)


def assemble_result(
    scored: ScoredProgram,
    rank: int,
    weights_version: str,
) -> ScoreResult:
    """
    Convert a ScoredProgram into a ScoreResult.

    An incomplete profile exposes no numeric score at all, only the missing
    components and narrative tags.
    """
    program = scored.program
    base = dict(
        program_id=program.program_id,
        program_title=program.title,
        onet_code=program.onet_code,
        tier=scored.tier,
        status=scored.status,
        interest_tags=scored.interest_tags,
        rank=rank,
        weights_version=weights_version,
    )

    if scored.status != ScoreStatus.COMPLETE:
        return ScoreResult(missing_components=scored.missing_components, **base)

    components = scored.component_scores

    def score_of(component: ScoreComponent) -> Optional[float]:
        component_score = components.get(component)
        return _round(component_score.score) if component_score else None

    values = components.get(ScoreComponent.VALUES)
    alignment = components.get(ScoreComponent.ALIGNMENT)
    readiness = components.get(ScoreComponent.READINESS)

    return ScoreResult(
        final_score=_round(scored.final_score),
        interest_score=score_of(ScoreComponent.INTEREST),
        values_score=score_of(ScoreComponent.VALUES),
        readiness_score=score_of(ScoreComponent.READINESS),
        alignment_score=score_of(ScoreComponent.ALIGNMENT),
        learning_style_score=score_of(ScoreComponent.LEARNING_STYLE),
        top_values=values.top_values if values else [],
        matched_priorities=alignment.matched_priorities if alignment else [],
        matched_subjects=readiness.matched_subjects if readiness else [],
        neutral_components=[c for c, s in components.items() if s.is_neutral],
        **base,
    )


def _generate_warnings(
    user: UserProfile,
    country: Optional[CountryProfile],
    ranked: List[ScoredProgram],
) -> List[str]:
    warnings: List[str] = []

    incomplete = [s for s in ranked if s.status != ScoreStatus.COMPLETE]
    if incomplete:
        missing = sorted({c for s in incomplete for c in s.missing_components}, key=lambda c: c.value)
        labels = ", ".join(COMPONENT_LABELS[c] for c in missing)
        warnings.append(
            f"Incomplete profile: {labels} required for this tier. "
            f"No final score was produced for {len(incomplete)} program(s)."
        )

    if country is None and not user.priority_weights:
        warnings.append(
            "No country or personal priorities supplied - alignment uses its neutral default."
        )

    neutral_count = sum(
        1 for s in ranked
        for c in s.component_scores.values()
        if c.is_neutral
    )
    if neutral_count:
        warnings.append(
            f"{neutral_count} component score(s) used a neutral default because the program data carries no signal."
        )

    return warnings


def assemble_output(
    user: UserProfile,
    tier: Tier,
    ranked: List[ScoredProgram],
    country: Optional[CountryProfile],
    total_evaluated: int,
    weights_version: str,
    limit: Optional[int] = None,
    processing_time_ms: Optional[float] = None,
) -> ScoringOutput:
    """
    Assemble the final ScoringOutput from the full ranked list.

    Only the top `limit` programs are emitted; counts and warnings cover
    every program evaluated. Overall status is complete when at least one
    program received a final score.
    """
    results = [
        assemble_result(scored, rank, weights_version)
        for rank, scored in enumerate(select_top(ranked, limit), start=1)
    ]
    total_scored = sum(1 for s in ranked if s.status == ScoreStatus.COMPLETE)

    status = ScoreStatus.COMPLETE if total_scored else ScoreStatus.INCOMPLETE_PROFILE
    warnings = _generate_warnings(user, country, ranked)
    if warnings:
        logger.info(f"Scoring for user {user.user_id or 'anonymous'} produced {len(warnings)} warning(s)")

    return ScoringOutput(
        request_id=str(uuid.uuid4()),
        user_id=user.user_id,
        tier=tier,
        status=status,
        results=results,
        total_programs_evaluated=total_evaluated,
        total_scored=total_scored,
        processing_time_ms=processing_time_ms,
        weights_version=weights_version,
        warnings=warnings,
    )
