"""
Fit Scoring Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for scoring programs against a user profile.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from .contracts import (
    ComponentScore,
    CountryProfile,
    ProgramProfile,
    ScoredProgram,
    ScoringOutput,
    ScoringRequest,
    UserProfile,
)
from .constants import ENGINE_VERSION, ScoreComponent, ScoreStatus, Tier
from .aggregator import (
    compute_final_score,
    missing_components,
    validate_tier_weights,
    weights_version,
)
from .dimension_scorers import (
    score_alignment_fit,
    score_interest_fit,
    score_learning_style_fit,
    score_readiness_fit,
    score_values_fit,
    uncovered_subjects,
)
from .narrative import program_interest_tags
from .output_assembler import assemble_output
from .ranker import rank_programs
from ..settings import SCORING_MAX_WORKERS


logger = logging.getLogger(__name__)

# Weight tables are checked once when the engine is first imported.
validate_tier_weights()
WEIGHTS_VERSION = weights_version()


def available_components(
    user: UserProfile,
    program: Optional[ProgramProfile] = None,
) -> List[ScoreComponent]:
    """
    Components the user profile holds complete data for.

    Readiness is complete only when it covers every subject the program needs.
    """
    available = [ScoreComponent.ALIGNMENT]
    if user.interests is not None:
        available.append(ScoreComponent.INTEREST)
    if user.values is not None:
        available.append(ScoreComponent.VALUES)
    if user.readiness and not (
        program is not None and uncovered_subjects(user.readiness, program.subject_needs)
    ):
        available.append(ScoreComponent.READINESS)
    if user.learning_style is not None:
        available.append(ScoreComponent.LEARNING_STYLE)
    return available


class FitScoringEngine:
    """
    Scores a user profile against career programs.

    Pipeline flow:
    1. Completeness check - tier-required components must be present
    2. Component scoring - five independent pure scorers
    3. Aggregation - fixed tier weights, clamped to [0, 100]
    4. Ranking - unordered worker results sorted by final score
    5. Output assembly - ScoringOutput with warnings
    """

    def __init__(self, max_workers: Optional[int] = None):
        """
        Args:
            max_workers: Worker threads for per-program fan-out. 1 scores
                inline. Defaults to SCORING_MAX_WORKERS.
        """
        self.max_workers = max(1, max_workers or SCORING_MAX_WORKERS)
        self.version = ENGINE_VERSION

    def score_program(
        self,
        user: UserProfile,
        program: ProgramProfile,
        country: Optional[CountryProfile] = None,
        tier: Tier = Tier.FULL,
    ) -> ScoredProgram:
        """
        Score a single program for a user.

        If any component the tier requires is missing from the profile the
        program is returned with status incomplete_profile and no scores.
        """
        tags = program_interest_tags(user.aspirations, program.title)
        available = available_components(user, program)

        missing = missing_components(tier, available)
        if missing:
            return ScoredProgram(
                program=program,
                tier=tier,
                status=ScoreStatus.INCOMPLETE_PROFILE,
                missing_components=missing,
                interest_tags=tags,
            )

        components: Dict[ScoreComponent, ComponentScore] = {}
        if ScoreComponent.INTEREST in available:
            components[ScoreComponent.INTEREST] = score_interest_fit(
                user.interests, program.interest_profile
            )
        if ScoreComponent.VALUES in available:
            components[ScoreComponent.VALUES] = score_values_fit(
                user.values, program.values_profile
            )
        if ScoreComponent.READINESS in available:
            components[ScoreComponent.READINESS] = score_readiness_fit(
                user.readiness, program.subject_needs
            )
        if ScoreComponent.LEARNING_STYLE in available:
            components[ScoreComponent.LEARNING_STYLE] = score_learning_style_fit(
                user.learning_style, program.learning_style_fit
            )
        components[ScoreComponent.ALIGNMENT] = score_alignment_fit(
            program.priorities, country, user.priority_weights
        )

        final_score = compute_final_score(
            {component: c.score for component, c in components.items()}, tier
        )

        return ScoredProgram(
            program=program,
            tier=tier,
            status=ScoreStatus.COMPLETE,
            component_scores=components,
            final_score=final_score,
            interest_tags=tags,
        )

    def score_all(
        self,
        user: UserProfile,
        programs: List[ProgramProfile],
        country: Optional[CountryProfile] = None,
        tier: Tier = Tier.FULL,
    ) -> List[ScoredProgram]:
        """
        Fan out per-program scoring across worker threads.

        Results are collected in completion order; callers rank them.
        """
        if self.max_workers == 1 or len(programs) <= 1:
            return [self.score_program(user, p, country, tier) for p in programs]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [
                pool.submit(self.score_program, user, p, country, tier)
                for p in programs
            ]
            return [f.result() for f in futures]

    def score_programs(self, request: ScoringRequest) -> ScoringOutput:
        """
        Score every program in a request and return ranked output.

        Args:
            request: User profile, programs, optional country, tier and limit

        Returns:
            ScoringOutput with ranked results
        """
        start_time = time.perf_counter()

        scored = self.score_all(request.user, request.programs, request.country, request.tier)
        ranked = rank_programs(scored)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Scored {len(request.programs)} programs for user "
            f"{request.user.user_id or 'anonymous'} (tier={request.tier.value}) "
            f"in {processing_time:.1f}ms"
        )

        return assemble_output(
            user=request.user,
            tier=request.tier,
            ranked=ranked,
            country=request.country,
            total_evaluated=len(request.programs),
            weights_version=WEIGHTS_VERSION,
            limit=request.limit,
            processing_time_ms=round(processing_time, 2),
        )

    def score_programs_from_dict(self, request_data: dict) -> ScoringOutput:
        """
        Score programs from a plain dictionary request.

        Convenience method for API integration.
        """
        return self.score_programs(ScoringRequest(**request_data))


# Convenience function for simple usage
def score_programs(
    request: ScoringRequest,
    max_workers: Optional[int] = None,
) -> ScoringOutput:
    """
    Convenience function to score a request with a fresh engine.

    Args:
        request: Scoring request
        max_workers: Optional worker override

    Returns:
        ScoringOutput
    """
    engine = FitScoringEngine(max_workers=max_workers)
    return engine.score_programs(request)
