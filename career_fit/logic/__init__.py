"""
Career Fit Logic Module

Provides the deterministic composite scoring engine for career programs.
"""

from .contracts import (
    RawAssessment,
    UserProfile,
    ProgramProfile,
    CountryProfile,
    InterestVector,
    ValuesVector,
    LearningStyleVector,
    ScoringRequest,
    ScoreResult,
    ScoringOutput,
    ComponentScore,
)
from .engine import FitScoringEngine, score_programs
from .normalizer import build_user_profile
from .future_skills import calculate_future_skills
from .constants import Tier, ScoreComponent, ScoreStatus

__all__ = [
    # Main engine
    "FitScoringEngine",
    "score_programs",
    "build_user_profile",
    "calculate_future_skills",

    # Contracts
    "RawAssessment",
    "UserProfile",
    "ProgramProfile",
    "CountryProfile",
    "InterestVector",
    "ValuesVector",
    "LearningStyleVector",
    "ScoringRequest",
    "ScoreResult",
    "ScoringOutput",
    "ComponentScore",

    # Enums
    "Tier",
    "ScoreComponent",
    "ScoreStatus",
]
