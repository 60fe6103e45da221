"""
Data Contracts for the Career Fit Scoring Engine

Defines Pydantic models for the user/program/country profiles (input) and
ScoreResult / ScoringOutput (output).
These contracts are the API boundary for the scoring engine.
"""

from enum import Enum
from typing import Annotated, ClassVar, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    ENGINE_VERSION,
    FutureSkill,
    InterestTheme,
    LearningStage,
    LearningStyle,
    MAX_SCORE,
    Priority,
    ScoreComponent,
    ScoreStatus,
    Subject,
    Tier,
    ValueDomain,
)


NonNegative = Annotated[float, Field(ge=0.0)]
Percent = Annotated[float, Field(ge=0.0, le=100.0)]


# =============================================================================
# DOMAIN VECTORS
# =============================================================================

class DomainVector(BaseModel):
    """
    Fixed-field vector with one named, non-negative entry per domain.

    Subclasses declare one field per member of ``domains``; unknown keys are
    rejected at construction.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    domains: ClassVar[Type[Enum]]

    def as_dict(self) -> Dict[Enum, float]:
        return {domain: getattr(self, domain.value) for domain in self.domains}

    def total(self) -> float:
        return sum(self.as_dict().values())

    def max_value(self) -> float:
        return max(self.as_dict().values())

    @classmethod
    def from_mapping(cls, values: Mapping):
        """Build from a mapping keyed by domain enum or its string value."""
        return cls(**{cls.domains(key).value: value for key, value in values.items()})


class InterestVector(DomainVector):
    domains: ClassVar[Type[Enum]] = InterestTheme

    realistic: NonNegative
    investigative: NonNegative
    artistic: NonNegative
    social: NonNegative
    enterprising: NonNegative
    conventional: NonNegative


class ValuesVector(DomainVector):
    domains: ClassVar[Type[Enum]] = ValueDomain

    achievement: NonNegative
    benevolence: NonNegative
    universalism: NonNegative
    self_direction: NonNegative
    security: NonNegative
    power: NonNegative
    hedonism: NonNegative


class LearningStyleVector(DomainVector):
    domains: ClassVar[Type[Enum]] = LearningStage

    concrete: NonNegative
    reflective: NonNegative
    abstract: NonNegative
    active: NonNegative


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class RawAssessment(BaseModel):
    """
    Raw questionnaire responses as collected by the assessment flow.
    Likert answers are keyed by item id (see constants question banks).
    """
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None

    interest_responses: Optional[Dict[str, int]] = None   # R1..C5
    values_responses: Optional[Dict[str, int]] = None     # ACH1..HED3
    kolb_responses: Optional[Dict[str, int]] = None       # ce1..ae6

    readiness: Optional[Dict[Subject, Percent]] = None
    priority_weights: Optional[Dict[Priority, Percent]] = None
    aspirations: Optional[str] = None


class UserProfile(BaseModel):
    """
    Canonical, normalized user profile.
    A vector left as None is incomplete and blocks any tier that requires it.
    """
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None

    interests: Optional[InterestVector] = None
    values: Optional[ValuesVector] = None
    learning_style: Optional[LearningStyleVector] = None
    learning_style_label: Optional[LearningStyle] = None

    readiness: Optional[Dict[Subject, Percent]] = None
    priority_weights: Optional[Dict[Priority, Percent]] = None

    # Qualitative only - never folded into the final score
    aspirations: Optional[str] = None

    @model_validator(mode="after")
    def check_vector_bounds(self):
        for name in ("interests", "values", "learning_style"):
            vector = getattr(self, name)
            if vector is not None and vector.max_value() > MAX_SCORE:
                raise ValueError(f"{name} entries must lie in [0, 100]")
        return self


class ProgramProfile(BaseModel):
    """
    Reference profile for a career/education program.
    Read-only to the engine; values_profile is owned by the value-mapping batch.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    program_id: str
    title: str = ""
    onet_code: Optional[str] = None

    interest_profile: InterestVector
    values_profile: ValuesVector
    subject_needs: Dict[Subject, NonNegative] = Field(default_factory=dict)
    priorities: Dict[Priority, NonNegative] = Field(default_factory=dict)
    learning_style_fit: LearningStyleVector


class CountryProfile(BaseModel):
    """National priority weights, optionally with a market-demand index."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    country_code: str
    name: str = ""
    priority_weights: Dict[Priority, Percent] = Field(default_factory=dict)
    market_demand_index: Optional[Dict[Priority, Percent]] = None


class ScoringRequest(BaseModel):
    """One user scored against one or more programs."""
    user: UserProfile
    programs: List[ProgramProfile] = Field(..., min_length=1)
    country: Optional[CountryProfile] = None
    tier: Tier = Tier.FULL
    limit: Optional[int] = Field(default=None, ge=1)


# =============================================================================
# EXPLANATORY FIELDS
# =============================================================================

class ValueContribution(BaseModel):
    """A value domain's share of the Values Fit score."""
    model_config = ConfigDict(frozen=True)

    domain: ValueDomain
    contribution: float
    user_value: float
    program_value: float


class PriorityMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    priority: Priority
    contribution: float
    program_weight: float


class SubjectMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: Subject
    readiness: float
    need: float


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ComponentScore(BaseModel):
    """Result of a single component scorer."""
    model_config = ConfigDict(frozen=True)

    component: ScoreComponent
    score: float = Field(ge=0.0, le=100.0)
    is_neutral: bool = False
    explanation: str = ""

    top_values: List[ValueContribution] = Field(default_factory=list)
    matched_priorities: List[PriorityMatch] = Field(default_factory=list)
    matched_subjects: List[SubjectMatch] = Field(default_factory=list)


class ScoredProgram(BaseModel):
    """
    A program with computed scores.
    Used between scoring and ranking stages.
    """
    model_config = ConfigDict(frozen=True)

    program: ProgramProfile
    tier: Tier
    status: ScoreStatus
    component_scores: Dict[ScoreComponent, ComponentScore] = Field(default_factory=dict)
    final_score: Optional[float] = None
    missing_components: List[ScoreComponent] = Field(default_factory=list)
    interest_tags: List[str] = Field(default_factory=list)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ScoreResult(BaseModel):
    """
    Scores for one (user, program) pair.
    When status is incomplete_profile every numeric field is None.
    """
    model_config = ConfigDict(frozen=True)

    program_id: str
    program_title: str = ""
    onet_code: Optional[str] = None
    tier: Tier
    status: ScoreStatus

    final_score: Optional[float] = None
    interest_score: Optional[float] = None
    values_score: Optional[float] = None
    readiness_score: Optional[float] = None
    alignment_score: Optional[float] = None
    learning_style_score: Optional[float] = None

    top_values: List[ValueContribution] = Field(default_factory=list)
    matched_priorities: List[PriorityMatch] = Field(default_factory=list)
    matched_subjects: List[SubjectMatch] = Field(default_factory=list)

    neutral_components: List[ScoreComponent] = Field(default_factory=list)
    missing_components: List[ScoreComponent] = Field(default_factory=list)
    interest_tags: List[str] = Field(default_factory=list)

    rank: int = 0
    weights_version: str = ""


class SkillSource(BaseModel):
    """One profile entry's weighted contribution to a future skill."""
    model_config = ConfigDict(frozen=True)

    component: ScoreComponent
    item: str
    contribution: float


class FutureSkillScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: FutureSkill
    label: str
    # None when no profile section feeds this skill
    score: Optional[float] = None
    sources: List[SkillSource] = Field(default_factory=list)


class FutureSkillsProfile(BaseModel):
    """
    Future-ready skills derived from an already-normalized user profile.
    Informational only - never folded into any fit score.
    """
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    scores: List[FutureSkillScore] = Field(default_factory=list)
    overall_readiness: float = 0.0
    top_skills: List[FutureSkill] = Field(default_factory=list)
    growth_areas: List[FutureSkill] = Field(default_factory=list)
    source_attribution: str = ""


class ScoringOutput(BaseModel):
    """
    Output contract for the scoring engine.
    Contains ranked results with summary statistics.
    """
    request_id: Optional[str] = None
    user_id: Optional[str] = None
    tier: Tier
    status: ScoreStatus

    results: List[ScoreResult] = Field(default_factory=list)

    total_programs_evaluated: int = 0
    total_scored: int = 0

    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION
    weights_version: str = ""

    warnings: List[str] = Field(default_factory=list)
