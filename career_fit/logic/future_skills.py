"""
Future Skills Profile

Derives the WEF 16 future-ready skills from a normalized user profile, with
no additional questions asked of the student.

Every 0-100 entry of the values, interest and readiness sections is spread
over related skills by fixed correlation weights; the learning style adds its
dominant Kolb quadrant only. A skill's score is the weight-averaged sum of
everything that feeds it.

The profile is descriptive and never enters a fit score.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from .constants import (
    FutureSkill,
    InterestTheme,
    LearningStage,
    LearningStyle,
    SCORE_DECIMALS,
    ScoreComponent,
    Subject,
    ValueDomain,
)
from .contracts import (
    FutureSkillScore,
    FutureSkillsProfile,
    LearningStyleVector,
    SkillSource,
    UserProfile,
)
from .exceptions import IncompleteResponsesError


logger = logging.getLogger(__name__)

SkillWeights = Tuple[Tuple[FutureSkill, float], ...]

SKILL_LABELS: Dict[FutureSkill, str] = {
    FutureSkill.LITERACY: "Literacy",
    FutureSkill.NUMERACY: "Numeracy",
    FutureSkill.SCIENTIFIC_LITERACY: "Scientific Literacy",
    FutureSkill.ICT_LITERACY: "ICT Literacy",
    FutureSkill.FINANCIAL_LITERACY: "Financial Literacy",
    FutureSkill.CULTURAL_CIVIC_LITERACY: "Cultural and Civic Literacy",
    FutureSkill.CRITICAL_THINKING: "Critical Thinking and Problem Solving",
    FutureSkill.CREATIVITY: "Creativity",
    FutureSkill.COMMUNICATION: "Communication",
    FutureSkill.COLLABORATION: "Collaboration",
    FutureSkill.CURIOSITY: "Curiosity",
    FutureSkill.INITIATIVE: "Initiative",
    FutureSkill.PERSISTENCE_GRIT: "Persistence and Grit",
    FutureSkill.ADAPTABILITY: "Adaptability",
    FutureSkill.LEADERSHIP: "Leadership",
    FutureSkill.SOCIAL_CULTURAL_AWARENESS: "Social and Cultural Awareness",
}

SOURCE_LABELS: Dict[ScoreComponent, str] = {
    ScoreComponent.VALUES: "Values",
    ScoreComponent.INTEREST: "Interests",
    ScoreComponent.LEARNING_STYLE: "Learning style",
    ScoreComponent.READINESS: "Subject readiness",
}

TOP_SKILL_COUNT = 5

_S = FutureSkill

# =============================================================================
# CORRELATION TABLES
# =============================================================================

VALUES_TO_SKILLS: Mapping[ValueDomain, SkillWeights] = {
    ValueDomain.ACHIEVEMENT: (
        (_S.INITIATIVE, 0.8), (_S.PERSISTENCE_GRIT, 0.7),
        (_S.CRITICAL_THINKING, 0.5), (_S.LEADERSHIP, 0.4),
    ),
    ValueDomain.BENEVOLENCE: (
        (_S.COLLABORATION, 0.9), (_S.SOCIAL_CULTURAL_AWARENESS, 0.7),
        (_S.COMMUNICATION, 0.6), (_S.LEADERSHIP, 0.5),
    ),
    ValueDomain.UNIVERSALISM: (
        (_S.SOCIAL_CULTURAL_AWARENESS, 1.0), (_S.CULTURAL_CIVIC_LITERACY, 0.9),
        (_S.CURIOSITY, 0.6), (_S.ADAPTABILITY, 0.5),
    ),
    ValueDomain.SELF_DIRECTION: (
        (_S.CURIOSITY, 0.9), (_S.INITIATIVE, 0.8),
        (_S.CREATIVITY, 0.7), (_S.CRITICAL_THINKING, 0.6),
    ),
    ValueDomain.SECURITY: (
        (_S.PERSISTENCE_GRIT, 0.6), (_S.ADAPTABILITY, 0.5), (_S.COLLABORATION, 0.4),
    ),
    ValueDomain.POWER: (
        (_S.LEADERSHIP, 0.9), (_S.INITIATIVE, 0.7), (_S.COMMUNICATION, 0.6),
    ),
    ValueDomain.HEDONISM: (
        (_S.CREATIVITY, 0.6), (_S.ADAPTABILITY, 0.5), (_S.CURIOSITY, 0.4),
    ),
}

INTEREST_TO_SKILLS: Mapping[InterestTheme, SkillWeights] = {
    InterestTheme.REALISTIC: (
        (_S.ICT_LITERACY, 0.7), (_S.NUMERACY, 0.6),
        (_S.CRITICAL_THINKING, 0.6), (_S.PERSISTENCE_GRIT, 0.5),
    ),
    InterestTheme.INVESTIGATIVE: (
        (_S.SCIENTIFIC_LITERACY, 0.9), (_S.CRITICAL_THINKING, 0.9),
        (_S.CURIOSITY, 0.8), (_S.NUMERACY, 0.7),
    ),
    InterestTheme.ARTISTIC: (
        (_S.CREATIVITY, 1.0), (_S.COMMUNICATION, 0.7),
        (_S.CURIOSITY, 0.6), (_S.CULTURAL_CIVIC_LITERACY, 0.5),
    ),
    InterestTheme.SOCIAL: (
        (_S.COLLABORATION, 0.9), (_S.COMMUNICATION, 0.9),
        (_S.SOCIAL_CULTURAL_AWARENESS, 0.8), (_S.LEADERSHIP, 0.6),
    ),
    InterestTheme.ENTERPRISING: (
        (_S.LEADERSHIP, 0.9), (_S.INITIATIVE, 0.9),
        (_S.COMMUNICATION, 0.8), (_S.ADAPTABILITY, 0.7),
    ),
    InterestTheme.CONVENTIONAL: (
        (_S.NUMERACY, 0.7), (_S.FINANCIAL_LITERACY, 0.7),
        (_S.PERSISTENCE_GRIT, 0.6), (_S.ICT_LITERACY, 0.5),
    ),
}

LEARNING_STYLE_TO_SKILLS: Mapping[LearningStyle, SkillWeights] = {
    LearningStyle.DIVERGING: (
        (_S.CREATIVITY, 0.9), (_S.CURIOSITY, 0.8),
        (_S.SOCIAL_CULTURAL_AWARENESS, 0.7), (_S.COLLABORATION, 0.6),
    ),
    LearningStyle.ASSIMILATING: (
        (_S.CRITICAL_THINKING, 0.9), (_S.SCIENTIFIC_LITERACY, 0.8),
        (_S.NUMERACY, 0.7), (_S.CURIOSITY, 0.6),
    ),
    LearningStyle.CONVERGING: (
        (_S.CRITICAL_THINKING, 0.9), (_S.INITIATIVE, 0.8),
        (_S.ICT_LITERACY, 0.7), (_S.PERSISTENCE_GRIT, 0.6),
    ),
    LearningStyle.ACCOMMODATING: (
        (_S.ADAPTABILITY, 0.9), (_S.INITIATIVE, 0.8),
        (_S.LEADERSHIP, 0.7), (_S.COLLABORATION, 0.6),
    ),
}

SUBJECT_TO_SKILLS: Mapping[Subject, SkillWeights] = {
    Subject.MATHEMATICS: (
        (_S.NUMERACY, 1.0), (_S.CRITICAL_THINKING, 0.8), (_S.PERSISTENCE_GRIT, 0.5),
    ),
    Subject.SCIENCE: (
        (_S.SCIENTIFIC_LITERACY, 1.0), (_S.CRITICAL_THINKING, 0.9), (_S.CURIOSITY, 0.7),
    ),
    Subject.ENGLISH: (
        (_S.LITERACY, 1.0), (_S.COMMUNICATION, 0.8), (_S.CRITICAL_THINKING, 0.6),
    ),
    Subject.ARABIC: (
        (_S.LITERACY, 1.0), (_S.CULTURAL_CIVIC_LITERACY, 0.9), (_S.COMMUNICATION, 0.7),
    ),
    Subject.SOCIAL_STUDIES: (
        (_S.CULTURAL_CIVIC_LITERACY, 1.0), (_S.SOCIAL_CULTURAL_AWARENESS, 0.9),
        (_S.CRITICAL_THINKING, 0.7),
    ),
    Subject.COMPUTER_SCIENCE: (
        (_S.ICT_LITERACY, 1.0), (_S.CRITICAL_THINKING, 0.8), (_S.CREATIVITY, 0.6),
    ),
}

# Stage pair that defines each Kolb quadrant
QUADRANT_STAGES: Mapping[LearningStyle, Tuple[LearningStage, LearningStage]] = {
    LearningStyle.DIVERGING: (LearningStage.CONCRETE, LearningStage.REFLECTIVE),
    LearningStyle.ASSIMILATING: (LearningStage.ABSTRACT, LearningStage.REFLECTIVE),
    LearningStyle.CONVERGING: (LearningStage.ABSTRACT, LearningStage.ACTIVE),
    LearningStyle.ACCOMMODATING: (LearningStage.CONCRETE, LearningStage.ACTIVE),
}


# =============================================================================
# CALCULATION
# =============================================================================

class _Accumulator:
    def __init__(self):
        self.weighted_sum = 0.0
        self.total_weight = 0.0
        self.sources: List[SkillSource] = []

    def add(self, component: ScoreComponent, item: str, score: float, weight: float):
        contribution = score * weight
        self.weighted_sum += contribution
        self.total_weight += weight
        self.sources.append(SkillSource(component=component, item=item, contribution=contribution))

    def score(self) -> Optional[float]:
        if self.total_weight <= 0:
            return None
        return round(self.weighted_sum / self.total_weight, SCORE_DECIMALS)


def dominant_quadrant(learning_style: LearningStyleVector) -> Tuple[LearningStyle, float]:
    """Quadrant whose two stages carry the most weight, with their mean."""
    stages = learning_style.as_dict()
    scored = [
        (style, (stages[first] + stages[second]) / 2)
        for style, (first, second) in QUADRANT_STAGES.items()
    ]
    return max(scored, key=lambda pair: pair[1])


def has_skill_evidence(user: UserProfile) -> bool:
    return any((
        user.values is not None,
        user.interests is not None,
        user.learning_style is not None,
        bool(user.readiness),
    ))


def calculate_future_skills(user: UserProfile) -> FutureSkillsProfile:
    """
    Build the future skills profile for a user.

    Raises:
        IncompleteResponsesError: the profile holds no section to derive from
    """
    if not has_skill_evidence(user):
        raise IncompleteResponsesError(
            "future_skills", [c.value for c in SOURCE_LABELS]
        )

    accumulators = {skill: _Accumulator() for skill in FutureSkill}

    def spread(component, item, score, weights):
        for skill, weight in weights:
            accumulators[skill].add(component, item, score, weight)

    if user.values is not None:
        for domain, score in user.values.as_dict().items():
            spread(ScoreComponent.VALUES, domain.value, score, VALUES_TO_SKILLS[domain])

    if user.interests is not None:
        for theme, score in user.interests.as_dict().items():
            spread(ScoreComponent.INTEREST, theme.value, score, INTEREST_TO_SKILLS[theme])

    if user.learning_style is not None:
        style, score = dominant_quadrant(user.learning_style)
        spread(ScoreComponent.LEARNING_STYLE, style.value, score, LEARNING_STYLE_TO_SKILLS[style])

    for subject, score in sorted((user.readiness or {}).items(), key=lambda kv: kv[0].value):
        spread(ScoreComponent.READINESS, subject.value, score, SUBJECT_TO_SKILLS[subject])

    order = {skill: i for i, skill in enumerate(FutureSkill)}
    scores = [
        FutureSkillScore(
            skill=skill,
            label=SKILL_LABELS[skill],
            score=acc.score(),
            sources=acc.sources,
        )
        for skill, acc in accumulators.items()
    ]
    # Scored skills first, highest score first; unscored skills trail
    scores.sort(key=lambda s: (s.score is None, -(s.score or 0.0), order[s.skill]))

    scored = [s for s in scores if s.score is not None]
    overall = round(sum(s.score for s in scored) / len(scored), SCORE_DECIMALS) if scored else 0.0

    profile = FutureSkillsProfile(
        user_id=user.user_id,
        scores=scores,
        overall_readiness=overall,
        top_skills=[s.skill for s in scored[:TOP_SKILL_COUNT]],
        growth_areas=[s.skill for s in scored[-TOP_SKILL_COUNT:]],
        source_attribution=source_attribution(scores),
    )
    logger.info(
        f"Future skills for user {user.user_id or 'anonymous'}: "
        f"{len(scored)} scored, overall {overall}"
    )
    return profile


# =============================================================================
# EXPLANATIONS
# =============================================================================

def source_attribution(scores: List[FutureSkillScore]) -> str:
    """Profile sections that fed any skill, in fixed section order."""
    used = {source.component for s in scores for source in s.sources}
    sections = [label for component, label in SOURCE_LABELS.items() if component in used]
    if not sections:
        return "Calculated from assessment data"
    return "Calculated from " + ", ".join(sections)


def explain_skill(skill_score: FutureSkillScore) -> str:
    """One-line account of where a skill score came from."""
    if not skill_score.sources:
        return f"{skill_score.label}: No assessment data available yet."

    by_section: Dict[ScoreComponent, List[str]] = {}
    for source in skill_score.sources:
        by_section.setdefault(source.component, []).append(source.item)

    parts = [
        f"{SOURCE_LABELS[component]} ({', '.join(items)})"
        for component, items in by_section.items()
    ]
    return f"{skill_score.label} ({skill_score.score:g}/100): Based on {'; '.join(parts)}"


def skill_columns(profile: FutureSkillsProfile) -> Dict[str, float]:
    """Flat column mapping of scored skills plus overall_readiness."""
    columns = {s.skill.value: s.score for s in profile.scores if s.score is not None}
    columns["overall_readiness"] = profile.overall_readiness
    return columns
