"""
Vector Normalizer

Converts raw questionnaire responses into the canonical per-domain vectors
consumed by the component scorers.

- Interest and values items aggregate into their domain bucket and rescale
  onto 0-100 (the same scale the program reference vectors use).
- Learning style goes through the Kolb two-axis transform and is rescaled
  into a stage distribution.

Missing responses are never defaulted: the section is reported incomplete.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple, Type

from .constants import (
    INTEREST_ITEM_DOMAINS,
    KOLB_AXIS_RANGE,
    KOLB_DIMENSIONS,
    KOLB_ITEM_DIMENSIONS,
    LIKERT_MAX,
    LIKERT_MIN,
    LearningStage,
    LearningStyle,
    MAX_STAGE_SHARE,
    STAGE_SCALE,
    VALUES_ITEM_DOMAINS,
    InterestTheme,
    ValueDomain,
)
from .contracts import (
    InterestVector,
    LearningStyleVector,
    RawAssessment,
    UserProfile,
    ValuesVector,
)
from .exceptions import IncompleteResponsesError, InvalidResponseError


logger = logging.getLogger(__name__)


# =============================================================================
# LIKERT AGGREGATION
# =============================================================================

def sum_likert(
    responses: Mapping[str, float],
    item_domains: Mapping[str, object],
    section: str,
    scale_min: int = LIKERT_MIN,
    scale_max: int = LIKERT_MAX,
    reversed_items: Iterable[str] = (),
) -> Tuple[Dict[object, float], Dict[object, int]]:
    """
    Sum item responses into their domain buckets.

    Returns (sums, item counts) per domain. Reversed items score
    ``scale_min + scale_max - value``. Responses for unknown item ids are
    ignored.
    """
    missing = [item_id for item_id in item_domains if item_id not in responses]
    if missing:
        raise IncompleteResponsesError(section, missing)

    reversed_set = set(reversed_items)
    sums: Dict[object, float] = {}
    counts: Dict[object, int] = {}

    for item_id, domain in item_domains.items():
        value = responses[item_id]
        if value is None:
            raise IncompleteResponsesError(section, [item_id])
        if not scale_min <= value <= scale_max:
            raise InvalidResponseError(item_id, value, scale_min, scale_max)

        score = (scale_min + scale_max - value) if item_id in reversed_set else value
        sums[domain] = sums.get(domain, 0.0) + score
        counts[domain] = counts.get(domain, 0) + 1

    return sums, counts


def normalize_likert(
    responses: Mapping[str, float],
    item_domains: Mapping[str, Enum],
    domains: Type[Enum],
    section: str,
    scale_min: int = LIKERT_MIN,
    scale_max: int = LIKERT_MAX,
    reversed_items: Iterable[str] = (),
) -> Dict[Enum, float]:
    """
    Aggregate Likert items into per-domain scores on a 0-100 scale.

    A domain with n items spans n*scale_min .. n*scale_max and is rescaled
    linearly onto 0..100.
    """
    sums, counts = sum_likert(
        responses, item_domains, section, scale_min, scale_max, reversed_items
    )

    uncovered = [domain.value for domain in domains if domain not in counts]
    if uncovered:
        raise IncompleteResponsesError(section, uncovered)

    span = scale_max - scale_min
    normalized: Dict[Enum, float] = {}
    for domain in domains:
        n = counts[domain]
        normalized[domain] = (sums[domain] - n * scale_min) / (n * span) * 100.0

    return normalized


def normalize_interests(responses: Mapping[str, float]) -> InterestVector:
    """RIASEC items (R1..C5) -> InterestVector."""
    scores = normalize_likert(responses, INTEREST_ITEM_DOMAINS, InterestTheme, "interests")
    return InterestVector.from_mapping(scores)


def normalize_values(responses: Mapping[str, float]) -> ValuesVector:
    """Values items (ACH1..HED3) -> ValuesVector."""
    scores = normalize_likert(responses, VALUES_ITEM_DOMAINS, ValueDomain, "values")
    return ValuesVector.from_mapping(scores)


# =============================================================================
# LEARNING STYLE (KOLB)
# =============================================================================

def kolb_axes(responses: Mapping[str, float]) -> Tuple[float, float]:
    """
    Compute the two bipolar Kolb axes from the 24-item questionnaire.

    Returns (abstract_axis, active_axis):
    - abstract_axis = AC - CE  (positive = thinking, negative = feeling)
    - active_axis   = AE - RO  (positive = doing, negative = watching)
    """
    sums, _ = sum_likert(responses, KOLB_ITEM_DIMENSIONS, "learning_style")
    ce, ro, ac, ae = (sums[dim] for dim in KOLB_DIMENSIONS)
    return ac - ce, ae - ro


def scale_axis(axis_value: float, axis_range: float = KOLB_AXIS_RANGE) -> float:
    """Map a raw axis value onto the symmetric +/-100 range."""
    scaled = axis_value / axis_range * STAGE_SCALE
    return max(-STAGE_SCALE, min(STAGE_SCALE, scaled))


def learning_style_from_axes(
    abstract_axis: float,
    active_axis: float,
    axis_range: float = KOLB_AXIS_RANGE,
) -> LearningStyleVector:
    """
    Two-axis transform into four stage scores, rescaled to a distribution.

    Each stage is ``max(0, 100 -/+ scale(axis))``; the four values are divided
    by their sum and expressed relative to the largest share a single pole can
    hold, so every stage lands in [0, 100] and a balanced learner sits at 50.
    """
    x = scale_axis(abstract_axis, axis_range)
    y = scale_axis(active_axis, axis_range)

    stages = {
        LearningStage.CONCRETE: max(0.0, STAGE_SCALE - x),
        LearningStage.ABSTRACT: max(0.0, STAGE_SCALE + x),
        LearningStage.REFLECTIVE: max(0.0, STAGE_SCALE - y),
        LearningStage.ACTIVE: max(0.0, STAGE_SCALE + y),
    }

    total = sum(stages.values())
    # Each axis pair sums to 200, so total is always 400.
    distribution = {
        stage: (value / total) / MAX_STAGE_SHARE * STAGE_SCALE
        for stage, value in stages.items()
    }
    return LearningStyleVector.from_mapping(distribution)


def classify_learning_style(abstract_axis: float, active_axis: float) -> LearningStyle:
    """Kolb quadrant for a pair of axis scores."""
    if abstract_axis >= 0 and active_axis >= 0:
        return LearningStyle.CONVERGING
    if abstract_axis < 0 and active_axis >= 0:
        return LearningStyle.ACCOMMODATING
    if abstract_axis >= 0 and active_axis < 0:
        return LearningStyle.ASSIMILATING
    return LearningStyle.DIVERGING


def normalize_learning_style(
    responses: Mapping[str, float],
) -> Tuple[LearningStyleVector, LearningStyle]:
    abstract_axis, active_axis = kolb_axes(responses)
    return (
        learning_style_from_axes(abstract_axis, active_axis),
        classify_learning_style(abstract_axis, active_axis),
    )


# =============================================================================
# PROFILE ASSEMBLY
# =============================================================================

def build_user_profile(raw: RawAssessment) -> UserProfile:
    """
    Normalize every section of a raw assessment into a UserProfile.

    A section that is absent or has missing responses is left as None, which
    the engine reports as an incomplete component for tiers that need it.
    """
    interests: Optional[InterestVector] = None
    values: Optional[ValuesVector] = None
    learning_style: Optional[LearningStyleVector] = None
    learning_style_label: Optional[LearningStyle] = None

    if raw.interest_responses is not None:
        try:
            interests = normalize_interests(raw.interest_responses)
        except IncompleteResponsesError as e:
            logger.warning(f"User {raw.user_id or 'anonymous'}: {e}")

    if raw.values_responses is not None:
        try:
            values = normalize_values(raw.values_responses)
        except IncompleteResponsesError as e:
            logger.warning(f"User {raw.user_id or 'anonymous'}: {e}")

    if raw.kolb_responses is not None:
        try:
            learning_style, learning_style_label = normalize_learning_style(raw.kolb_responses)
        except IncompleteResponsesError as e:
            logger.warning(f"User {raw.user_id or 'anonymous'}: {e}")

    return UserProfile(
        user_id=raw.user_id,
        interests=interests,
        values=values,
        learning_style=learning_style,
        learning_style_label=learning_style_label,
        readiness=raw.readiness or None,
        priority_weights=raw.priority_weights,
        aspirations=raw.aspirations,
    )
