"""
Score Aggregator

Combines component scores into the final score under a fixed tier weight
table. Weights are integer percentages and are never renormalized: a neutral
default participates at its full declared weight.
"""

import hashlib
import logging
from typing import Iterable, List, Mapping, Optional

from .constants import (
    MAX_SCORE,
    MIN_SCORE,
    TIER_WEIGHTS,
    WEIGHT_TOTAL,
    ScoreComponent,
    Tier,
)
from .exceptions import TierWeightConfigError


logger = logging.getLogger(__name__)


def validate_tier_weights(
    table: Mapping[Tier, Mapping[ScoreComponent, int]] = TIER_WEIGHTS,
) -> None:
    """
    Check every tier in a weight table.

    Raises TierWeightConfigError if a tier is missing, names an unknown
    component, holds a negative or non-integer weight, or does not sum to
    exactly 100.
    """
    for tier in Tier:
        if tier not in table:
            raise TierWeightConfigError(f"No weight table for tier '{tier.value}'")

    for tier, weights in table.items():
        if not weights:
            raise TierWeightConfigError(f"Tier '{tier}' has no weights")
        for component, pct in weights.items():
            if not isinstance(component, ScoreComponent):
                raise TierWeightConfigError(
                    f"Tier '{tier}' references unknown component '{component}'"
                )
            if isinstance(pct, bool) or not isinstance(pct, int):
                raise TierWeightConfigError(
                    f"Tier '{tier}' weight for {component.value} must be an integer percent"
                )
            if pct < 0:
                raise TierWeightConfigError(
                    f"Tier '{tier}' has negative weight for {component.value}"
                )
        total = sum(weights.values())
        if total != WEIGHT_TOTAL:
            raise TierWeightConfigError(
                f"Tier '{tier}' weights sum to {total}, expected {WEIGHT_TOTAL}"
            )


def weights_version(
    table: Mapping[Tier, Mapping[ScoreComponent, int]] = TIER_WEIGHTS,
) -> str:
    """Deterministic fingerprint of a weight table (first 16 hex chars of sha256)."""
    entries = sorted(
        f"{Tier(tier).value}:{ScoreComponent(component).value}:{pct}"
        for tier, weights in table.items()
        for component, pct in weights.items()
    )
    return hashlib.sha256("|".join(entries).encode("utf-8")).hexdigest()[:16]


def required_components(
    tier: Tier,
    table: Mapping[Tier, Mapping[ScoreComponent, int]] = TIER_WEIGHTS,
) -> List[ScoreComponent]:
    """Components carrying a weight in the tier, in declaration order."""
    return list(table[tier].keys())


def missing_components(
    tier: Tier,
    available: Iterable[ScoreComponent],
    table: Mapping[Tier, Mapping[ScoreComponent, int]] = TIER_WEIGHTS,
) -> List[ScoreComponent]:
    available_set = set(available)
    return [c for c in required_components(tier, table) if c not in available_set]


def compute_final_score(
    scores: Mapping[ScoreComponent, float],
    tier: Tier,
    table: Mapping[Tier, Mapping[ScoreComponent, int]] = TIER_WEIGHTS,
) -> Optional[float]:
    """
    Weighted sum of component scores, clamped to [0, 100].

    final = clamp(sum_i pct[i] * score[i] / 100, 0, 100)

    Returns None if any component required by the tier is absent; a partial
    sum is never produced.
    """
    weights = table[tier]

    missing = [c for c in weights if scores.get(c) is None]
    if missing:
        logger.debug(
            f"Final score withheld for tier {tier.value}: missing {[c.value for c in missing]}"
        )
        return None

    total = sum(pct * scores[component] for component, pct in weights.items())
    return max(MIN_SCORE, min(MAX_SCORE, total / WEIGHT_TOTAL))
