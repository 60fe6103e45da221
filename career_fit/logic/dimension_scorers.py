"""
Dimension Scorers

Individual scoring functions for each fit component.
Each scorer produces a score between 0 and 100.
All logic is deterministic and side-effect free - safe to call from any thread.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from .contracts import (
    ComponentScore,
    CountryProfile,
    InterestVector,
    LearningStyleVector,
    PriorityMatch,
    SubjectMatch,
    ValueContribution,
    ValuesVector,
)
from .constants import (
    COUNTRY_PRIORITY_BLEND,
    MARKET_DEMAND_BLEND,
    MAX_SCORE,
    MIN_SCORE,
    NEUTRAL_DEFAULTS,
    NEUTRAL_MARKET_DEMAND,
    PRIORITY_SCALE,
    TOP_VALUE_COUNT,
    USER_PRIORITY_BLEND,
    Priority,
    ScoreComponent,
    Subject,
)
from .exceptions import IncompleteResponsesError


def _clamp(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def _neutral(component: ScoreComponent, explanation: str) -> ComponentScore:
    return ComponentScore(
        component=component,
        score=NEUTRAL_DEFAULTS[component],
        is_neutral=True,
        explanation=explanation,
    )


def weighted_overlap(
    user: Mapping,
    program: Mapping,
) -> Optional[Tuple[float, Dict]]:
    """
    Weighted-overlap of a user vector against a program vector.

    score = sum_k min(user[k], program[k]) * program[k] / sum(program)

    Returns (score, per-domain contributions), or None when the program
    vector sums to zero.
    """
    total = sum(program.values())
    if total <= 0:
        return None

    contributions = {
        domain: min(user.get(domain, 0.0), need) * need / total
        for domain, need in program.items()
    }
    return sum(contributions.values()), contributions


def score_interest_fit(
    user: InterestVector,
    program: InterestVector,
) -> ComponentScore:
    """Interest Fit over the six RIASEC themes."""
    overlap = weighted_overlap(user.as_dict(), program.as_dict())
    if overlap is None:
        return _neutral(ScoreComponent.INTEREST, "Program has no interest emphasis")

    score, contributions = overlap
    strongest = max(contributions, key=lambda theme: contributions[theme])
    return ComponentScore(
        component=ScoreComponent.INTEREST,
        score=_clamp(score),
        explanation=f"Strongest overlap: {strongest.value}",
    )


def score_values_fit(
    user: ValuesVector,
    program: ValuesVector,
) -> ComponentScore:
    """
    Values Fit over the seven value domains.

    Also reports the top contributing value domains (largest positive
    overlap contributions, at most three).
    """
    user_values = user.as_dict()
    program_values = program.as_dict()

    overlap = weighted_overlap(user_values, program_values)
    if overlap is None:
        return _neutral(ScoreComponent.VALUES, "Program has no values profile")

    score, contributions = overlap
    ranked = sorted(
        (domain for domain, c in contributions.items() if c > 0),
        key=lambda domain: (-contributions[domain], domain.value),
    )
    top_values = [
        ValueContribution(
            domain=domain,
            contribution=contributions[domain],
            user_value=user_values[domain],
            program_value=program_values[domain],
        )
        for domain in ranked[:TOP_VALUE_COUNT]
    ]

    return ComponentScore(
        component=ScoreComponent.VALUES,
        score=_clamp(score),
        explanation=f"{len(top_values)} shared value domains",
        top_values=top_values,
    )


def uncovered_subjects(
    readiness: Optional[Mapping[Subject, float]],
    subject_needs: Mapping[Subject, float],
) -> List[Subject]:
    """Subjects the program needs that the user holds no readiness value for."""
    readiness = readiness or {}
    return sorted(
        (s for s, need in subject_needs.items() if need > 0 and s not in readiness),
        key=lambda s: s.value,
    )


def score_readiness_fit(
    readiness: Mapping[Subject, float],
    subject_needs: Mapping[Subject, float],
) -> ComponentScore:
    """
    Academic Readiness Fit - straight weighted average.

    score = sum_s readiness[s] * need[s] / sum_s need[s]

    Readiness is a strength a program can always fully use, so there is no
    min-cap. Every needed subject must carry a readiness value; a gap raises
    IncompleteResponsesError rather than being scored as 0.
    """
    total_need = sum(subject_needs.values())
    if total_need <= 0:
        return _neutral(ScoreComponent.READINESS, "Program has no subject requirements")

    uncovered = uncovered_subjects(readiness, subject_needs)
    if uncovered:
        raise IncompleteResponsesError("readiness", [s.value for s in uncovered])

    weighted = 0.0
    matched: List[SubjectMatch] = []
    for subject, need in subject_needs.items():
        if need <= 0:
            continue
        level = readiness[subject]
        weighted += level * need
        matched.append(SubjectMatch(subject=subject, readiness=level, need=need))

    matched.sort(key=lambda m: (-(m.readiness * m.need), m.subject.value))

    return ComponentScore(
        component=ScoreComponent.READINESS,
        score=_clamp(weighted / total_need),
        explanation=f"{len(matched)} needed subjects assessed",
        matched_subjects=matched,
    )


def score_alignment_fit(
    program_priorities: Mapping[Priority, float],
    country: Optional[CountryProfile] = None,
    user_weights: Optional[Mapping[Priority, float]] = None,
) -> ComponentScore:
    """
    Alignment Fit - blends country priorities, the user's own priority
    weights and an optional market-demand index.

    For each priority p the program emphasizes:
        blended = country(p) * 0.7 + user(p) * 0.3
        blended *= (1 - g) + g * demand(p)     # g = 0.5 only with a demand index
    The program-weighted sum is divided by the program's total emphasis and
    scaled to 0-100.

    A user priority that was not stated falls back to the country weight.
    """
    total_emphasis = sum(program_priorities.values())
    if total_emphasis <= 0:
        return _neutral(ScoreComponent.ALIGNMENT, "Program has no priority emphasis")

    user_weights = user_weights or {}
    if country is None and not user_weights:
        return _neutral(ScoreComponent.ALIGNMENT, "No country or personal priorities supplied")

    country_weights = country.priority_weights if country is not None else {}
    demand_index = country.market_demand_index if country is not None else None
    gamma = MARKET_DEMAND_BLEND if demand_index is not None else 0.0

    weighted = 0.0
    matches: List[PriorityMatch] = []
    for priority, emphasis in program_priorities.items():
        if emphasis <= 0:
            continue

        country_part = country_weights.get(priority, 0.0) / PRIORITY_SCALE
        if priority in user_weights:
            user_part = user_weights[priority] / PRIORITY_SCALE
        else:
            user_part = country_part

        blended = country_part * COUNTRY_PRIORITY_BLEND + user_part * USER_PRIORITY_BLEND

        if demand_index is not None and priority in demand_index:
            demand = demand_index[priority] / PRIORITY_SCALE
        else:
            demand = NEUTRAL_MARKET_DEMAND
        blended *= (1.0 - gamma) + gamma * demand

        contribution = blended * emphasis / total_emphasis * PRIORITY_SCALE
        weighted += contribution
        if contribution > 0:
            matches.append(PriorityMatch(
                priority=priority,
                contribution=contribution,
                program_weight=emphasis,
            ))

    matches.sort(key=lambda m: (-m.contribution, m.priority.value))

    return ComponentScore(
        component=ScoreComponent.ALIGNMENT,
        score=_clamp(weighted),
        explanation=f"{len(matches)} program priorities aligned",
        matched_priorities=matches,
    )


def score_learning_style_fit(
    user: LearningStyleVector,
    program: LearningStyleVector,
) -> ComponentScore:
    """Learning-Style Fit over the four Kolb stages."""
    overlap = weighted_overlap(user.as_dict(), program.as_dict())
    if overlap is None:
        return _neutral(ScoreComponent.LEARNING_STYLE, "Program has no learning-style profile")

    score, contributions = overlap
    strongest = max(contributions, key=lambda stage: contributions[stage])
    return ComponentScore(
        component=ScoreComponent.LEARNING_STYLE,
        score=_clamp(score),
        explanation=f"Best matched stage: {strongest.value}",
    )
