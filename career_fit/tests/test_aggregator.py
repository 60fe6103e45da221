import re

import pytest
from hypothesis import given, strategies as st

from career_fit.logic.aggregator import (
    compute_final_score,
    missing_components,
    required_components,
    validate_tier_weights,
    weights_version,
)
from career_fit.logic.constants import NEUTRAL_DEFAULTS, TIER_WEIGHTS, ScoreComponent, Tier
from career_fit.logic.exceptions import TierWeightConfigError


I = ScoreComponent.INTEREST
V = ScoreComponent.VALUES
R = ScoreComponent.READINESS
A = ScoreComponent.ALIGNMENT
L = ScoreComponent.LEARNING_STYLE


def test_declared_tier_weights_sum_to_hundred():
    for tier in Tier:
        assert sum(TIER_WEIGHTS[tier].values()) == 100
    validate_tier_weights()


def test_simplified_tier_worked_example():
    assert compute_final_score({I: 80, A: 60, L: 70}, Tier.SIMPLIFIED) == pytest.approx(73.0)


def test_full_tier_all_neutral_defaults_participate_at_full_weight():
    final = compute_final_score(dict(NEUTRAL_DEFAULTS), Tier.FULL)
    assert final == pytest.approx(53.5)


def test_unweighted_components_are_ignored():
    assert compute_final_score({I: 80, A: 60, L: 70, V: 0, R: 0}, Tier.SIMPLIFIED) == pytest.approx(73.0)


def test_missing_required_component_yields_no_score():
    assert compute_final_score({I: 80, A: 60}, Tier.SIMPLIFIED) is None
    assert compute_final_score({I: 80, V: 50, R: 50, A: 50, L: None}, Tier.FULL) is None


def test_final_score_is_clamped():
    assert compute_final_score({I: 150, A: 150, L: 150}, Tier.SIMPLIFIED) == 100.0
    assert compute_final_score({I: -10, A: 0, L: 0}, Tier.SIMPLIFIED) == 0.0


@given(st.lists(st.floats(min_value=0, max_value=100, allow_nan=False), min_size=5, max_size=5))
def test_final_score_matches_weighted_sum(values):
    scores = dict(zip([I, V, R, A, L], values))
    expected = sum(TIER_WEIGHTS[Tier.FULL][c] * s for c, s in scores.items()) / 100
    final = compute_final_score(scores, Tier.FULL)
    assert final == pytest.approx(max(0.0, min(100.0, expected)))
    assert 0.0 <= final <= 100.0


def test_required_and_missing_components():
    assert required_components(Tier.SIMPLIFIED) == [I, A, L]
    assert missing_components(Tier.FULL, [I, A, V]) == [R, L]


@pytest.mark.parametrize("table", [
    {Tier.FULL: {I: 50, A: 49}, Tier.SIMPLIFIED: {I: 100}},
    {Tier.FULL: {I: 110, A: -10}, Tier.SIMPLIFIED: {I: 100}},
    {Tier.FULL: {I: 50, "charisma": 50}, Tier.SIMPLIFIED: {I: 100}},
    {Tier.FULL: {I: 50.0, A: 50.0}, Tier.SIMPLIFIED: {I: 100}},
    {Tier.FULL: {I: 100}},
    {Tier.FULL: {I: 100}, Tier.SIMPLIFIED: {}},
])
def test_invalid_weight_tables_are_rejected(table):
    with pytest.raises(TierWeightConfigError):
        validate_tier_weights(table)


def test_weights_version_is_stable_fingerprint():
    version = weights_version()
    assert re.fullmatch(r"[0-9a-f]{16}", version)
    assert weights_version() == version

    altered = {
        Tier.FULL: {I: 40, V: 10, R: 20, A: 20, L: 10},
        Tier.SIMPLIFIED: dict(TIER_WEIGHTS[Tier.SIMPLIFIED]),
    }
    assert weights_version(altered) != version
