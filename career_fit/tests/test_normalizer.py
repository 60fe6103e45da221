from enum import Enum

import pytest
from pydantic import ValidationError

from career_fit.logic.constants import InterestTheme, LearningStage, LearningStyle, ValueDomain
from career_fit.logic.contracts import InterestVector, RawAssessment, UserProfile
from career_fit.logic.exceptions import IncompleteResponsesError, InvalidResponseError
from career_fit.logic.normalizer import (
    build_user_profile,
    classify_learning_style,
    kolb_axes,
    learning_style_from_axes,
    normalize_interests,
    normalize_learning_style,
    normalize_likert,
    normalize_values,
)

from .factories import interest_responses, kolb_responses, uniform, values_responses


class _Pair(str, Enum):
    ONLY = "only"


def test_interest_extremes_map_to_scale_ends():
    assert normalize_interests(interest_responses(5)).as_dict() == {t: 100.0 for t in InterestTheme}
    assert normalize_interests(interest_responses(1)).as_dict() == {t: 0.0 for t in InterestTheme}


def test_interest_midpoint_is_fifty():
    vector = normalize_interests(interest_responses(3))
    assert vector.realistic == pytest.approx(50.0)
    assert vector.conventional == pytest.approx(50.0)


def test_interest_items_aggregate_per_theme():
    responses = interest_responses(1)
    for n in range(1, 6):
        responses[f"I{n}"] = 5
    responses["A1"] = 5

    vector = normalize_interests(responses)

    assert vector.investigative == pytest.approx(100.0)
    assert vector.artistic == pytest.approx(20.0)
    assert vector.realistic == pytest.approx(0.0)


def test_values_use_three_items_per_domain():
    responses = values_responses(1)
    responses["SEC1"] = 5
    vector = normalize_values(responses)
    assert vector.security == pytest.approx(100.0 / 3)
    assert vector.as_dict()[ValueDomain.POWER] == 0.0


def test_missing_item_raises_incomplete():
    responses = interest_responses()
    del responses["R1"]
    del responses["C5"]

    with pytest.raises(IncompleteResponsesError) as exc:
        normalize_interests(responses)

    assert exc.value.section == "interests"
    assert exc.value.missing_items == ["C5", "R1"]


def test_out_of_scale_response_raises_invalid():
    responses = values_responses()
    responses["ACH2"] = 6
    with pytest.raises(InvalidResponseError) as exc:
        normalize_values(responses)
    assert exc.value.item_id == "ACH2"


def test_reversed_items_are_flipped():
    scores = normalize_likert(
        {"q1": 5, "q2": 5},
        {"q1": _Pair.ONLY, "q2": _Pair.ONLY},
        _Pair,
        "pair",
        reversed_items=["q2"],
    )
    assert scores[_Pair.ONLY] == pytest.approx(50.0)


def test_kolb_axes_from_stage_sums():
    assert kolb_axes(kolb_responses(ce=1, ac=5, ro=2, ae=4)) == (24, 12)


def test_balanced_learner_sits_at_fifty():
    vector, label = normalize_learning_style(kolb_responses())
    for stage in LearningStage:
        assert vector.as_dict()[stage] == pytest.approx(50.0)
    assert label == LearningStyle.CONVERGING


def test_extreme_thinking_doing_learner():
    vector, label = normalize_learning_style(kolb_responses(ce=1, ro=1, ac=5, ae=5))
    assert vector.abstract == pytest.approx(100.0)
    assert vector.active == pytest.approx(100.0)
    assert vector.concrete == 0.0
    assert vector.reflective == 0.0
    assert label == LearningStyle.CONVERGING


def test_extreme_feeling_watching_learner():
    vector, label = normalize_learning_style(kolb_responses(ce=5, ro=5, ac=1, ae=1))
    assert vector.concrete == pytest.approx(100.0)
    assert vector.reflective == pytest.approx(100.0)
    assert label == LearningStyle.DIVERGING


def test_axis_transform_distribution():
    vector = learning_style_from_axes(12, -6)
    assert vector.concrete == pytest.approx(25.0)
    assert vector.abstract == pytest.approx(75.0)
    assert vector.reflective == pytest.approx(62.5)
    assert vector.active == pytest.approx(37.5)


def test_axis_values_beyond_range_are_clamped():
    assert learning_style_from_axes(48, 0) == learning_style_from_axes(24, 0)


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, LearningStyle.CONVERGING),
    (-1, 3, LearningStyle.ACCOMMODATING),
    (5, -2, LearningStyle.ASSIMILATING),
    (-4, -4, LearningStyle.DIVERGING),
])
def test_classify_quadrants(x, y, expected):
    assert classify_learning_style(x, y) == expected


def test_build_profile_leaves_incomplete_section_empty():
    kolb = kolb_responses()
    del kolb["ae6"]
    raw = RawAssessment(
        user_id="u1",
        interest_responses=interest_responses(4),
        values_responses=values_responses(2),
        kolb_responses=kolb,
        readiness={"mathematics": 55},
        aspirations="I want to design apps",
    )

    profile = build_user_profile(raw)

    assert profile.interests.realistic == pytest.approx(75.0)
    assert profile.values.hedonism == pytest.approx(25.0)
    assert profile.learning_style is None
    assert profile.learning_style_label is None
    assert profile.aspirations == "I want to design apps"


def test_build_profile_without_sections():
    profile = build_user_profile(RawAssessment(user_id="u2", readiness={}))
    assert profile.interests is None
    assert profile.values is None
    assert profile.readiness is None


def test_build_profile_propagates_invalid_responses():
    responses = interest_responses()
    responses["S3"] = 0
    with pytest.raises(InvalidResponseError):
        build_user_profile(RawAssessment(interest_responses=responses))


def test_user_profile_rejects_values_above_hundred():
    with pytest.raises(ValidationError):
        UserProfile(interests=uniform(InterestVector, 120))


def test_vectors_reject_negative_and_unknown_domains():
    with pytest.raises(ValidationError):
        InterestVector.from_mapping({t: -1.0 for t in InterestTheme})
    data = {t.value: 1.0 for t in InterestTheme}
    data["musical"] = 1.0
    with pytest.raises(ValidationError):
        InterestVector(**data)
