"""Builders for profiles and raw responses used across the test modules."""

from career_fit.logic.constants import (
    INTEREST_ITEM_DOMAINS,
    KOLB_ITEM_DIMENSIONS,
    VALUES_ITEM_DOMAINS,
)
from career_fit.logic.contracts import (
    InterestVector,
    LearningStyleVector,
    ProgramProfile,
    UserProfile,
    ValuesVector,
)


def _vector(vector_type, overrides):
    data = {domain.value: 0.0 for domain in vector_type.domains}
    data.update(overrides)
    return vector_type(**data)


def interest_vector(**overrides):
    return _vector(InterestVector, overrides)


def values_vector(**overrides):
    return _vector(ValuesVector, overrides)


def stage_vector(**overrides):
    return _vector(LearningStyleVector, overrides)


def uniform(vector_type, value):
    return vector_type(**{domain.value: value for domain in vector_type.domains})


def interest_responses(value=3):
    return {item: value for item in INTEREST_ITEM_DOMAINS}


def values_responses(value=3):
    return {item: value for item in VALUES_ITEM_DOMAINS}


def kolb_responses(ce=3, ro=3, ac=3, ae=3):
    by_dim = {"CE": ce, "RO": ro, "AC": ac, "AE": ae}
    return {item: by_dim[dim] for item, dim in KOLB_ITEM_DIMENSIONS.items()}


def make_program(program_id="software-engineer", title="Software Engineer", **overrides):
    data = dict(
        program_id=program_id,
        title=title,
        interest_profile=interest_vector(realistic=100),
        values_profile=values_vector(achievement=100),
        subject_needs={"mathematics": 1},
        priorities={"ai": 1},
        learning_style_fit=stage_vector(concrete=100),
    )
    data.update(overrides)
    return ProgramProfile(**data)


def make_user(**overrides):
    """
    Profile whose component scores against make_program() are
    interest 80, values 60, readiness 70, alignment 30, learning style 50.
    """
    data = dict(
        user_id="student-1",
        interests=uniform(InterestVector, 80),
        values=uniform(ValuesVector, 60),
        learning_style=uniform(LearningStyleVector, 50),
        readiness={"mathematics": 70},
        priority_weights={"ai": 100},
    )
    data.update(overrides)
    return UserProfile(**data)
