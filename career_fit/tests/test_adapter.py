import pytest

from career_fit.logic.adapter import (
    load_country_profile,
    load_program_profiles,
    program_profile_from_row,
)
from career_fit.logic.constants import Priority, Subject
from career_fit.logic.exceptions import MalformedReferenceError
from career_fit.models import CareerProgram, CountryPriorityProfile
from career_fit.valuemap.crosswalk import CROSSWALK_VERSION, WorkValue
from career_fit.valuemap.parser import OccupationWorkValues
from career_fit.valuemap.runner import run_value_mapping
from career_fit.valuemap.writer import persist_values_profile

from .factories import values_vector


def _program_row(program_id="nurse", **overrides):
    data = dict(
        id=program_id,
        title="Registered Nurse",
        interest_profile={"social": 90, "investigative": 60},
        subject_needs={"science": 3, "english": 1},
        priorities={"health": 5},
        learning_style_fit={"concrete": 70, "active": 60},
    )
    data.update(overrides)
    return CareerProgram(**data)


def test_rows_load_into_profiles(db_session):
    db_session.add_all([_program_row(), _program_row("chef", title="Chef", priorities=None)])
    db_session.commit()

    profiles = load_program_profiles(db_session)

    assert [p.program_id for p in profiles] == ["chef", "nurse"]
    nurse = profiles[1]
    assert nurse.interest_profile.social == 90
    assert nurse.interest_profile.realistic == 0.0
    assert nurse.subject_needs == {Subject.SCIENCE: 3, Subject.ENGLISH: 1}
    assert nurse.priorities == {Priority.HEALTH: 5}
    # values_profile is unset until the values batch runs
    assert nurse.values_profile.total() == 0.0
    assert profiles[0].priorities == {}


def test_load_subset_of_programs(db_session):
    db_session.add_all([_program_row(), _program_row("chef", title="Chef")])
    db_session.commit()

    assert [p.program_id for p in load_program_profiles(db_session, ["chef"])] == ["chef"]
    assert load_program_profiles(db_session, []) == []


@pytest.mark.parametrize("overrides", [
    {"interest_profile": {"social": -5}},
    {"interest_profile": {"musical": 10}},
    {"subject_needs": {"astrology": 1}},
    {"priorities": {"health": -1}},
])
def test_malformed_program_rows_are_rejected(overrides):
    with pytest.raises(MalformedReferenceError) as exc:
        program_profile_from_row(_program_row(**overrides))
    assert exc.value.entity_type == "program"
    assert exc.value.entity_id == "nurse"


def test_country_lookup(db_session):
    db_session.add(CountryPriorityProfile(
        country_code="AE",
        name="United Arab Emirates",
        priority_weights={"ai": 95, "space": 80},
        market_demand_index={"ai": 90},
    ))
    db_session.commit()

    country = load_country_profile(db_session, "ae")
    assert country.priority_weights[Priority.AI] == 95
    assert country.market_demand_index == {Priority.AI: 90}
    assert load_country_profile(db_session, "FR") is None


def test_malformed_country_is_rejected(db_session):
    db_session.add(CountryPriorityProfile(country_code="XX", priority_weights={"ai": 140}))
    db_session.commit()
    with pytest.raises(MalformedReferenceError):
        load_country_profile(db_session, "XX")


def test_persist_values_profile_replaces_prior_value(db_session):
    db_session.add(_program_row(values_profile={"achievement": 5}))
    db_session.commit()

    written = persist_values_profile(
        db_session, "nurse", "29-1141.00", values_vector(benevolence=80, security=40), CROSSWALK_VERSION
    )
    db_session.commit()

    row = db_session.get(CareerProgram, "nurse")
    assert written
    assert row.values_profile["benevolence"] == 80
    assert row.values_profile["achievement"] == 0.0
    assert row.onet_code == "29-1141.00"
    assert row.values_crosswalk_version == CROSSWALK_VERSION
    assert row.values_updated_at is not None


def test_persist_unknown_program_writes_nothing(db_session):
    assert not persist_values_profile(db_session, "ghost", "00-0000.00", values_vector(), CROSSWALK_VERSION)


def test_batch_persists_only_accepted_records(db_session):
    db_session.add_all([
        _program_row(),
        _program_row("graphic-designer", title="Graphic Designer"),
    ])
    db_session.commit()

    occupations = {
        "29-1141.00": OccupationWorkValues(
            onet_code="29-1141.00",
            values={WorkValue.RELATIONSHIPS: 7.0, WorkValue.SUPPORT: 3.5},
        ),
        "27-1024.00": OccupationWorkValues(
            onet_code="27-1024.00",
            values={WorkValue.ACHIEVEMENT: float("nan")},
        ),
        "15-1251.00": OccupationWorkValues(onet_code="15-1251.00", values={}),
    }
    report = run_value_mapping(
        occupations,
        program_crosswalk={
            "nurse": "29-1141.00",
            "graphic-designer": "27-1024.00",
            "software-engineer": "15-1251.00",
        },
        db=db_session,
    )
    db_session.commit()

    assert report.updated == ["nurse"]
    assert report.rejected == ["graphic-designer"]
    assert report.not_in_catalog == ["software-engineer"]

    nurse = load_program_profiles(db_session, ["nurse"])[0]
    # 100*0.7 + 50*0.5
    assert nurse.values_profile.benevolence == pytest.approx(95.0)
    assert db_session.get(CareerProgram, "graphic-designer").values_profile is None
