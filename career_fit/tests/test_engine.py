import pytest

from career_fit.logic.constants import ScoreComponent, ScoreStatus, Tier
from career_fit.logic.contracts import (
    CountryProfile,
    InterestVector,
    ScoredProgram,
    ScoringRequest,
)
from career_fit.logic.engine import WEIGHTS_VERSION, FitScoringEngine, score_programs
from career_fit.logic.ranker import rank_programs, select_top

from .factories import interest_vector, make_program, make_user, stage_vector, uniform


@pytest.fixture
def engine():
    return FitScoringEngine(max_workers=1)


def test_full_tier_end_to_end(engine, user, program):
    scored = engine.score_program(user, program, tier=Tier.FULL)

    assert scored.status == ScoreStatus.COMPLETE
    scores = {c: s.score for c, s in scored.component_scores.items()}
    assert scores == pytest.approx({
        ScoreComponent.INTEREST: 80.0,
        ScoreComponent.VALUES: 60.0,
        ScoreComponent.READINESS: 70.0,
        ScoreComponent.ALIGNMENT: 30.0,
        ScoreComponent.LEARNING_STYLE: 50.0,
    })
    # 0.3*80 + 0.2*60 + 0.2*70 + 0.2*30 + 0.1*50
    assert scored.final_score == pytest.approx(61.0)


def test_missing_learning_style_under_full_tier_is_incomplete(engine, program):
    user = make_user(learning_style=None, aspirations="I love coding and software")

    scored = engine.score_program(user, program, tier=Tier.FULL)

    assert scored.status == ScoreStatus.INCOMPLETE_PROFILE
    assert scored.final_score is None
    assert scored.component_scores == {}
    assert scored.missing_components == [ScoreComponent.LEARNING_STYLE]
    assert "Technology" in scored.interest_tags


def test_incomplete_output_exposes_no_numbers(engine, program):
    user = make_user(learning_style=None)
    output = engine.score_programs(ScoringRequest(user=user, programs=[program]))

    assert output.status == ScoreStatus.INCOMPLETE_PROFILE
    assert output.total_scored == 0
    result = output.results[0]
    for field in ("final_score", "interest_score", "values_score", "readiness_score",
                  "alignment_score", "learning_style_score"):
        assert getattr(result, field) is None
    assert result.top_values == []
    assert result.missing_components == [ScoreComponent.LEARNING_STYLE]
    assert any("Learning-Style Fit" in w for w in output.warnings)


def test_simplified_tier_does_not_require_values_or_readiness(engine, program):
    user = make_user(values=None, readiness=None)
    scored = engine.score_program(user, program, tier=Tier.SIMPLIFIED)

    assert scored.status == ScoreStatus.COMPLETE
    assert ScoreComponent.VALUES not in scored.component_scores
    # 0.55*80 + 0.25*30 + 0.20*50
    assert scored.final_score == pytest.approx(61.5)


def test_readiness_gap_for_needed_subject_is_incomplete(engine):
    user = make_user(readiness={"mathematics": 100})
    program = make_program(subject_needs={"mathematics": 1, "english": 1, "science": 1, "arabic": 1})

    full = engine.score_program(user, program, tier=Tier.FULL)
    assert full.status == ScoreStatus.INCOMPLETE_PROFILE
    assert full.final_score is None
    assert full.missing_components == [ScoreComponent.READINESS]

    # readiness carries no weight in the simplified tier
    simplified = engine.score_program(user, program, tier=Tier.SIMPLIFIED)
    assert simplified.status == ScoreStatus.COMPLETE
    assert ScoreComponent.READINESS not in simplified.component_scores


def test_readiness_gap_only_blocks_programs_needing_the_subject(engine):
    user = make_user(readiness={"mathematics": 100})
    covered = make_program(program_id="covered")
    gap = make_program(program_id="gap", subject_needs={"mathematics": 1, "english": 1})

    output = engine.score_programs(ScoringRequest(user=user, programs=[gap, covered]))

    assert output.status == ScoreStatus.COMPLETE
    assert output.total_scored == 1
    assert [r.program_id for r in output.results] == ["covered", "gap"]
    assert output.results[0].readiness_score == 100.0
    assert output.results[1].readiness_score is None
    assert output.results[1].missing_components == [ScoreComponent.READINESS]



def test_neutral_components_are_reported(engine, user):
    program = make_program(learning_style_fit=stage_vector(), priorities={})
    output = engine.score_programs(ScoringRequest(user=user, programs=[program]))

    result = output.results[0]
    assert result.learning_style_score == 65.0
    assert result.alignment_score == 50.0
    assert set(result.neutral_components) == {ScoreComponent.LEARNING_STYLE, ScoreComponent.ALIGNMENT}


def test_country_profile_feeds_alignment(engine, user, program):
    country = CountryProfile(country_code="AE", priority_weights={"ai": 90})
    scored = engine.score_program(user, program, country, Tier.FULL)
    alignment = scored.component_scores[ScoreComponent.ALIGNMENT]
    # 0.9*0.7 + 1.0*0.3
    assert alignment.score == pytest.approx(93.0)
    assert alignment.matched_priorities[0].priority.value == "ai"


def _catalog():
    programs = []
    for n in range(12):
        programs.append(make_program(
            program_id=f"program-{n:02d}",
            title=f"Program {n}",
            interest_profile=interest_vector(realistic=100 - n * 5, social=n * 5 + 1),
        ))
    return programs


def test_results_are_ranked_by_final_score(user):
    user = make_user(interests=interest_vector(realistic=100))
    output = score_programs(ScoringRequest(user=user, programs=_catalog()), max_workers=1)

    finals = [r.final_score for r in output.results]
    assert finals == sorted(finals, reverse=True)
    assert [r.rank for r in output.results] == list(range(1, 13))
    assert output.results[0].program_id == "program-00"
    assert output.weights_version == WEIGHTS_VERSION
    assert all(r.weights_version == WEIGHTS_VERSION for r in output.results)


def test_concurrent_fan_out_matches_inline_scoring(user):
    request = ScoringRequest(user=user, programs=_catalog())
    inline = FitScoringEngine(max_workers=1).score_programs(request)
    threaded = FitScoringEngine(max_workers=4).score_programs(request)

    def summary(output):
        return [(r.program_id, r.final_score, r.interest_score) for r in output.results]

    assert summary(threaded) == summary(inline)


def test_limit_keeps_counts_over_all_programs(engine, user):
    output = engine.score_programs(ScoringRequest(user=user, programs=_catalog(), limit=3))
    assert len(output.results) == 3
    assert output.total_programs_evaluated == 12
    assert output.total_scored == 12


def test_scores_are_rounded_to_one_decimal(engine):
    user = make_user(interests=uniform(InterestVector, 33.333))
    program = make_program(interest_profile=interest_vector(realistic=100))
    result = engine.score_programs(ScoringRequest(user=user, programs=[program])).results[0]
    assert result.interest_score == 33.3


def test_score_programs_from_dict(engine, user, program):
    output = engine.score_programs_from_dict({
        "user": user.model_dump(),
        "programs": [program.model_dump()],
        "tier": "simplified",
    })
    assert output.tier == Tier.SIMPLIFIED
    assert output.results[0].final_score == pytest.approx(61.5)


def test_ranker_puts_incomplete_last_and_breaks_ties_by_id(program):
    def scored(program_id, status, final):
        return ScoredProgram(
            program=make_program(program_id=program_id),
            tier=Tier.FULL,
            status=status,
            final_score=final,
        )

    ranked = rank_programs([
        scored("c", ScoreStatus.COMPLETE, 70.0),
        scored("z", ScoreStatus.INCOMPLETE_PROFILE, None),
        scored("b", ScoreStatus.COMPLETE, 70.0),
        scored("a", ScoreStatus.COMPLETE, 90.0),
    ])

    assert [s.program.program_id for s in ranked] == ["a", "b", "c", "z"]
    assert [s.program.program_id for s in select_top(ranked, 2)] == ["a", "b"]
    assert len(select_top(ranked)) == 4
