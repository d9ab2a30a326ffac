"""
Test the scoring engine end to end: filter -> score -> rank.
"""

from advisor.logic import DEFAULT_WEIGHTS, WeightModel, score_program, score_programs
from advisor.programs_source import FALLBACK_PATH, load_programs_file


def test_results_are_filtered_subset_sorted_by_score(make_slots):
    programs = load_programs_file(FALLBACK_PATH)
    slots = make_slots(boroughs=["Brooklyn", "Queens"], program_interests=["STEM", "Health"])

    results = score_programs(programs, slots, DEFAULT_WEIGHTS)

    input_ids = {p.program_id for p in programs}
    by_id = {p.program_id: p for p in programs}
    assert results
    for r in results:
        assert r.program_id in input_ids
        assert by_id[r.program_id].borough in ("Brooklyn", "Queens")
        assert isinstance(r.score, int)
        assert 0 <= r.score <= 100

    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)


def test_excluded_program_never_returned(make_program, make_slots):
    programs = [make_program(program_id="A"), make_program(program_id="B")]
    slots = make_slots(excludes=["A"])

    results = score_programs(programs, slots, DEFAULT_WEIGHTS)

    assert [r.program_id for r in results] == ["B"]


def test_inclusion_required_keeps_only_inclusion_programs(make_program, make_slots):
    programs = [
        make_program(program_id="A", has_inclusion=False, has_iep_supports=True),
        make_program(program_id="B", has_inclusion=True),
    ]
    slots = make_slots(iep_inclusion_required=True)

    results = score_programs(programs, slots, DEFAULT_WEIGHTS)

    assert [r.program_id for r in results] == ["B"]


def test_scoring_is_idempotent(make_slots):
    programs = load_programs_file(FALLBACK_PATH)
    slots = make_slots(
        program_interests=["PerformingArts", "Humanities"],
        support_needs=["IEP", "ELL"],
        commute_cap_mins=45,
        admissions_opt_out="no_screened",
    )

    first = score_programs(programs, slots, DEFAULT_WEIGHTS)
    second = score_programs(programs, slots, DEFAULT_WEIGHTS)

    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


def test_over_cap_commute_penalty_is_independent_of_pillar(make_program, make_slots):
    far = make_program(program_id="FAR", est_commute_mins=70)
    near = make_program(program_id="NEAR", est_commute_mins=45)
    slots = make_slots(commute_cap_mins=60)

    results = {r.program_id: r for r in score_programs([far, near], slots, DEFAULT_WEIGHTS)}

    # Commute pillar floors at 0.2 * 0.22 rather than dropping to zero
    assert results["FAR"].pillars.commute == 4
    assert results["FAR"].pillars.penalties == -25
    assert results["FAR"].score == 18

    assert results["NEAR"].pillars.commute == 9
    assert results["NEAR"].pillars.penalties == 0
    assert results["NEAR"].score == 48


def test_unknown_commute_counts_as_over_cap(make_program, make_slots):
    [result] = score_programs([make_program()], make_slots(commute_cap_mins=45), DEFAULT_WEIGHTS)

    # Pillar stays neutral; only the penalty applies
    assert result.pillars.commute == 11
    assert result.pillars.penalties == -25
    assert result.score == 25


def test_unknown_commute_not_penalized_without_cap(make_program, make_slots):
    [result] = score_programs([make_program()], make_slots(), DEFAULT_WEIGHTS)

    assert result.pillars.penalties == 0
    assert result.score == 50


def test_languages_are_any_of_while_arts_are_all_of(make_program, make_slots):
    program = make_program(languages=["Spanish"], arts_tags=["band"])

    languages_slots = make_slots(must_haves={"languages": ["Spanish", "French"]})
    arts_slots = make_slots(must_haves={"arts": ["band", "orchestra"]})

    assert len(score_programs([program], languages_slots, DEFAULT_WEIGHTS)) == 1
    assert score_programs([program], arts_slots, DEFAULT_WEIGHTS) == []


def test_program_fit_only_weights_full_match_scores_100(make_program, make_slots):
    weights = WeightModel(program_fit=1.0, commute=0.0, supports=0.0, outcomes=0.0, environment=0.0)
    program = make_program(program_tags=["STEM"])
    slots = make_slots(program_interests=["STEM"])

    [result] = score_programs([program], slots, weights)

    assert result.pillars.program_fit == 100
    assert result.pillars.commute == 0
    assert result.score == 100
    assert "aligns with your interests" in result.rationale


def test_empty_input_gives_empty_output(make_slots):
    assert score_programs([], make_slots(), DEFAULT_WEIGHTS) == []


def test_ties_keep_filter_order(make_program, make_slots):
    programs = [make_program(program_id=pid) for pid in ("C", "A", "B")]

    results = score_programs(programs, make_slots(), DEFAULT_WEIGHTS)

    assert [r.score for r in results] == [50, 50, 50]
    assert [r.program_id for r in results] == ["C", "A", "B"]


def test_admissions_opt_out_penalties(make_program, make_slots):
    audition = make_program(program_id="AUD", admissions_method="Audition")
    screened = make_program(program_id="SCR", admissions_method="Screened")

    no_audition = {r.program_id: r for r in score_programs(
        [audition, screened], make_slots(admissions_opt_out="no_audition"), DEFAULT_WEIGHTS
    )}
    no_screened = {r.program_id: r for r in score_programs(
        [audition, screened], make_slots(admissions_opt_out="no_screened"), DEFAULT_WEIGHTS
    )}

    assert no_audition["AUD"].pillars.penalties == -15
    assert no_audition["SCR"].pillars.penalties == 0
    assert no_screened["SCR"].pillars.penalties == -10
    assert no_screened["AUD"].pillars.penalties == 0


def test_limited_unscreened_gets_screened_opt_out_penalty(make_program, make_slots):
    program = make_program(admissions_method="Limited Unscreened")

    [result] = score_programs([program], make_slots(admissions_opt_out="no_screened"), DEFAULT_WEIGHTS)

    assert result.admission_method == "Screened"
    assert result.pillars.penalties == -10


def test_score_program_applies_exclusion_penalty_without_filtering(make_program, make_slots):
    program = make_program(program_id="A")

    result = score_program(program, make_slots(excludes=["A"]), DEFAULT_WEIGHTS)

    assert result.pillars.penalties == -100
    assert result.score == 0


def test_scored_program_carries_identity_and_provenance(make_program, make_slots):
    program = make_program(est_commute_mins=30, admissions_method="EdOpt", data_as_of="2024-09-01")

    [result] = score_programs([program], make_slots(), DEFAULT_WEIGHTS)

    assert result.program_id == "P1"
    assert result.school_id == "13K001"
    assert result.name == "STEM Academy"
    assert result.school_name == "Test High School"
    assert result.admission_method == "EdOpt"
    assert result.est_commute_mins == 30
    assert result.data_as_of == "2024-09-01"
    assert result.rationale.startswith("Test High School: ")
