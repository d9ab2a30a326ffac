"""
Tests for the hard filter stage.
"""

from advisor.logic.filters import apply_hard_filters, passes_hard_filters


def test_no_constraints_passes_everything(make_program, make_slots):
    assert passes_hard_filters(make_program(borough=None), make_slots())


def test_borough_membership(make_program, make_slots):
    slots = make_slots(boroughs=["Queens", "Bronx"])

    assert passes_hard_filters(make_program(borough="Queens"), slots)
    assert not passes_hard_filters(make_program(borough="Brooklyn"), slots)
    # Unknown borough cannot satisfy a borough restriction
    assert not passes_hard_filters(make_program(borough=None), slots)


def test_single_sex_only_filtered_on_explicit_opt_out(make_program, make_slots):
    single_sex = make_program(single_sex=True)

    assert not passes_hard_filters(single_sex, make_slots(environment_prefs={"single_sex_ok": False}))
    assert passes_hard_filters(single_sex, make_slots(environment_prefs={"single_sex_ok": True}))
    assert passes_hard_filters(single_sex, make_slots())
    assert passes_hard_filters(
        make_program(single_sex=None),
        make_slots(environment_prefs={"single_sex_ok": False}),
    )


def test_inclusion_requirement_ignores_iep_supports(make_program, make_slots):
    slots = make_slots(iep_inclusion_required=True)

    assert not passes_hard_filters(make_program(has_iep_supports=True), slots)
    assert passes_hard_filters(make_program(has_inclusion=True), slots)


def test_sports_and_ap_courses_are_all_of(make_program, make_slots):
    program = make_program(sports=["soccer", "track"], ap_courses=["AP Biology"])

    assert passes_hard_filters(program, make_slots(must_haves={"sports": ["soccer", "track"]}))
    assert not passes_hard_filters(program, make_slots(must_haves={"sports": ["soccer", "tennis"]}))
    assert passes_hard_filters(program, make_slots(must_haves={"ap_courses": ["AP Biology"]}))
    assert not passes_hard_filters(
        program, make_slots(must_haves={"ap_courses": ["AP Biology", "AP Chemistry"]})
    )


def test_language_must_have_needs_one_match(make_program, make_slots):
    slots = make_slots(must_haves={"languages": ["Mandarin", "Korean"]})

    assert passes_hard_filters(make_program(languages=["Korean"]), slots)
    assert not passes_hard_filters(make_program(languages=["Spanish"]), slots)


def test_tag_matching_is_case_sensitive(make_program, make_slots):
    slots = make_slots(must_haves={"arts": ["Band"]})

    assert not passes_hard_filters(make_program(arts_tags=["band"]), slots)


def test_apply_hard_filters_keeps_input_order(make_program, make_slots):
    programs = [
        make_program(program_id="Z", borough="Bronx"),
        make_program(program_id="X", borough="Queens"),
        make_program(program_id="Y", borough="Bronx"),
    ]

    kept = apply_hard_filters(programs, make_slots(boroughs=["Bronx"]))

    assert [p.program_id for p in kept] == ["Z", "Y"]
