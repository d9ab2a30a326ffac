"""
Tests for request orchestration: weight resolution, program loading and the
source join.
"""

import asyncio

import pytest

from advisor.logic.contracts import ProgramsMeta, WeightOverrides
from advisor.logic.engine import score_programs
from advisor.logic.output_assembler import join_with_sources, label_admissions
from advisor.logic.presets import DEFAULT_WEIGHTS, WEIGHT_PRESETS
from advisor.logic.runner import InvalidScoringRequest, resolve_weights, run_scoring
from advisor.programs_source import ProgramsSource


def test_resolve_weights_defaults_to_balanced():
    assert resolve_weights(None, None) == DEFAULT_WEIGHTS


def test_resolve_weights_applies_partial_overrides_to_preset():
    weights = resolve_weights("ShortCommute", WeightOverrides(outcomes=0.5))

    assert weights.outcomes == 0.5
    assert weights.commute == WEIGHT_PRESETS["ShortCommute"].commute
    # Presets themselves stay untouched
    assert WEIGHT_PRESETS["ShortCommute"].outcomes == 0.18


def test_resolve_weights_rejects_unknown_preset():
    with pytest.raises(InvalidScoringRequest):
        resolve_weights("Nope", None)


def test_presets_are_immutable():
    with pytest.raises(TypeError):
        WEIGHT_PRESETS["Custom"] = DEFAULT_WEIGHTS


def test_run_scoring_uses_source_when_no_programs_sent():
    source = ProgramsSource(url=None)

    response = asyncio.run(run_scoring({"slots": {"boroughs": ["Bronx"]}}, source))

    assert response.ok is True
    assert response.meta.data_source == "fallback"
    assert response.results
    assert all(r.borough == "Bronx" for r in response.results)


def test_run_scoring_rejects_invalid_body():
    with pytest.raises(InvalidScoringRequest):
        asyncio.run(run_scoring({"slots": {"supportNeeds": ["Tutoring"]}}, ProgramsSource(url=None)))


def test_label_admissions():
    assert label_admissions("EdOpt") == "Educational Option"
    assert label_admissions("Audition") == "Audition"
    assert label_admissions("Screened") == "Screened"
    assert label_admissions("Zoned") == "Zoned"
    assert label_admissions("Open") == "Open"
    assert label_admissions(None) == "Other"


def test_join_with_sources_first_record_wins(make_program, make_slots):
    first = make_program(program_id="A", program_tags=["STEM"], program_code="A-1")
    duplicate = make_program(program_id="A", program_tags=["Health"], program_code="A-2")
    scored = score_programs([first], make_slots(), DEFAULT_WEIGHTS)

    [result] = join_with_sources(scored, [first, duplicate])

    assert result.program_code == "A-1"
    assert result.tags == ["STEM"]
    assert result.score == scored[0].score


def test_join_without_source_keeps_scored_fields(make_program, make_slots):
    scored = score_programs([make_program()], make_slots(), DEFAULT_WEIGHTS)

    [result] = join_with_sources(scored, [])

    assert result.program_id == "P1"
    assert result.borough is None
    assert result.tags == []
    assert result.admissions_label == "Open"


def test_meta_serializes_with_camel_case_keys():
    meta = ProgramsMeta(data_source="remote", url="https://x", program_count=2)

    assert meta.model_dump(by_alias=True, exclude_none=True) == {
        "dataSource": "remote", "url": "https://x", "programCount": 2,
    }
