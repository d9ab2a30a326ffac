"""Shared fixtures for the advisor tests."""

import pytest

from advisor.logic.contracts import ProgramRow, SlotState


def _program(**overrides) -> ProgramRow:
    data = {
        "program_id": "P1",
        "school_id": "13K001",
        "program_name": "STEM Academy",
        "school_name": "Test High School",
        "borough": "Brooklyn",
        "admissions_method": "Open",
        "data_as_of": "2025-06-01",
    }
    data.update(overrides)
    return ProgramRow(**data)


@pytest.fixture
def make_program():
    """Factory for ProgramRow records with neutral defaults (no outcomes, no commute)."""
    return _program


@pytest.fixture
def make_slots():
    """Factory for SlotState; keyword arguments use Python field names."""
    def _slots(**fields) -> SlotState:
        return SlotState(**fields)
    return _slots
