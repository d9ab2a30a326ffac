from advisor.logic.contracts import AdmissionsMethod, Borough
from advisor.logic.normalize import (
    map_admissions_method,
    map_program_tag,
    map_single_sex,
    normalize_borough,
    round_half_up,
    split_list,
    to_bool,
    to_fraction,
    to_int,
)


def test_round_half_up_matches_half_toward_positive_infinity():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(-25.0) == -25
    assert round_half_up(47.49) == 47


def test_to_fraction():
    assert to_fraction("88%") == 0.88
    assert to_fraction(0.91) == 0.91
    assert to_fraction(1) == 1.0
    assert to_fraction(250) == 1.0
    assert to_fraction(-0.2) == 0.0
    assert to_fraction("n/a") is None
    assert to_fraction(None) is None


def test_to_int_and_to_bool():
    assert to_int("612") == 612
    assert to_int("") is None
    assert to_bool("Yes") is True
    assert to_bool("1") is True
    assert to_bool("no") is False
    assert to_bool(None) is False


def test_split_list_prefers_semicolons():
    assert split_list("a; b, c ;") == ["a", "b, c"]
    assert split_list("a, b,,c") == ["a", "b", "c"]
    assert split_list(["x ", "", None, "y"]) == ["x", "y"]
    assert split_list(None) == []


def test_normalize_borough_aliases():
    assert normalize_borough("kings") == "Brooklyn"
    assert normalize_borough("STATEN ISLAND") == "Staten Island"
    assert normalize_borough("X") == "Bronx"
    assert normalize_borough(Borough.QUEENS) == "Queens"
    assert normalize_borough("") is None
    assert normalize_borough("Atlantis") == "Atlantis"


def test_map_admissions_method():
    assert map_admissions_method("Screened: Language & Math") == "Screened"
    assert map_admissions_method("Limited Unscreened") == "Screened"
    assert map_admissions_method("Audition - Dance") == "Audition"
    assert map_admissions_method(AdmissionsMethod.ED_OPT) == "EdOpt"
    assert map_admissions_method("Zoned Priority") == "Zoned"
    assert map_admissions_method(None) == "Other"


def test_map_single_sex():
    assert map_single_sex("Girls") is True
    assert map_single_sex("co-ed") is False
    assert map_single_sex("unknown") is None


def test_map_program_tag():
    assert map_program_tag("STEM") == "STEM"
    assert map_program_tag("Computer Science") == "STEM"
    assert map_program_tag("Dance") == "PerformingArts"
    assert map_program_tag("Pre-Law") == "Humanities"
    assert map_program_tag("Business") == "Business"
    assert map_program_tag("Zoology Club") == "Zoology Club"
