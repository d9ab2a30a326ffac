"""
Data Contracts for the Program Scoring Engine

Defines Pydantic models for ProgramRow and SlotState (inputs), WeightModel
(pillar weights) and ScoredProgram / ProgramResult (outputs).
These contracts are the API boundary for the scoring engine.

JSON uses camelCase keys; Python attributes are snake_case. Both spellings
are accepted on input.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_pascal

from .normalize import (
    map_admissions_method,
    map_campus_type,
    map_pedagogy,
    map_single_sex,
    normalize_borough,
    split_list,
    to_fraction,
    to_int,
)


CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=True,
)


# =============================================================================
# ENUMS
# =============================================================================

class Borough(str, Enum):
    MANHATTAN = "Manhattan"
    BROOKLYN = "Brooklyn"
    QUEENS = "Queens"
    BRONX = "Bronx"
    STATEN_ISLAND = "Staten Island"


class AdmissionsMethod(str, Enum):
    OPEN = "Open"
    SCREENED = "Screened"
    AUDITION = "Audition"
    ED_OPT = "EdOpt"
    ZONED = "Zoned"
    OTHER = "Other"


class AdmissionsOptOut(str, Enum):
    ALLOW_ALL = "allow_all"
    NO_AUDITION = "no_audition"
    NO_SCREENED = "no_screened"


class SupportNeed(str, Enum):
    IEP = "IEP"
    ELL = "ELL"
    ACCESSIBILITY = "Accessibility"


class SchoolSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class CampusType(str, Enum):
    TRADITIONAL = "Traditional"
    CAMPUS = "Campus"
    CAREER_CTE = "Career-CTE"


class PedagogyStyle(str, Enum):
    TRADITIONAL = "Traditional"
    PROGRESSIVE = "Progressive"


class PedagogyPreference(str, Enum):
    TRADITIONAL = "Traditional"
    PROGRESSIVE = "Progressive"
    EITHER = "Either"


class DataSource(str, Enum):
    REMOTE = "remote"
    FALLBACK = "fallback"
    OVERRIDE = "override"


# =============================================================================
# PROGRAM RECORDS
# =============================================================================

class ProgramRow(BaseModel):
    """
    A normalized admissions program at one school.

    Records are frozen once built. Rates are stored as fractions in [0, 1];
    raw percentages (> 1) are divided by 100 on the way in.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )

    # Identity
    program_id: str
    school_id: str
    program_name: str
    school_name: str = ""
    program_code: Optional[str] = None

    # Location
    borough: Optional[Borough] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    # Admissions
    admissions_method: AdmissionsMethod = AdmissionsMethod.OTHER
    is_specialized_hs: bool = Field(default=False, alias="isSpecializedHS")
    uses_dia: bool = Field(default=False, alias="usesDIA")
    has_inclusion: bool = False
    admissions_priorities: List[str] = Field(default_factory=list)
    eligibility_text: Optional[str] = None

    # Offerings
    program_tags: List[str] = Field(default_factory=list)
    arts_tags: List[str] = Field(default_factory=list)
    sports: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    ap_courses: List[str] = Field(default_factory=list)

    # Supports & accessibility
    has_iep_supports: bool = Field(default=False, alias="hasIEPSupports")
    has_ell_supports: bool = Field(default=False, alias="hasELLSupports")
    accessibility_notes: List[str] = Field(default_factory=list)

    # Environment
    school_size: Optional[int] = None
    campus_type: Optional[CampusType] = None
    single_sex: Optional[bool] = None
    pedagogy_style: Optional[PedagogyStyle] = None

    # Outcomes (fractions 0..1)
    grad_rate: Optional[float] = None
    attendance_rate: Optional[float] = None
    survey_satisfaction: Optional[float] = None
    borough_grad_rate_median: Optional[float] = None
    borough_attendance_median: Optional[float] = None

    # Commute & provenance
    est_commute_mins: Optional[int] = None
    data_as_of: str = ""

    @field_validator("program_id", "school_id", "program_name", mode="before")
    @classmethod
    def _identity_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("borough", mode="before")
    @classmethod
    def _normalize_borough(cls, value: Any) -> Any:
        return normalize_borough(value)

    @field_validator("admissions_method", mode="before")
    @classmethod
    def _normalize_admissions(cls, value: Any) -> str:
        return map_admissions_method(value)

    @field_validator(
        "admissions_priorities",
        "program_tags",
        "arts_tags",
        "sports",
        "languages",
        "ap_courses",
        "accessibility_notes",
        mode="before",
    )
    @classmethod
    def _normalize_list(cls, value: Any) -> List[str]:
        return split_list(value)

    @field_validator(
        "is_specialized_hs", "uses_dia", "has_inclusion", "has_iep_supports", "has_ell_supports",
        mode="before",
    )
    @classmethod
    def _none_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("campus_type", mode="before")
    @classmethod
    def _normalize_campus(cls, value: Any) -> Optional[str]:
        return map_campus_type(value)

    @field_validator("pedagogy_style", mode="before")
    @classmethod
    def _normalize_pedagogy(cls, value: Any) -> Optional[str]:
        return map_pedagogy(value)

    @field_validator("single_sex", mode="before")
    @classmethod
    def _normalize_single_sex(cls, value: Any) -> Optional[bool]:
        return map_single_sex(value)

    @field_validator("school_size", "est_commute_mins", mode="before")
    @classmethod
    def _whole_number(cls, value: Any) -> Optional[int]:
        return to_int(value)

    @field_validator(
        "grad_rate",
        "attendance_rate",
        "survey_satisfaction",
        "borough_grad_rate_median",
        "borough_attendance_median",
        mode="before",
    )
    @classmethod
    def _rate_as_fraction(cls, value: Any) -> Optional[float]:
        return to_fraction(value)

    @field_validator("data_as_of", mode="before")
    @classmethod
    def _data_as_of_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class MustHaves(BaseModel):
    """Non-negotiable offerings. Languages are any-of; the rest are all-of."""
    model_config = CAMEL_CONFIG

    sports: List[str] = Field(default_factory=list)
    arts: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    ap_courses: List[str] = Field(default_factory=list)

    @field_validator("sports", "arts", "languages", "ap_courses", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class EnvironmentPrefs(BaseModel):
    model_config = CAMEL_CONFIG

    campus_type: Optional[CampusType] = None
    single_sex_ok: Optional[bool] = None
    pedagogy: Optional[PedagogyPreference] = None


class HomeHint(BaseModel):
    model_config = CAMEL_CONFIG

    cross_st: Optional[str] = None
    subway_stop: Optional[str] = None


class SlotState(BaseModel):
    """
    Input contract for the scoring engine.
    A family's preferences for one scoring request.

    Program interests are ordered by priority; canonical values are STEM,
    Health, IB, Humanities, PerformingArts, VisualArts, CTE-Tech, CTE-Media,
    CTE-Culinary, WorldLanguages, Business and Other.
    """
    model_config = CAMEL_CONFIG

    # Where
    boroughs: List[Borough] = Field(default_factory=list)
    home_hint: Optional[HomeHint] = None

    # Constraints / prefs
    commute_cap_mins: Optional[int] = Field(default=None, ge=0)
    admissions_opt_out: AdmissionsOptOut = AdmissionsOptOut.ALLOW_ALL
    program_interests: List[str] = Field(default_factory=list)
    must_haves: MustHaves = Field(default_factory=MustHaves)
    support_needs: List[SupportNeed] = Field(default_factory=list)
    school_size_pref: Optional[SchoolSize] = None
    environment_prefs: EnvironmentPrefs = Field(default_factory=EnvironmentPrefs)

    # Comfort / profile (carried, not scored)
    ok_with_auditions: Optional[bool] = None
    ok_with_screened: Optional[bool] = None
    academic_band: Optional[str] = None
    consider_shsat: Optional[bool] = Field(default=None, alias="considerSHSAT")
    shsat_band: Optional[str] = None

    # Eligibility flags
    diversity_eligible: bool = False
    iep_inclusion_required: bool = False

    # Hard excludes
    excludes: List[str] = Field(default_factory=list)

    @field_validator(
        "boroughs", "program_interests", "support_needs", "excludes",
        mode="before",
    )
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("must_haves", "environment_prefs", mode="before")
    @classmethod
    def _none_is_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("admissions_opt_out", mode="before")
    @classmethod
    def _default_opt_out(cls, value: Any) -> Any:
        return AdmissionsOptOut.ALLOW_ALL if value is None else value


class WeightModel(BaseModel):
    """
    Pillar weights. Not renormalized by the engine; the default set sums to 1.0.
    """
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, frozen=True)

    program_fit: float = Field(ge=0.0)
    commute: float = Field(ge=0.0)
    supports: float = Field(ge=0.0)
    outcomes: float = Field(ge=0.0)
    environment: float = Field(ge=0.0)


class WeightOverrides(BaseModel):
    """Partial weight model supplied by a caller; unset pillars keep the base value."""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    program_fit: Optional[float] = Field(default=None, ge=0.0)
    commute: Optional[float] = Field(default=None, ge=0.0)
    supports: Optional[float] = Field(default=None, ge=0.0)
    outcomes: Optional[float] = Field(default=None, ge=0.0)
    environment: Optional[float] = Field(default=None, ge=0.0)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class PillarFits(BaseModel):
    """
    Raw pillar fit values in [0, 1], before weighting.
    Used between pillar scoring and aggregation.
    """
    program_fit: float = Field(ge=0.0, le=1.0)
    commute: float = Field(ge=0.0, le=1.0)
    supports: float = Field(ge=0.0, le=1.0)
    outcomes: float = Field(ge=0.0, le=1.0)
    environment: float = Field(ge=0.0, le=1.0)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class PillarBreakdown(BaseModel):
    """Weighted pillar contributions on a 0-100 scale, plus the (negative) penalty total."""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    program_fit: int
    commute: int
    supports: int
    outcomes: int
    environment: int
    penalties: int = Field(alias="penalties")


class ScoredProgram(BaseModel):
    """
    Single scored program.
    """
    model_config = CAMEL_CONFIG

    # Identifiers
    program_id: str
    school_id: str
    name: str
    school_name: str
    admission_method: AdmissionsMethod
    est_commute_mins: Optional[int] = None

    # Scoring
    score: int = Field(ge=0, le=100)
    pillars: PillarBreakdown
    rationale: str

    # Provenance
    data_as_of: str


class ProgramResult(ScoredProgram):
    """
    A ScoredProgram joined with display fields from its source ProgramRow.
    """
    borough: Optional[Borough] = None
    admissions_label: str = "Other"
    admissions_priorities: List[str] = Field(default_factory=list)
    eligibility_text: Optional[str] = None
    program_code: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class ProgramsMeta(BaseModel):
    """Provenance of the program list a request was scored against."""
    model_config = CAMEL_CONFIG

    data_source: DataSource
    url: Optional[str] = None
    program_count: int = 0
    error: Optional[str] = None


# =============================================================================
# HTTP CONTRACTS
# =============================================================================

class ScoreRequest(BaseModel):
    """Body of POST /advise/score."""
    model_config = CAMEL_CONFIG

    slots: SlotState
    weights: Optional[WeightOverrides] = None
    preset: Optional[str] = None
    programs: Optional[List[ProgramRow]] = None


class ScoreResponse(BaseModel):
    model_config = CAMEL_CONFIG

    ok: bool = True
    results: List[ProgramResult] = Field(default_factory=list)
    meta: ProgramsMeta
