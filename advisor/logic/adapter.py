"""
DOE Record Adapter

Transforms flat, column-keyed records from a DOE high school directory export
(already decoded into dicts) into normalized ProgramRow values.

This is a pure TRANSFORM layer:
- NO scoring logic
- NO ranking
- NO file-format parsing (callers hand in dicts)
"""

import logging
import re
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .contracts import ProgramRow
from .normalize import (
    map_admissions_method,
    map_campus_type,
    map_pedagogy,
    map_program_tag,
    map_single_sex,
    normalize_borough,
    split_list,
    to_bool,
    to_fraction,
    to_int,
    to_number,
)

logger = logging.getLogger(__name__)


# ProgramRow field -> DOE export column
DOE_COLUMNS: Dict[str, str] = {
    "program_id": "PROGRAM_ID",
    "school_id": "DBN",
    "program_name": "PROGRAM_NAME",
    "school_name": "SCHOOL_NAME",
    "program_code": "PROGRAM_CODE",
    "borough": "BOROUGH",
    "latitude": "LATITUDE",
    "longitude": "LONGITUDE",

    "admissions_method": "ADMISSIONS_METHOD",
    "is_specialized_hs": "SPECIALIZED",
    "uses_dia": "DIA",
    "has_inclusion": "INCLUSION_AVAILABLE",
    "admissions_priorities": "ADMISSIONS_PRIORITIES",
    "eligibility_text": "ELIGIBILITY",

    "program_tags": "PROGRAM_FOCUS",
    "arts_tags": "ARTS",
    "sports": "SPORTS",
    "languages": "LANGUAGES",
    "ap_courses": "AP_COURSES",

    "has_iep_supports": "IEP_SUPPORTS",
    "has_ell_supports": "ELL_SUPPORTS",
    "accessibility_notes": "ACCESS_NOTES",

    "school_size": "ENROLLMENT",
    "campus_type": "CAMPUS_TYPE",
    "single_sex": "SINGLE_SEX",
    "pedagogy_style": "PEDAGOGY",

    "grad_rate": "GRAD_RATE",
    "attendance_rate": "ATTEND_RATE",
    "survey_satisfaction": "SURVEY_SATISFACTION",
    "data_as_of": "DATA_AS_OF",
}

# Borough medians used to put outcome rates in context
BOROUGH_MEDIANS: Dict[str, Dict[str, float]] = {
    "Manhattan": {"grad": 0.84, "attend": 0.88},
    "Brooklyn": {"grad": 0.84, "attend": 0.88},
    "Queens": {"grad": 0.87, "attend": 0.91},
    "Bronx": {"grad": 0.78, "attend": 0.85},
    "Staten Island": {"grad": 0.89, "attend": 0.92},
}

DEFAULT_BOROUGH = "Brooklyn"

_YEAR_MONTH = re.compile(r"^\d{4}-\d{2}$")


def _column(row: Dict[str, Any], field: str) -> Any:
    value = row.get(DOE_COLUMNS[field])
    if isinstance(value, str):
        value = value.strip()
    return value


def _text(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    return str(value)


def normalize_data_as_of(raw: Any, today: Optional[date] = None) -> str:
    """ISO date stamp; 'yyyy-mm' becomes 'yyyy-mm-01', blank becomes today."""
    text = str(raw or "").strip()
    if not text:
        return (today or date.today()).isoformat()
    if _YEAR_MONTH.match(text):
        return f"{text}-01"
    return text


def adapt_doe_record(row: Dict[str, Any], today: Optional[date] = None) -> ProgramRow:
    """
    Convert one DOE export record into a ProgramRow.

    Raises:
        ValidationError: if the record cannot produce a valid ProgramRow
    """
    school_id = _text(_column(row, "school_id"), "")
    borough = normalize_borough(_column(row, "borough")) or DEFAULT_BOROUGH
    medians = BOROUGH_MEDIANS.get(borough, BOROUGH_MEDIANS[DEFAULT_BOROUGH])

    return ProgramRow(
        program_id=_text(_column(row, "program_id"), f"{school_id}-UNK"),
        school_id=school_id,
        program_name=_text(_column(row, "program_name"), "Program"),
        school_name=_text(_column(row, "school_name"), "School"),
        program_code=_text(_column(row, "program_code"), "") or None,
        borough=borough,
        latitude=to_number(_column(row, "latitude")),
        longitude=to_number(_column(row, "longitude")),

        admissions_method=map_admissions_method(_column(row, "admissions_method")),
        is_specialized_hs=to_bool(_column(row, "is_specialized_hs")),
        uses_dia=to_bool(_column(row, "uses_dia")),
        has_inclusion=to_bool(_column(row, "has_inclusion")),
        admissions_priorities=split_list(_column(row, "admissions_priorities")),
        eligibility_text=_text(_column(row, "eligibility_text"), "") or None,

        program_tags=[map_program_tag(t) for t in split_list(_column(row, "program_tags"))],
        arts_tags=split_list(_column(row, "arts_tags")),
        sports=split_list(_column(row, "sports")),
        languages=split_list(_column(row, "languages")),
        ap_courses=split_list(_column(row, "ap_courses")),

        has_iep_supports=to_bool(_column(row, "has_iep_supports")),
        has_ell_supports=to_bool(_column(row, "has_ell_supports")),
        accessibility_notes=split_list(_column(row, "accessibility_notes")),

        school_size=to_int(_column(row, "school_size")),
        campus_type=map_campus_type(_column(row, "campus_type")),
        single_sex=map_single_sex(_column(row, "single_sex")),
        pedagogy_style=map_pedagogy(_column(row, "pedagogy_style")),

        grad_rate=to_fraction(_column(row, "grad_rate")),
        attendance_rate=to_fraction(_column(row, "attendance_rate")),
        survey_satisfaction=to_fraction(_column(row, "survey_satisfaction")),
        borough_grad_rate_median=medians["grad"],
        borough_attendance_median=medians["attend"],

        data_as_of=normalize_data_as_of(_column(row, "data_as_of"), today),
    )


def adapt_doe_records(rows: Iterable[Dict[str, Any]], today: Optional[date] = None) -> List[ProgramRow]:
    """
    Convert many records, skipping (and logging) any that fail validation.
    """
    programs: List[ProgramRow] = []
    skipped = 0
    for row in rows:
        try:
            programs.append(adapt_doe_record(row, today))
        except ValidationError as e:
            skipped += 1
            logger.debug(f"Skipping DOE record {row.get(DOE_COLUMNS['program_id'])}: {e}")

    if skipped:
        logger.warning(f"⚠️ Skipped {skipped} DOE records that could not be normalized")
    logger.info(f"📦 Adapted {len(programs)} DOE records")
    return programs
