"""
Field Normalization Helpers

Small, dependency-free coercion functions shared by the program contracts
(field validators) and the DOE record adapter. Every helper accepts loosely
typed input and returns a normalized value or a neutral default; none of them
raise on malformed input.
"""

import math
from enum import Enum
from typing import Any, List, Optional


BOROUGHS = ("Manhattan", "Brooklyn", "Queens", "Bronx", "Staten Island")

PROGRAM_INTERESTS = (
    "STEM", "Health", "IB", "Humanities", "PerformingArts", "VisualArts",
    "CTE-Tech", "CTE-Media", "CTE-Culinary", "WorldLanguages", "Business", "Other",
)

_BOROUGH_LOOKUP = {name.lower(): name for name in BOROUGHS}
_BOROUGH_LOOKUP.update({
    "new york": "Manhattan",
    "kings": "Brooklyn",
    "richmond": "Staten Island",
    "m": "Manhattan",
    "k": "Brooklyn",
    "q": "Queens",
    "x": "Bronx",
    "r": "Staten Island",
})

_TRUTHY = {"y", "yes", "true", "1", "t"}


def _as_text(value: Any) -> str:
    # Enum members stringify as "Class.MEMBER"; use their value instead
    if isinstance(value, Enum):
        value = value.value
    return "" if value is None else str(value)


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().rstrip("%")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def to_int(value: Any) -> Optional[int]:
    number = to_number(value)
    if number is None:
        return None
    return round_half_up(number)


def to_fraction(value: Any) -> Optional[float]:
    """
    Normalize a rate to [0, 1].

    Values above 1 are treated as percentages (88 -> 0.88).
    """
    number = to_number(value)
    if number is None:
        return None
    if number > 1:
        number = number / 100
    return clamp01(number)


def to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def split_list(value: Any) -> List[str]:
    """Split a delimited string (semicolons win over commas) into trimmed items."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    text = str(value)
    delimiter = ";" if ";" in text else ","
    return [item.strip() for item in text.split(delimiter) if item.strip()]


def normalize_borough(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = _as_text(value).strip()
    if not text:
        return None
    return _BOROUGH_LOOKUP.get(text.lower(), text)


def map_admissions_method(value: Any) -> str:
    text = _as_text(value).lower()
    if "audition" in text:
        return "Audition"
    # "Limited Unscreened" also lands here and is treated as Screened
    if "screen" in text:
        return "Screened"
    if "edopt" in text or "educational option" in text:
        return "EdOpt"
    if "zone" in text:
        return "Zoned"
    if "open" in text:
        return "Open"
    return "Other"


def map_pedagogy(value: Any) -> Optional[str]:
    text = _as_text(value).strip().lower()
    if not text:
        return None
    if any(hint in text for hint in ("project", "inquiry", "portfolio", "progress")):
        return "Progressive"
    return "Traditional"


def map_campus_type(value: Any) -> Optional[str]:
    text = _as_text(value).strip().lower()
    if not text:
        return None
    if "career" in text or "cte" in text:
        return "Career-CTE"
    if "campus" in text:
        return "Campus"
    return "Traditional"


def map_single_sex(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("boys", "girls", "single-sex", "single sex", "true", "y", "yes"):
        return True
    if text in ("coed", "co-ed", "false", "n", "no"):
        return False
    return None


def map_program_tag(tag: str) -> str:
    """Collapse a free-text program focus into a canonical interest category."""
    if tag in PROGRAM_INTERESTS:
        return tag
    text = tag.lower()
    if "stem" in text or "engineering" in text or "comp" in text:
        return "STEM"
    if "health" in text or "bio" in text or "medical" in text:
        return "Health"
    if "visual" in text:
        return "VisualArts"
    if any(hint in text for hint in ("perform", "theater", "music", "dance")):
        return "PerformingArts"
    if any(hint in text for hint in ("humanities", "law", "journal")):
        return "Humanities"
    if "cte" in text or "career" in text or "tech" in text:
        return "CTE-Tech"
    return tag
