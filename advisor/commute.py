"""
Commute Estimate API

Stub estimator until a transit routing service is wired in. Estimates are
deterministic per (from, to) pair and fall between 20 and 65 minutes.
"""

from fastapi import APIRouter, Query

router = APIRouter(prefix="/commute", tags=["commute"])

MIN_MINUTES = 20
MINUTES_SPREAD = 46


def estimate_commute_minutes(origin: str, destination: str) -> int:
    seed = f"{origin}|{destination}"
    h = 0
    for ch in seed:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return MIN_MINUTES + (h % MINUTES_SPREAD)


@router.get("", summary="Estimate a morning commute")
def estimate_commute(
    origin: str = Query(default="", alias="from"),
    destination: str = Query(default="", alias="to"),
):
    return {"minutes": estimate_commute_minutes(origin, destination), "source": "stub"}
