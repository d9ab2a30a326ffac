"""
Advisor API Routes

Exposes the scoring engine via REST API.
Main endpoint: POST /advise/score
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .logic.constants import ENGINE_VERSION
from .logic.presets import DEFAULT_PRESET, WEIGHT_PRESETS
from .logic.runner import InvalidScoringRequest, run_scoring
from .programs_source import ProgramsSource, get_programs_source

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/advise", tags=["advisor"])


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"ok": False, "error": message})


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/score", summary="Score and rank programs")
async def score(request: Request, source: ProgramsSource = Depends(get_programs_source)):
    """
    Rank programs against a family's preferences.

    **Request Body:**
    - `slots`: preference profile (boroughs, interests, must-haves, supports, ...)
    - `weights`: optional partial override of the five pillar weights
    - `preset`: optional weight preset name used as the base model
    - `programs`: optional program list that bypasses the configured data source

    **Response:**
    - `results`: programs sorted by score with pillar breakdown and rationale
    - `meta`: where the program list came from
    """
    try:
        payload = await request.json()
    except ValueError:
        return _bad_request("Request body must be valid JSON")

    try:
        response = await run_scoring(payload, source)
    except InvalidScoringRequest as e:
        logger.warning(f"Rejected scoring request: {e}")
        return _bad_request(str(e))
    except (OSError, ValueError) as e:
        logger.error(f"❌ Scoring failed: {e}")
        return _bad_request(str(e) or e.__class__.__name__)

    return response.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/presets", summary="List weight presets")
def list_presets():
    return {
        "default": DEFAULT_PRESET,
        "presets": {
            name: weights.model_dump(by_alias=True)
            for name, weights in WEIGHT_PRESETS.items()
        },
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Advisor engine health check")
def health_check():
    """Check if the scoring engine is operational."""
    return {"status": "ok", "engine": "advisor", "version": ENGINE_VERSION}
