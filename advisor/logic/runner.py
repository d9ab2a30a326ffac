"""
Scoring Runner

Orchestrates one scoring request:
1. Parses the request body into contracts
2. Resolves the weight model (preset + caller overrides)
3. Loads programs (caller override or the configured source)
4. Runs the scoring engine
5. Joins results with their source records

This is a pure orchestration layer - NO scoring math.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from advisor.programs_source import ProgramsSource

from .contracts import (
    DataSource,
    ProgramRow,
    ProgramsMeta,
    ScoreRequest,
    ScoreResponse,
    WeightModel,
    WeightOverrides,
)
from .engine import score_programs
from .output_assembler import assemble_output
from .presets import DEFAULT_PRESET, WEIGHT_PRESETS

logger = logging.getLogger(__name__)


class InvalidScoringRequest(ValueError):
    """The request body cannot be scored; reported to the caller as a 400."""


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Bad request"


def parse_score_request(payload: Any) -> ScoreRequest:
    if not isinstance(payload, dict):
        raise InvalidScoringRequest("Request body must be a JSON object")
    try:
        return ScoreRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidScoringRequest(_format_validation_error(e)) from e


def resolve_weights(preset: Optional[str], overrides: Optional[WeightOverrides]) -> WeightModel:
    """
    Start from a named preset (Balanced by default) and apply caller overrides.
    """
    name = preset or DEFAULT_PRESET
    if name not in WEIGHT_PRESETS:
        raise InvalidScoringRequest(
            f"Unknown weight preset '{name}'. Expected one of: {', '.join(WEIGHT_PRESETS)}"
        )

    weights = WEIGHT_PRESETS[name]
    if overrides is None:
        return weights
    return weights.model_copy(update=overrides.model_dump(exclude_none=True))


async def load_programs(
    request: ScoreRequest,
    source: ProgramsSource
) -> Tuple[List[ProgramRow], ProgramsMeta]:
    if request.programs:
        return request.programs, ProgramsMeta(
            data_source=DataSource.OVERRIDE,
            program_count=len(request.programs),
        )
    return await source.get_programs_with_meta()


async def run_scoring(payload: Dict[str, Any], source: ProgramsSource) -> ScoreResponse:
    """
    Main entry point: run the full scoring pipeline for one request body.

    Args:
        payload: Decoded JSON body ({slots, weights?, preset?, programs?})
        source: Where to load programs from when the caller sends none

    Returns:
        ScoreResponse with ranked, source-joined results

    Raises:
        InvalidScoringRequest: if the body cannot be parsed or names an unknown preset
    """
    request = parse_score_request(payload)
    weights = resolve_weights(request.preset, request.weights)

    programs, meta = await load_programs(request, source)
    logger.info(f"📦 Programs loaded for scoring: {len(programs)} (source: {meta.data_source})")

    start_time = time.perf_counter()
    scored = score_programs(programs, request.slots, weights)
    processing_time = (time.perf_counter() - start_time) * 1000

    logger.info(f"🏆 Programs ranked: {len(scored)} ({processing_time:.2f}ms)")
    if programs and not scored:
        logger.warning("⚠️ Hard filters removed every program")

    return assemble_output(scored, programs, meta)
