"""
Program Data Source

Supplies the ProgramRow list a scoring request runs against: a remote JSON
array when PROGRAMS_JSON_URL is configured, otherwise (or on any remote
failure) the dataset bundled with the package.

This is a pure READ layer:
- NO scoring logic
- NO writes
"""

import json
import logging
import os
import time
from typing import Any, Callable, List, Optional, Tuple

import httpx

from advisor import config
from advisor.logic.contracts import DataSource, ProgramRow, ProgramsMeta

logger = logging.getLogger(__name__)

FALLBACK_PATH = os.path.join(os.path.dirname(__file__), "data", "programs.json")

REQUIRED_KEYS = ("programId", "schoolId", "programName")


class ProgramsSourceError(RuntimeError):
    """Remote dataset could not be used."""


def validate_program_payload(payload: Any) -> List[ProgramRow]:
    """
    Check the ProgramRow[] shape and build records.

    Every element must carry programId, schoolId and programName.

    Raises:
        ProgramsSourceError: on a shape problem
        ValidationError: if an element cannot be normalized
    """
    if not isinstance(payload, list):
        raise ProgramsSourceError("Invalid ProgramRow[] shape")
    for item in payload:
        if not isinstance(item, dict) or any(not item.get(key) for key in REQUIRED_KEYS):
            raise ProgramsSourceError("Invalid ProgramRow[] shape")
    return [ProgramRow.model_validate(item) for item in payload]


def load_programs_file(path: str) -> List[ProgramRow]:
    with open(path, "r", encoding="utf-8") as f:
        return validate_program_payload(json.load(f))


class ProgramsSource:
    """
    Loads programs with provenance metadata.

    A successful remote fetch is reused for ``ttl_seconds``; failures are not
    cached, so the next request tries the remote again.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        ttl_seconds: float = 60 * 60 * 24,
        timeout_seconds: float = 15.0,
        fallback_path: str = FALLBACK_PATH,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.url = url
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds
        self.fallback_path = fallback_path
        self.transport = transport
        self.clock = clock

        self._fallback: Optional[List[ProgramRow]] = None
        self._remote: Optional[Tuple[float, List[ProgramRow]]] = None

    def fallback_programs(self) -> List[ProgramRow]:
        if self._fallback is None:
            self._fallback = load_programs_file(self.fallback_path)
            logger.info(f"📦 Loaded {len(self._fallback)} bundled programs")
        return self._fallback

    async def get_programs_with_meta(self) -> Tuple[List[ProgramRow], ProgramsMeta]:
        if not self.url:
            programs = self.fallback_programs()
            return programs, ProgramsMeta(data_source=DataSource.FALLBACK, program_count=len(programs))

        cached = self._cached_remote()
        if cached is not None:
            return cached, ProgramsMeta(data_source=DataSource.REMOTE, url=self.url, program_count=len(cached))

        # ValueError also covers bad JSON and pydantic ValidationError
        try:
            programs = await self._fetch_remote()
        except (httpx.HTTPError, ProgramsSourceError, ValueError) as e:
            logger.warning(f"⚠️ Using bundled programs due to error: {e}")
            programs = self.fallback_programs()
            return programs, ProgramsMeta(
                data_source=DataSource.FALLBACK,
                url=self.url,
                program_count=len(programs),
                error=str(e) or e.__class__.__name__,
            )

        self._remote = (self.clock(), programs)
        logger.info(f"🌐 Fetched {len(programs)} programs from {self.url}")
        return programs, ProgramsMeta(data_source=DataSource.REMOTE, url=self.url, program_count=len(programs))

    async def get_programs(self) -> List[ProgramRow]:
        programs, _ = await self.get_programs_with_meta()
        return programs

    def clear_cache(self) -> None:
        self._remote = None

    def _cached_remote(self) -> Optional[List[ProgramRow]]:
        if self._remote is None:
            return None
        fetched_at, programs = self._remote
        if self.clock() - fetched_at >= self.ttl_seconds:
            self._remote = None
            return None
        return programs

    async def _fetch_remote(self) -> List[ProgramRow]:
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
            resp = await client.get(self.url)

        if not resp.is_success:
            raise ProgramsSourceError(f"Fetch failed: {resp.status_code}")

        return validate_program_payload(resp.json())


programs_source = ProgramsSource(
    url=config.PROGRAMS_JSON_URL,
    ttl_seconds=config.PROGRAMS_CACHE_TTL_SECONDS,
    timeout_seconds=config.PROGRAMS_FETCH_TIMEOUT_SECONDS,
)


def get_programs_source() -> ProgramsSource:
    return programs_source
