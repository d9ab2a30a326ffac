import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _parse_cors_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


# Remote ProgramRow[] JSON; unset -> bundled dataset only
PROGRAMS_JSON_URL = os.getenv("PROGRAMS_JSON_URL") or None

# Freshness window for a successfully fetched remote dataset
PROGRAMS_CACHE_TTL_SECONDS = float(os.getenv("PROGRAMS_CACHE_TTL_SECONDS", str(60 * 60 * 24)))
PROGRAMS_FETCH_TIMEOUT_SECONDS = float(os.getenv("PROGRAMS_FETCH_TIMEOUT_SECONDS", "15"))

CORS_ORIGINS = _parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
