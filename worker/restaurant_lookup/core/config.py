"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    google_places_api_key: str
    request_timeout: Optional[float] = 10.0
    port: int = 8080


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return 10.0
    if raw.strip().lower() in {"none", "0"}:
        return None
    return float(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_places_api_key = os.getenv("GOOGLE_PLACES_API_KEY", "").strip()
    request_timeout = _parse_timeout(os.getenv("PLACES_REQUEST_TIMEOUT"))
    port = int(os.getenv("PORT", "8080"))

    if not google_places_api_key:
        logger.warning("GOOGLE_PLACES_API_KEY is not configured; restaurant lookups will fail.")

    return Settings(
        google_places_api_key=google_places_api_key,
        request_timeout=request_timeout,
        port=port,
    )
