"""Configuration loading for scholar-scraper."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from scholar_scraper.exceptions import InvalidServiceError
from scholar_scraper.models import ServiceTarget


class ScholarConfig(BaseModel):
    service: ServiceTarget = ServiceTarget.SCHOLAR
    timeout_s: float = 20.0
    follow_redirects: bool = True


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_service(name: str) -> ServiceTarget:
    raw = os.getenv(name, ServiceTarget.SCHOLAR.value).strip().lower()
    try:
        return ServiceTarget(raw)
    except ValueError:
        raise InvalidServiceError(f"Unknown search service: {raw!r}") from None


def load_config(env_path: str | Path | None = None) -> ScholarConfig:
    """Load configuration from environment variables (.env file)."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    return ScholarConfig(
        service=_env_service("SCHOLAR_SERVICE"),
        timeout_s=float(os.getenv("SCHOLAR_TIMEOUT_S", "20.0")),
        follow_redirects=_env_bool("SCHOLAR_FOLLOW_REDIRECTS", True),
    )
