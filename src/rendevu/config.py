"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from rendevu.credentials import CREDENTIALS

CALCOM_API_BASE = "https://api.cal.com/v2"
CALCOM_API_VERSION = "2024-06-11"
DEFAULT_TIMEOUT = 30.0

DEFAULT_AI_PROVIDER = "anthropic"


@dataclass(frozen=True)
class CalcomConfig:
    api_key: str
    base_url: str = CALCOM_API_BASE
    api_version: str = CALCOM_API_VERSION


def load_calcom_config() -> CalcomConfig | None:
    """Build the Cal.com config from the environment.

    Returns None when CALCOM_API_KEY is not set, so callers can report the
    missing credential instead of failing at import time.
    """
    api_key = CREDENTIALS["calcom"].get()
    if not api_key:
        return None
    return CalcomConfig(
        api_key=api_key,
        base_url=os.getenv("CALCOM_API_BASE_URL") or CALCOM_API_BASE,
        api_version=os.getenv("CALCOM_API_VERSION") or CALCOM_API_VERSION,
    )


@dataclass(frozen=True)
class AIConfig:
    provider: str = DEFAULT_AI_PROVIDER
    model: str | None = None


def load_ai_config() -> AIConfig:
    return AIConfig(
        provider=os.getenv("AI_PROVIDER") or DEFAULT_AI_PROVIDER,
        model=os.getenv("AI_MODEL") or None,
    )
