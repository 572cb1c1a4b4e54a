"""openrouter_sdk.config.env
==========================

Environment variable names read by the SDK and small helpers around them.

Purpose
-------
- Single source of truth for the variable names mapped onto client settings.
- Placeholder detection so a template ``.env`` never shadows a real value.

Failure Modes
-------------
- Helpers never raise on unset variables; they return ``None`` and callers
  decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

API_KEY_ENV = "OPENROUTER_API_KEY"  # pragma: allowlist secret - env var name, not a secret
BASE_URL_ENV = "OPENROUTER_BASE_URL"
SITE_URL_ENV = "OPENROUTER_SITE_URL"
SITE_TITLE_ENV = "OPENROUTER_SITE_TITLE"
CONFIG_FILE_ENV = "OPENROUTER_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"

# Client setting -> environment variable
ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": API_KEY_ENV,
    "base_url": BASE_URL_ENV,
    "site_url": SITE_URL_ENV,
    "site_title": SITE_TITLE_ENV,
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', 'your_', or
    starts with 'test_'. The check is case-insensitive and resilient to
    surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("your_")
        or v.startswith("test_")
    )


def get_api_key() -> Optional[str]:
    """Return the API key from the environment, ignoring empty and placeholder values."""
    value = os.getenv(API_KEY_ENV)
    if not value or is_placeholder(value):
        return None
    return value.strip()


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "SITE_URL_ENV",
    "SITE_TITLE_ENV",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "ENV_FIELD_MAP",
    "is_placeholder",
    "get_api_key",
]
