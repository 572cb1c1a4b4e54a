"""Unified configuration layer for the SDK client.

Goals
-----
* Centralize defaults (base URL).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by OPENROUTER_CONFIG_FILE
    3. Environment variables (OPENROUTER_API_KEY, OPENROUTER_BASE_URL,
       OPENROUTER_SITE_URL, OPENROUTER_SITE_TITLE)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_client_config()``.
* Keep zero hard dependency on PyYAML (load YAML only if available).

External Config File (Optional)
-------------------------------
If OPENROUTER_CONFIG_FILE is set to a path, we attempt to load JSON first.
If that fails and PyYAML is installed, attempt YAML. Settings may sit at the
top level or under an ``openrouter`` section:

```
openrouter:
  base_url: https://openrouter.ai/api/v1
  site_url: https://example.org
  site_title: My App
```

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import OPENROUTER_DEFAULT_BASE_URL, OPENROUTER_DEFAULT_MODEL
from .env import (
    API_KEY_ENV,
    CONFIG_FILE_ENV,
    DOTENV_FILE_ENV,
    ENV_FIELD_MAP,
    get_api_key,
    is_placeholder,
)

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


DEFAULTS: Dict[str, Any] = {
    "base_url": OPENROUTER_DEFAULT_BASE_URL,
}

CONFIG_FIELDS = tuple(ENV_FIELD_MAP.keys())
_FILE_SECTION = "openrouter"

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):]
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        if yaml is None:
            return {}
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            return {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    section = data.get(_FILE_SECTION)
    if isinstance(section, dict):
        data = section
    _FILE_CACHE = {k: v for k, v in data.items() if k in CONFIG_FIELDS}
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        if env_name == API_KEY_ENV:
            val = get_api_key()
        else:
            val = os.getenv(env_name) or None
        if val is not None:
            out[field] = val
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged client settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` do not clear lower layers.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached external file and re-arm the ``.env`` loader."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_client_config",
    "reset_config_cache",
    "is_placeholder",
    "DEFAULTS",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
]
