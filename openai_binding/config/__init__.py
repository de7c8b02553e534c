"""Unified configuration layer for the client.

Merge order (later wins)
------------------------
1. Built-in defaults (``base_url``, ``beta_header``)
2. Optional external config file (JSON or YAML) named by
   ``OPENAI_BINDING_CONFIG_FILE``
3. Environment variables (``OPENAI_API_KEY``, ``OPENAI_ORGANIZATION`` /
   ``OPENAI_ORG_ID``, ``OPENAI_BASE_URL``)
4. In-code overrides passed to :func:`get_client_config`

External Config File
--------------------
JSON is tried first, then YAML. Either form is a flat mapping::

    api_key: sk-...
    organization: org-...
    base_url: https://api.openai.com/v1

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import json
import os

import yaml

from .env import ENV_ALIASES, is_placeholder, resolve_env_value
from .defaults import ASSISTANTS_BETA_HEADER, CONFIG_FILE_ENV, DEFAULT_BASE_URL


DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "beta_header": ASSISTANTS_BETA_HEADER,
}


_FILE_CACHE: Optional[Tuple[Optional[str], Dict[str, Any]]] = None
_DOTENV_LOADED = False


def _parse_dotenv_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for a ``KEY=VALUE`` line, ``None`` otherwise.

    Surrounding quotes of the value are removed; ``#`` lines are comments.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip('"').strip("'")


def _load_dotenv_once() -> None:
    """Apply ``DOTENV_FILE`` (default ``.env``) to ``os.environ`` once per process.

    A variable already set is only replaced when its value looks like a
    placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = Path(os.getenv("DOTENV_FILE", ".env"))
    if not path.is_file():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_dotenv_line(raw)
        if parsed is None:
            continue
        key, value = parsed
        if key not in os.environ or is_placeholder(os.environ[key]):
            os.environ[key] = value


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            return {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    """Return the mapping stored in ``OPENAI_BINDING_CONFIG_FILE``, cached per path."""
    global _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if _FILE_CACHE is not None and _FILE_CACHE[0] == path:
        return _FILE_CACHE[1]
    data: Dict[str, Any] = {}
    if path and Path(path).is_file():
        data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    _FILE_CACHE = (path, data)
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_ALIASES:
        val, _ = resolve_env_value(field)
        if val is not None:
            out[field] = val
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged client configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored so constructor arguments that
    were not supplied do not mask lower layers.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_client_config",
    "reset_config_cache",
    "DEFAULTS",
]
