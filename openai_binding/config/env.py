"""openai_binding.config.env
=========================

Environment variable mapping for client settings.

Design Notes
------------
- Each config field maps to an ordered tuple of acceptable environment
  variable names, canonical first, in ``ENV_ALIASES``.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Config field → ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "api_key": ("OPENAI_API_KEY",),  # pragma: allowlist secret - env var name, not a secret
    "organization": ("OPENAI_ORGANIZATION", "OPENAI_ORG_ID"),
    "base_url": ("OPENAI_BASE_URL",),
}


_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """Whether ``val`` looks like a template value rather than a real setting.

    Case-insensitive: a value containing one of ``_PLACEHOLDER_MARKERS`` or
    starting with ``test_`` counts. ``.env`` entries may replace such values.
    """
    if val is None:
        return False
    lowered = str(val).strip().lower()
    return lowered.startswith("test_") or any(marker in lowered for marker in _PLACEHOLDER_MARKERS)


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a config field."""
    yield from ENV_ALIASES.get(field, ())


def resolve_env_value(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a config field from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        (value, env_var_used) for the first non-empty candidate, or
        (None, None) when nothing is set.
    """
    for name in get_env_var_candidates(field):
        if val := os.environ.get(name):
            return val, name
    return None, None


__all__ = [
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_env_value",
]
