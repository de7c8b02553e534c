"""Centralized HTTP timeout configuration.

Key Components
--------------
TimeoutConfig
    Dataclass capturing the four ``httpx`` timeout phases in seconds.

get_timeout_config()
    Returns a process-cached configuration. The cache is refreshed whenever
    one of the supported environment variables changes, so tests can adjust
    values with ``monkeypatch.setenv``. Supported variables (all optional):
        OPENAI_BINDING_TIMEOUT_CONNECT_SECONDS
        OPENAI_BINDING_TIMEOUT_READ_SECONDS
        OPENAI_BINDING_TIMEOUT_WRITE_SECONDS
        OPENAI_BINDING_TIMEOUT_POOL_SECONDS

The read timeout also bounds the idle gap between two lines of an event
stream, so it defaults to a generous value.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx

_ENV_PREFIX = "OPENAI_BINDING_TIMEOUT_"
_FIELDS = ("connect", "read", "write", "pool")


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_seconds: Time allowed to establish a connection.
        read_seconds: Time allowed between two received chunks.
        write_seconds: Time allowed to send one chunk of the request body.
        pool_seconds: Time allowed to acquire a pooled connection.
    """

    connect_seconds: float = 10.0
    read_seconds: float = 600.0
    write_seconds: float = 60.0
    pool_seconds: float = 10.0

    def as_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(
            connect=self.connect_seconds,
            read=self.read_seconds,
            write=self.write_seconds,
            pool=self.pool_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join(os.getenv(f"{_ENV_PREFIX}{f.upper()}_SECONDS", "") for f in _FIELDS)
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_seconds=_parse_env_float(f"{_ENV_PREFIX}CONNECT_SECONDS", defaults.connect_seconds),
        read_seconds=_parse_env_float(f"{_ENV_PREFIX}READ_SECONDS", defaults.read_seconds),
        write_seconds=_parse_env_float(f"{_ENV_PREFIX}WRITE_SECONDS", defaults.write_seconds),
        pool_seconds=_parse_env_float(f"{_ENV_PREFIX}POOL_SECONDS", defaults.pool_seconds),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
