"""Process-wide pool of ``httpx.Client`` instances.

Clients built by ``Client`` without an explicit ``http_client`` share one
connection pool per ``(base_url, purpose)`` key. A pooled client that was
closed is transparently rebuilt on the next lookup. Timeouts are taken from
:func:`get_timeout_config` when the client is built.

Everything in the pool is closed at interpreter exit; tests call
:func:`close_all_clients` directly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Any, Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

PoolKey = Tuple[Optional[str], str]

_POOL: Dict[PoolKey, httpx.Client] = {}
_POOL_LOCK = threading.RLock()


def _build(base_url: Optional[str]) -> httpx.Client:
    kwargs: Dict[str, Any] = {"timeout": get_timeout_config().as_httpx()}
    if base_url:
        kwargs["base_url"] = base_url
    return httpx.Client(**kwargs)


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return the open pooled client for ``base_url`` and ``purpose``.

    Parameters:
        base_url: API root the client is bound to; ``None`` shares one key.
        purpose: Pool discriminator (the binding uses ``"api"``).
    """
    key: PoolKey = (base_url, purpose)
    with _POOL_LOCK:
        client = _POOL.get(key)
        if client is None or client.is_closed:
            client = _POOL[key] = _build(base_url)
        return client


def close_all_clients() -> None:
    """Close every pooled client and empty the pool."""
    with _POOL_LOCK:
        clients = list(_POOL.values())
        _POOL.clear()
    for client in clients:
        # shutdown-time close failures are not actionable
        with contextlib.suppress(Exception):
            client.close()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
