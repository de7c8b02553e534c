"""Typed client for the OpenAI HTTP API.

Summary:
- One method per endpoint, grouped in mixins under ``client_parts``
- Requests and responses are pydantic models; chat types live in ``chat``
- Streaming chat responses are decoded by ``streaming`` on the caller's thread

Configuration:
- Missing constructor arguments come from :func:`get_client_config`
  (config file, then ``OPENAI_API_KEY`` / ``OPENAI_ORGANIZATION`` /
  ``OPENAI_BASE_URL``)
- Without an explicit ``http_client`` the shared pooled ``httpx.Client`` for
  the base URL is used; timeouts come from ``get_timeout_config()``

Errors & Observability:
- Every failure is an ``APIError`` subclass with a normalized ``ErrorCode``
- Requests emit ``http.request`` / ``http.response`` / ``http.error`` events
  on the ``openai_binding.client`` logger; the API key is never logged
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from .base.errors import APIError, ErrorCode
from .base.http import get_httpx_client
from .base.logging import get_logger
from .client_parts import (
    AssistantsMixin,
    AudioMixin,
    ChatMixin,
    CompletionsMixin,
    FilesMixin,
    FineTunesMixin,
    MediaMixin,
    RunsMixin,
    ThreadsMixin,
)
from .config import get_client_config
from .config.defaults import ASSISTANTS_BETA_HEADER, DEFAULT_BASE_URL, HTTP_POOL_PURPOSE


class Client(
    CompletionsMixin,
    MediaMixin,
    FilesMixin,
    FineTunesMixin,
    ChatMixin,
    AudioMixin,
    AssistantsMixin,
    ThreadsMixin,
    RunsMixin,
):
    """Client bound to one API key, organization and base URL.

    Parameters:
        api_key: API key; resolved from configuration when omitted.
        organization: Optional organization id sent as ``OpenAI-Organization``.
        base_url: API root (defaults to ``https://api.openai.com/v1``).
        http_client: Optional ``httpx.Client`` to send requests with. The
            binding never closes a client it did not create.

    Raises:
        APIError: with code ``auth`` when no API key can be resolved.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        organization: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        cfg = get_client_config(
            {"api_key": api_key, "organization": organization, "base_url": base_url}
        )
        key = cfg.get("api_key")
        if not key:
            raise APIError(code=ErrorCode.AUTH, message="missing API key (set OPENAI_API_KEY)")
        self._api_key: str = key
        self._organization: Optional[str] = cfg.get("organization") or None
        self._base_url: str = cfg.get("base_url") or DEFAULT_BASE_URL
        self._beta_header: str = cfg.get("beta_header") or ASSISTANTS_BETA_HEADER
        self._http = http_client if http_client is not None else get_httpx_client(self._base_url, HTTP_POOL_PURPOSE)
        self._logger = get_logger("openai_binding.client")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def organization(self) -> Optional[str]:
        return self._organization

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Client(base_url={self._base_url!r}, organization={self._organization!r})"


def new_client(api_key: Optional[str] = None, **kwargs: Any) -> Client:
    """Shortcut for ``Client(api_key, **kwargs)``."""
    return Client(api_key, **kwargs)


__all__ = ["Client", "new_client"]
