"""HTTP plumbing shared by every resource mixin.

All requests go through :meth:`TransportMixin._send`, which:

- builds the absolute URL from the configured base URL
- sets ``Authorization``, ``OpenAI-Organization`` and, for assistants-family
  endpoints, ``OpenAI-Beta``
- maps ``httpx`` transport failures to :class:`APIError`
- treats every status other than 200 as an error carrying the status, the
  reason phrase and the body text

There are no retries.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..base.errors import APIError, DecodeError, ErrorCode, classify_status
from ..base.logging import LogContext, log_event
from ..models.base import ListParams

M = TypeVar("M", bound=BaseModel)

_REQUEST_ID_HEADERS = ("x-request-id", "openai-request-id")


def _request_id(response: httpx.Response) -> Optional[str]:
    for name in _REQUEST_ID_HEADERS:
        if value := response.headers.get(name):
            return value
    return None


class TransportMixin:
    """Mixin providing request helpers; expects the attributes set by ``Client``."""

    _api_key: str
    _organization: Optional[str]
    _base_url: str
    _beta_header: str
    _http: httpx.Client
    _logger: logging.Logger

    @staticmethod
    def _list_query(params: Optional[ListParams]) -> Optional[Dict[str, Any]]:
        if params is None:
            return None
        return params.to_query() or None

    def _url(self, path: str) -> str:
        return f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self, *, beta: bool) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        if self._organization:
            headers["OpenAI-Organization"] = self._organization
        if beta:
            headers["OpenAI-Beta"] = self._beta_header
        return headers

    def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        files: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        beta: bool = False,
        stream: bool = False,
        model: Optional[str] = None,
    ) -> httpx.Response:
        """Issue one request and return the 200 response.

        With ``stream=True`` the body is left unread and the caller owns the
        returned response (it must be closed).

        Raises:
            APIError: on transport failure (``timeout`` / ``transport``) or on
                any non-200 status (code classified from the status).
        """
        ctx = LogContext(method=method, endpoint=path, model=model)
        request = self._http.build_request(
            method,
            self._url(path),
            headers=self._headers(beta=beta),
            json=json,
            params=params,
            files=files,
            data=data,
        )
        log_event(self._logger, "http.request", ctx, level=logging.DEBUG, stream=stream or None)
        start = time.monotonic()
        try:
            response = self._http.send(request, stream=stream)
        except httpx.TimeoutException as exc:
            log_event(self._logger, "http.error", ctx, level=logging.WARNING, error_code=ErrorCode.TIMEOUT.value)
            raise APIError(
                code=ErrorCode.TIMEOUT,
                message=f"{method} {path} timed out: {exc}",
                raw=exc,
            ) from exc
        except httpx.HTTPError as exc:
            log_event(self._logger, "http.error", ctx, level=logging.WARNING, error_code=ErrorCode.TRANSPORT.value)
            raise APIError(
                code=ErrorCode.TRANSPORT,
                message=f"{method} {path} failed: {exc}",
                raw=exc,
            ) from exc

        ctx.request_id = _request_id(response)
        elapsed_ms = int((time.monotonic() - start) * 1000)
        if response.status_code != httpx.codes.OK:
            self._raise_for_status(response, ctx, elapsed_ms)
        log_event(
            self._logger,
            "http.response",
            ctx,
            level=logging.DEBUG,
            status=response.status_code,
            elapsed_ms=elapsed_ms,
        )
        return response

    def _raise_for_status(self, response: httpx.Response, ctx: LogContext, elapsed_ms: int) -> None:
        try:
            body = response.read().decode("utf-8", errors="replace")
        except httpx.HTTPError:
            body = ""
        finally:
            response.close()
        status = response.status_code
        code = classify_status(status)
        log_event(
            self._logger,
            "http.error",
            ctx,
            level=logging.WARNING,
            status=status,
            error_code=code.value,
            elapsed_ms=elapsed_ms,
        )
        raise APIError(
            code=code,
            message=f"unexpected status code: {status}: {httpx.codes.get_reason_phrase(status)}: {body}",
            status_code=status,
            body=body,
        )

    def _decode(self, response: httpx.Response, model_cls: Type[M]) -> M:
        try:
            return model_cls.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode response: {exc}", raw=exc) from exc

    def _request(
        self,
        method: str,
        path: str,
        model_cls: Type[M],
        **kwargs: Any,
    ) -> M:
        """Send a request and decode the JSON body into ``model_cls``."""
        response = self._send(method, path, **kwargs)
        return self._decode(response, model_cls)


__all__ = ["TransportMixin"]
