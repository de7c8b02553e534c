"""Shared fixtures for the binding test suite.

Every test runs with a clean configuration environment: the ``OPENAI_*``
variables are removed, ``.env`` loading points at a missing file and the
config caches are reset. HTTP traffic goes through ``httpx.MockTransport``.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Optional

import httpx
import pytest

from openai_binding import Client
from openai_binding.config import reset_config_cache
from openai_binding.config.defaults import CONFIG_FILE_ENV

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_ORGANIZATION",
    "OPENAI_ORG_ID",
    "OPENAI_BASE_URL",
    CONFIG_FILE_ENV,
)

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


class FakeLineStream:
    """In-memory line stream recording reads and close calls.

    ``error`` is raised after the scripted lines are exhausted.
    """

    def __init__(self, lines: List[str], error: Optional[BaseException] = None) -> None:
        self._lines = list(lines)
        self._error = error
        self.reads = 0
        self.close_calls = 0

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    def iter_lines(self) -> Iterator[str]:
        for line in self._lines:
            self.reads += 1
            yield line
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture()
def line_stream() -> Callable[..., FakeLineStream]:
    return FakeLineStream


@pytest.fixture()
def make_client() -> Iterator[Callable[..., Client]]:
    """Build a ``Client`` whose requests are answered by ``handler``."""
    opened: List[httpx.Client] = []

    def factory(handler: Handler, **kwargs) -> Client:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        opened.append(http)
        kwargs.setdefault("api_key", "sk-live-123")
        return Client(http_client=http, **kwargs)

    yield factory
    for http in opened:
        http.close()


@pytest.fixture()
def recorder():
    """Handler factory that records requests and replies with a canned response."""

    class Recorder:
        def __init__(self) -> None:
            self.requests: List[httpx.Request] = []
            self.response: Callable[[httpx.Request], httpx.Response] = lambda r: httpx.Response(200, json={})

        def reply(self, *args, **kwargs) -> "Recorder":
            self.response = lambda r: httpx.Response(*args, **kwargs)
            return self

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.response(request)

        @property
        def last(self) -> httpx.Request:
            return self.requests[-1]

    return Recorder()
