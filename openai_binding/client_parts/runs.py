"""Runs and run steps (beta endpoints)."""

from __future__ import annotations

from typing import Optional

from ..models.base import ListParams
from ..models.runs import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    ListRunStepsResponse,
    ListRunsResponse,
    Run,
    RunStep,
    SubmitToolOutputsRequest,
    UpdateRunRequest,
)
from .transport import TransportMixin


class RunsMixin(TransportMixin):
    def create_run(self, thread_id: str, request: CreateRunRequest) -> Run:
        return self._request(
            "POST",
            f"/threads/{thread_id}/runs",
            Run,
            json=request.to_payload(),
            beta=True,
            model=request.model,
        )

    def get_run(self, thread_id: str, run_id: str) -> Run:
        return self._request("GET", f"/threads/{thread_id}/runs/{run_id}", Run, beta=True)

    def update_run(self, thread_id: str, run_id: str, request: UpdateRunRequest) -> Run:
        return self._request(
            "POST",
            f"/threads/{thread_id}/runs/{run_id}",
            Run,
            json=request.to_payload(),
            beta=True,
        )

    def list_runs(self, thread_id: str, params: Optional[ListParams] = None) -> ListRunsResponse:
        return self._request(
            "GET",
            f"/threads/{thread_id}/runs",
            ListRunsResponse,
            params=self._list_query(params),
            beta=True,
        )

    def submit_tool_outputs(self, thread_id: str, run_id: str, request: SubmitToolOutputsRequest) -> Run:
        """Answer a ``requires_action`` run with the outputs of its tool calls."""
        return self._request(
            "POST",
            f"/threads/{thread_id}/runs/{run_id}/submit_tool_outputs",
            Run,
            json=request.to_payload(),
            beta=True,
        )

    def cancel_run(self, thread_id: str, run_id: str) -> Run:
        return self._request("POST", f"/threads/{thread_id}/runs/{run_id}/cancel", Run, beta=True)

    def create_thread_and_run(self, request: CreateThreadAndRunRequest) -> Run:
        return self._request(
            "POST",
            "/threads/runs",
            Run,
            json=request.to_payload(),
            beta=True,
            model=request.model,
        )

    def get_run_step(self, thread_id: str, run_id: str, step_id: str) -> RunStep:
        return self._request(
            "GET",
            f"/threads/{thread_id}/runs/{run_id}/steps/{step_id}",
            RunStep,
            beta=True,
        )

    def list_run_steps(
        self, thread_id: str, run_id: str, params: Optional[ListParams] = None
    ) -> ListRunStepsResponse:
        return self._request(
            "GET",
            f"/threads/{thread_id}/runs/{run_id}/steps",
            ListRunStepsResponse,
            params=self._list_query(params),
            beta=True,
        )


__all__ = ["RunsMixin"]
