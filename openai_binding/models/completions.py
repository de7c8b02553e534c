"""Legacy text completions, edits and the model listing."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import APIModel, Usage


class CreateCompletionRequest(APIModel):
    model: str
    prompt: List[str]
    suffix: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None


class CompletionChoice(APIModel):
    text: str = ""
    index: int = 0
    logprobs: Optional[Any] = None
    finish_reason: Optional[str] = None


class CreateCompletionResponse(APIModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[CompletionChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None


class CreateEditRequest(APIModel):
    model: str
    instruction: str
    input: Optional[str] = None
    n: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None


class EditChoice(APIModel):
    text: str = ""
    index: int = 0


class CreateEditResponse(APIModel):
    object: str = ""
    created: int = 0
    choices: List[EditChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None


class ModelPermission(APIModel):
    id: str = ""
    object: str = ""
    created: int = 0
    allow_create_engine: bool = False
    allow_sampling: bool = False
    allow_logprobs: bool = False
    allow_search_indices: bool = False
    allow_view: bool = False
    allow_fine_tuning: bool = False
    organization: str = ""
    group: Optional[Any] = None
    is_blocking: bool = False


class Model(APIModel):
    id: str = ""
    object: str = ""
    created: int = 0
    owned_by: str = ""
    permission: List[ModelPermission] = Field(default_factory=list)
    root: Optional[str] = None
    parent: Optional[Any] = None


class Models(APIModel):
    object: str = "list"
    data: List[Model] = Field(default_factory=list)


__all__ = [
    "CreateCompletionRequest",
    "CreateCompletionResponse",
    "CompletionChoice",
    "CreateEditRequest",
    "CreateEditResponse",
    "EditChoice",
    "Model",
    "ModelPermission",
    "Models",
]
