"""Embeddings and moderation."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from .base import APIModel


class CreateEmbeddingRequest(APIModel):
    model: str
    input: Union[str, List[str]]
    user: Optional[str] = None


class Embedding(APIModel):
    object: str = ""
    embedding: List[float] = Field(default_factory=list)
    index: int = 0


class EmbeddingUsage(APIModel):
    prompt_tokens: int = 0
    total_tokens: int = 0


class CreateEmbeddingResponse(APIModel):
    object: str = ""
    data: List[Embedding] = Field(default_factory=list)
    model: str = ""
    usage: Optional[EmbeddingUsage] = None


class CreateModerationRequest(APIModel):
    input: Union[str, List[str]]
    model: Optional[str] = None


class ModerationCategories(APIModel):
    hate: bool = False
    hate_threatening: bool = Field(default=False, alias="hate/threatening")
    self_harm: bool = Field(default=False, alias="self-harm")
    sexual: bool = False
    sexual_minors: bool = Field(default=False, alias="sexual/minors")
    violence: bool = False
    violence_graphic: bool = Field(default=False, alias="violence/graphic")


class ModerationCategoryScores(APIModel):
    hate: float = 0.0
    hate_threatening: float = Field(default=0.0, alias="hate/threatening")
    self_harm: float = Field(default=0.0, alias="self-harm")
    sexual: float = 0.0
    sexual_minors: float = Field(default=0.0, alias="sexual/minors")
    violence: float = 0.0
    violence_graphic: float = Field(default=0.0, alias="violence/graphic")


class ModerationResult(APIModel):
    categories: ModerationCategories = Field(default_factory=ModerationCategories)
    category_scores: ModerationCategoryScores = Field(default_factory=ModerationCategoryScores)
    flagged: bool = False


class CreateModerationResponse(APIModel):
    id: str = ""
    model: str = ""
    results: List[ModerationResult] = Field(default_factory=list)


__all__ = [
    "CreateEmbeddingRequest",
    "CreateEmbeddingResponse",
    "Embedding",
    "EmbeddingUsage",
    "CreateModerationRequest",
    "CreateModerationResponse",
    "ModerationResult",
    "ModerationCategories",
    "ModerationCategoryScores",
]
