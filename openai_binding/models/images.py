"""Image generation."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import APIModel


class CreateImageRequest(APIModel):
    """Parameters of ``POST /images/generations``.

    ``response_format`` is ``"url"`` (default) or ``"b64_json"``; ``quality``
    and ``style`` only apply to models that support them.
    """

    prompt: str
    model: Optional[str] = None
    n: Optional[int] = None
    size: Optional[str] = None
    response_format: Optional[str] = None
    user: Optional[str] = None
    quality: Optional[str] = None
    style: Optional[str] = None


class ImageData(APIModel):
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None


class CreateImageResponse(APIModel):
    created: int = 0
    data: List[ImageData] = Field(default_factory=list)


__all__ = ["CreateImageRequest", "CreateImageResponse", "ImageData"]
