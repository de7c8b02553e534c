"""Audio transcription and text-to-speech."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import APIModel

TEXT_RESPONSE_FORMATS = frozenset(("text", "srt", "vtt"))
JSON_RESPONSE_FORMATS = frozenset(("json", "verbose_json"))


class CreateAudioTranscriptionRequest(APIModel):
    """Multipart parameters of ``POST /audio/transcriptions``.

    ``file`` is raw audio content or a readable binary file object and
    ``filename`` the name reported to the server (its extension tells the
    server the audio format). ``response_format`` defaults to ``json``.
    """

    file: Any = Field(exclude=True)
    filename: str
    model: str
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None
    language: Optional[str] = None

    def effective_response_format(self) -> str:
        return self.response_format or "json"

    def form_fields(self) -> Dict[str, str]:
        """Non-file multipart fields; unset values are not sent."""
        fields = {"model": self.model}
        if self.prompt:
            fields["prompt"] = self.prompt
        if self.response_format:
            fields["response_format"] = self.response_format
        if self.temperature:
            fields["temperature"] = repr(float(self.temperature))
        if self.language:
            fields["language"] = self.language
        return fields


class TranscriptionSegment(APIModel):
    id: int = 0
    start: float = 0.0
    end: float = 0.0
    text: str = ""


class CreateAudioTranscriptionResponse(APIModel):
    """Transcription result for every response format.

    For ``text``, ``srt`` and ``vtt`` the raw body is stored in ``text``;
    ``verbose_json`` additionally fills ``language``, ``duration`` and
    ``segments``.
    """

    text: str = ""
    language: Optional[str] = None
    duration: Optional[float] = None
    segments: List[TranscriptionSegment] = Field(default_factory=list)


class CreateSpeechRequest(APIModel):
    model: str
    input: str
    voice: Optional[str] = None
    response_format: Optional[str] = None
    speed: Optional[float] = None


__all__ = [
    "CreateAudioTranscriptionRequest",
    "CreateAudioTranscriptionResponse",
    "TranscriptionSegment",
    "CreateSpeechRequest",
    "TEXT_RESPONSE_FORMATS",
    "JSON_RESPONSE_FORMATS",
]
