"""Audio transcription and speech synthesis."""

from __future__ import annotations

import httpx

from ..base.errors import InvalidArgumentError
from ..models.audio import (
    CreateAudioTranscriptionRequest,
    CreateAudioTranscriptionResponse,
    CreateSpeechRequest,
    JSON_RESPONSE_FORMATS,
    TEXT_RESPONSE_FORMATS,
)
from .transport import TransportMixin


class AudioMixin(TransportMixin):
    def create_audio_transcription(
        self, request: CreateAudioTranscriptionRequest
    ) -> CreateAudioTranscriptionResponse:
        """Transcribe audio (``POST /audio/transcriptions``, multipart).

        ``json`` and ``verbose_json`` bodies are decoded; ``text``, ``srt`` and
        ``vtt`` bodies are returned verbatim in ``text``.

        Raises:
            InvalidArgumentError: for an unknown ``response_format``; checked
                before any I/O.
        """
        response_format = request.effective_response_format()
        if response_format not in JSON_RESPONSE_FORMATS | TEXT_RESPONSE_FORMATS:
            raise InvalidArgumentError(f"unknown response format: {response_format}")
        response = self._send(
            "POST",
            "/audio/transcriptions",
            files={"file": (request.filename, request.file)},
            data=request.form_fields(),
            model=request.model,
        )
        if response_format in TEXT_RESPONSE_FORMATS:
            return CreateAudioTranscriptionResponse(text=response.text)
        return self._decode(response, CreateAudioTranscriptionResponse)

    def create_speech(self, request: CreateSpeechRequest) -> httpx.Response:
        """Synthesize speech (``POST /audio/speech``).

        Returns the open response streaming the audio bytes; iterate with
        ``iter_bytes()`` and close it when done.
        """
        return self._send(
            "POST",
            "/audio/speech",
            json=request.to_payload(),
            stream=True,
            model=request.model,
        )


__all__ = ["AudioMixin"]
