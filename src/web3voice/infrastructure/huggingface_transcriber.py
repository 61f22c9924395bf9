"""Hugging Face inference implementation of the TranscriptionService interface."""

import httpx

from web3voice.config import HuggingFaceConfig
from web3voice.domain.models import (
    NO_TRANSCRIPTION,
    TranscriptionRequest,
    TranscriptionResult,
)
from web3voice.exceptions import ConfigurationError, InputError, UpstreamError
from web3voice.interfaces import TranscriptionService
from web3voice.logging import setup_logging

from ._responses import error_message, timeout_kwargs

logger = setup_logging()

PROVIDER = "huggingface"


class HuggingFaceTranscriber(TranscriptionService):
    """Transcribes audio URLs with a hosted Whisper model."""

    def __init__(self, client: httpx.Client, config: HuggingFaceConfig):
        self._client = client
        self._config = config

    def transcribe(
        self, request: TranscriptionRequest, timeout: float | None = None
    ) -> TranscriptionResult:
        """
        Sends the audio URL to the inference endpoint.

        A response without text is not an error: the result carries the
        fallback text instead, so transcription never blocks minting.
        """
        if not request.audio_url:
            raise InputError("Audio URL is required")
        if not self._config.api_key:
            raise ConfigurationError(["HUGGING_FACE_API_KEY"])

        try:
            response = self._client.post(
                self._config.model_url,
                json={"inputs": request.audio_url},
                headers={"Authorization": f"Bearer {self._config.api_key}"},
                **timeout_kwargs(timeout),
            )
        except httpx.HTTPError as e:
            logger.exception(
                "Hugging Face request failed",
                extra={"audio_url": request.audio_url},
            )
            raise UpstreamError(
                PROVIDER, str(e) or "Hugging Face request failed", e
            ) from e

        if response.is_error:
            message = error_message(response, "Hugging Face")
            logger.error(
                "Hugging Face rejected transcription",
                extra={
                    "audio_url": request.audio_url,
                    "status_code": response.status_code,
                    "error": message,
                },
            )
            raise UpstreamError(PROVIDER, message)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(
                PROVIDER, "Hugging Face returned a non-JSON response", e
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamError(PROVIDER, "Hugging Face returned an unexpected payload")

        text = payload.get("text")
        if text is not None and not isinstance(text, str):
            raise UpstreamError(PROVIDER, "Hugging Face returned a non-text transcription")

        if not text:
            logger.info(
                "No transcription text returned",
                extra={"audio_url": request.audio_url},
            )
            return TranscriptionResult(text=NO_TRANSCRIPTION)

        logger.info(
            "Audio transcription successful",
            extra={"audio_url": request.audio_url, "characters": len(text)},
        )
        return TranscriptionResult(text=text)
