"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from web3voice.domain.models import TranscriptionRequest, TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(
        self, request: TranscriptionRequest, timeout: float | None = None
    ) -> TranscriptionResult:
        """
        Transcribes the audio found at a URL.

        Args:
            request: The audio reference.
            timeout: Optional per-call deadline in seconds.

        Returns:
            The transcription, or the fallback text when the provider has none.

        Raises:
            InputError: If the audio URL is empty.
            ConfigurationError: If provider credentials are missing.
            UpstreamError: If the provider fails or returns a malformed payload.
        """
        pass
