"""Domain layer exports."""

from .models import (
    NO_TRANSCRIPTION,
    MintRequest,
    MintResult,
    PublishRequest,
    PublishResult,
    TranscriptionRequest,
    TranscriptionResult,
    TranscriptionSource,
    UploadRequest,
    UploadResult,
    VoiceMetadata,
)

__all__ = [
    "NO_TRANSCRIPTION",
    "MintRequest",
    "MintResult",
    "PublishRequest",
    "PublishResult",
    "TranscriptionRequest",
    "TranscriptionResult",
    "TranscriptionSource",
    "UploadRequest",
    "UploadResult",
    "VoiceMetadata",
]
