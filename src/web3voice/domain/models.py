"""Domain models for the upload-transcribe-mint pipeline."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NO_TRANSCRIPTION = "No transcription available"


class UploadRequest(BaseModel, frozen=True):
    """Describes a file handed to the storage gateway."""

    file_name: str
    size: int
    content_type: str | None = None


class UploadResult(BaseModel, frozen=True):
    """Content identifier returned by the pinning provider."""

    cid: str = Field(min_length=1)


class TranscriptionRequest(BaseModel, frozen=True):
    """Reference to audio that the inference provider can fetch."""

    audio_url: str


class TranscriptionResult(BaseModel, frozen=True):
    """Plain-text transcription of a piece of audio."""

    text: str = NO_TRANSCRIPTION


class VoiceMetadata(BaseModel):
    """
    Metadata attached to a minted voice NFT.

    Only ``cid`` is required. Field names follow the on-chain voice NFT
    metadata record where the two overlap; unknown keys are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cid: str = Field(min_length=1)
    title: str | None = None
    description: str | None = None
    content_type: str | None = None
    creator: str | None = None
    transcript: str | None = None
    duration: int | None = Field(default=None, ge=0)
    language: str | None = None
    tags: list[str] | None = None


class MintRequest(BaseModel, frozen=True):
    """A request to mint a voice NFT for an account."""

    account_id: str = Field(min_length=1)
    metadata: VoiceMetadata


class MintResult(BaseModel, frozen=True):
    """Opaque transaction outcome returned by the blockchain provider."""

    outcome: Any


class TranscriptionSource(str, Enum):
    """Which audio the pipeline transcribes, if any."""

    UPLOADED = "uploaded"
    EXTERNAL = "external"
    NONE = "none"


class PublishRequest(BaseModel, frozen=True):
    """Input for a full record -> transcribe -> mint run."""

    file_name: str
    size: int
    account_id: str
    content_type: str | None = None
    title: str | None = None
    description: str | None = None
    creator: str | None = None
    language: str | None = None
    tags: list[str] | None = None
    transcription_source: TranscriptionSource = TranscriptionSource.UPLOADED
    audio_url: str | None = None
    require_transcript: bool = False
    idempotency_key: str | None = None


class PublishResult(BaseModel, frozen=True):
    """Outcome of a successful pipeline run."""

    cid: str
    transcript: str | None
    mint: MintResult
    idempotency_key: str
