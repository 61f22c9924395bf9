"""Request and response models for the gateway API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from web3voice.domain.models import VoiceMetadata


class ProcessAudioRequest(BaseModel):
    """Body of a transcription request."""

    model_config = ConfigDict(populate_by_name=True)

    audio_url: str | None = Field(default=None, alias="audioUrl")


class MintNftRequest(BaseModel):
    """Body of a mint request."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(alias="accountId", min_length=1)
    metadata: VoiceMetadata


class UploadResponse(BaseModel):
    """Response returned after a file is pinned."""

    success: bool = True
    cid: str


class TranscriptionResponse(BaseModel):
    """Response returned after audio is transcribed."""

    success: bool = True
    transcription: str


class MintResponse(BaseModel):
    """Response returned after an NFT is minted; result is the provider's outcome."""

    success: bool = True
    result: Any


class ErrorResponse(BaseModel):
    """Envelope returned for every failure."""

    success: bool = False
    error: str
