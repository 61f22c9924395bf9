"""Record -> transcribe -> mint orchestration."""

import uuid
from typing import BinaryIO

from web3voice.domain.models import (
    NO_TRANSCRIPTION,
    MintRequest,
    PublishRequest,
    PublishResult,
    TranscriptionRequest,
    TranscriptionSource,
    UploadRequest,
    VoiceMetadata,
)
from web3voice.exceptions import (
    CacheServiceError,
    ConfigurationError,
    InputError,
    MintInProgressError,
    PipelineError,
    UpstreamError,
)
from web3voice.interfaces import MintingService, StorageGateway, TranscriptionService
from web3voice.logging import setup_logging

logger = setup_logging()

_STEP_ERRORS = (
    InputError,
    ConfigurationError,
    UpstreamError,
    MintInProgressError,
    CacheServiceError,
)


class VoicePublishingPipeline:
    """
    Publishes a voice recording as an NFT.

    The upload always completes before minting, since the minted metadata
    embeds the CID. Transcription runs between the two according to
    ``PublishRequest.transcription_source`` and is best effort unless
    ``require_transcript`` is set. Nothing is compensated on failure: a
    mint failure after a successful upload leaves the pinned file in place,
    and ``PipelineError.cid`` reports it.
    """

    def __init__(
        self,
        storage: StorageGateway,
        transcriber: TranscriptionService,
        minter: MintingService,
    ):
        self._storage = storage
        self._transcriber = transcriber
        self._minter = minter

    def publish(self, request: PublishRequest, data: BinaryIO) -> PublishResult:
        """
        Runs upload, optional transcription and mint in order.

        Args:
            request: What to publish and how to transcribe it.
            data: File-like object with the recording.

        Returns:
            The CID, transcript (if any), mint outcome and the idempotency key
            used, which the caller can reuse to retry the same attempt.

        Raises:
            PipelineError: If a step fails; ``stage`` names the step.
        """
        if (
            request.transcription_source == TranscriptionSource.EXTERNAL
            and not request.audio_url
        ):
            raise PipelineError(
                "transcribe",
                InputError("Audio URL is required for external transcription"),
            )

        idempotency_key = request.idempotency_key or str(uuid.uuid4())

        try:
            upload = self._storage.upload(
                UploadRequest(
                    file_name=request.file_name,
                    size=request.size,
                    content_type=request.content_type,
                ),
                data,
            )
        except _STEP_ERRORS as e:
            raise PipelineError("upload", e) from e

        transcript = self._transcribe(request, upload.cid)

        metadata = VoiceMetadata(
            cid=upload.cid,
            title=request.title,
            description=request.description,
            content_type=request.content_type,
            creator=request.creator,
            transcript=transcript,
            language=request.language,
            tags=request.tags,
        )

        try:
            mint = self._minter.mint(
                MintRequest(account_id=request.account_id, metadata=metadata),
                idempotency_key,
            )
        except _STEP_ERRORS as e:
            logger.error(
                "Mint failed after upload, pinned file left in place",
                extra={"cid": upload.cid, "idempotency_key": idempotency_key},
            )
            raise PipelineError("mint", e, cid=upload.cid) from e

        logger.info(
            "Voice recording published",
            extra={
                "cid": upload.cid,
                "account_id": request.account_id,
                "has_transcript": transcript is not None,
            },
        )
        return PublishResult(
            cid=upload.cid,
            transcript=transcript,
            mint=mint,
            idempotency_key=idempotency_key,
        )

    def _audio_url(self, request: PublishRequest, cid: str) -> str | None:
        if request.transcription_source == TranscriptionSource.UPLOADED:
            return self._storage.gateway_url(cid)
        if request.transcription_source == TranscriptionSource.EXTERNAL:
            return request.audio_url
        return None

    def _transcribe(self, request: PublishRequest, cid: str) -> str | None:
        audio_url = self._audio_url(request, cid)
        if audio_url is None:
            return None

        try:
            result = self._transcriber.transcribe(
                TranscriptionRequest(audio_url=audio_url)
            )
        except _STEP_ERRORS as e:
            if request.require_transcript:
                raise PipelineError("transcribe", e, cid=cid) from e
            logger.warning(
                "Transcription failed, minting without transcript",
                extra={"cid": cid, "audio_url": audio_url, "error": str(e)},
            )
            return None

        if result.text == NO_TRANSCRIPTION:
            if request.require_transcript:
                raise PipelineError(
                    "transcribe",
                    UpstreamError("transcription", NO_TRANSCRIPTION),
                    cid=cid,
                )
            return None
        return result.text
