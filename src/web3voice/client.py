"""HTTP client for the gateway API, usable as the pipeline's three backends."""

from typing import Any, BinaryIO

import httpx

from web3voice.domain.models import (
    MintRequest,
    MintResult,
    TranscriptionRequest,
    TranscriptionResult,
    UploadRequest,
    UploadResult,
)
from web3voice.exceptions import InputError, MintInProgressError, UpstreamError
from web3voice.interfaces import MintingService, StorageGateway, TranscriptionService
from web3voice.logging import setup_logging

logger = setup_logging()

PROVIDER = "web3voice"


class Web3VoiceClient(StorageGateway, TranscriptionService, MintingService):
    """
    Talks to a running gateway over HTTP.

    Failure envelopes are turned back into the gateway's exceptions: HTTP 400
    raises ``InputError``, 409 raises ``MintInProgressError`` and anything
    else raises ``UpstreamError`` with the server's message.
    """

    def __init__(
        self,
        client: httpx.Client,
        ipfs_gateway_url: str = "https://gateway.pinata.cloud/ipfs/",
    ):
        self._client = client
        self._ipfs_gateway_url = ipfs_gateway_url

    def upload(
        self,
        request: UploadRequest,
        data: BinaryIO,
        timeout: float | None = None,
    ) -> UploadResult:
        if data is None or request.size <= 0:
            raise InputError("No file uploaded")

        content_type = request.content_type or "application/octet-stream"
        payload = self._post(
            "/ipfs/upload",
            timeout,
            files={"file": (request.file_name, data, content_type)},
        )
        cid = self._field(payload, "cid")
        if not cid:
            raise UpstreamError(PROVIDER, "Gateway returned an empty cid")
        return UploadResult(cid=cid)

    def gateway_url(self, cid: str) -> str:
        return f"{self._ipfs_gateway_url.rstrip('/')}/{cid}"

    def transcribe(
        self, request: TranscriptionRequest, timeout: float | None = None
    ) -> TranscriptionResult:
        if not request.audio_url:
            raise InputError("Audio URL is required")

        payload = self._post(
            "/ai/process-audio", timeout, json={"audioUrl": request.audio_url}
        )
        return TranscriptionResult(text=self._field(payload, "transcription"))

    def mint(
        self,
        request: MintRequest,
        idempotency_key: str | None = None,
        timeout: float | None = None,
    ) -> MintResult:
        headers = {"Idempotency-Key": idempotency_key} if idempotency_key else {}
        payload = self._post(
            "/near/mint-nft",
            timeout,
            json={
                "accountId": request.account_id,
                "metadata": request.metadata.model_dump(exclude_none=True),
            },
            headers=headers,
            idempotency_key=idempotency_key,
        )
        if "result" not in payload:
            raise UpstreamError(PROVIDER, "Gateway response did not include 'result'")
        return MintResult(outcome=payload["result"])

    def _post(
        self,
        path: str,
        timeout: float | None,
        idempotency_key: str | None = None,
        **kwargs: Any,
    ) -> dict:
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self._client.post(path, **kwargs)
        except httpx.HTTPError as e:
            logger.exception("Gateway request failed", extra={"path": path})
            raise UpstreamError(PROVIDER, str(e) or "Gateway request failed", e) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(
                PROVIDER, f"Gateway returned HTTP {response.status_code} without JSON", e
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamError(PROVIDER, "Gateway returned an unexpected payload")

        if response.is_error or not payload.get("success"):
            message = str(payload.get("error") or f"HTTP {response.status_code}")
            logger.warning(
                "Gateway reported failure",
                extra={
                    "path": path,
                    "status_code": response.status_code,
                    "error": message,
                },
            )
            if response.status_code == 400:
                raise InputError(message)
            if response.status_code == 409 and idempotency_key:
                raise MintInProgressError(idempotency_key)
            raise UpstreamError(PROVIDER, message)

        return payload

    @staticmethod
    def _field(payload: dict, name: str) -> str:
        value = payload.get(name)
        if not isinstance(value, str):
            raise UpstreamError(PROVIDER, f"Gateway response did not include '{name}'")
        return value
