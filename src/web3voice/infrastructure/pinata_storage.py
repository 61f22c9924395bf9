"""Pinata implementation of the StorageGateway interface."""

from typing import BinaryIO

import httpx

from web3voice.config import PinataConfig
from web3voice.domain.models import UploadRequest, UploadResult
from web3voice.exceptions import ConfigurationError, InputError, UpstreamError
from web3voice.interfaces import StorageGateway
from web3voice.logging import setup_logging

from ._responses import error_message, timeout_kwargs

logger = setup_logging()

PROVIDER = "pinata"


class PinataStorageGateway(StorageGateway):
    """Pins files to IPFS through the Pinata API."""

    def __init__(self, client: httpx.Client, config: PinataConfig):
        self._client = client
        self._config = config

    def upload(
        self,
        request: UploadRequest,
        data: BinaryIO,
        timeout: float | None = None,
    ) -> UploadResult:
        if data is None or request.size <= 0:
            raise InputError("No file uploaded")

        missing = [
            name
            for name, value in (
                ("PINATA_API_KEY", self._config.api_key),
                ("PINATA_SECRET_API_KEY", self._config.secret_api_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)

        content_type = request.content_type or "application/octet-stream"

        try:
            response = self._client.post(
                self._config.endpoint,
                files={"file": (request.file_name, data, content_type)},
                headers={
                    "pinata_api_key": self._config.api_key,
                    "pinata_secret_api_key": self._config.secret_api_key,
                },
                **timeout_kwargs(timeout),
            )
        except httpx.HTTPError as e:
            logger.exception(
                "Pinata upload failed",
                extra={"file_name": request.file_name, "size": request.size},
            )
            raise UpstreamError(PROVIDER, str(e) or "Pinata request failed", e) from e

        if response.is_error:
            message = error_message(response, "Pinata")
            logger.error(
                "Pinata rejected upload",
                extra={
                    "file_name": request.file_name,
                    "status_code": response.status_code,
                    "error": message,
                },
            )
            raise UpstreamError(PROVIDER, message)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(PROVIDER, "Pinata returned a non-JSON response", e) from e

        cid = payload.get("IpfsHash") if isinstance(payload, dict) else None
        if not isinstance(cid, str) or not cid:
            logger.error(
                "Pinata response missing IpfsHash",
                extra={"file_name": request.file_name},
            )
            raise UpstreamError(PROVIDER, "Pinata response did not include an IpfsHash")

        logger.info(
            "File pinned to IPFS",
            extra={"file_name": request.file_name, "size": request.size, "cid": cid},
        )
        return UploadResult(cid=cid)

    def gateway_url(self, cid: str) -> str:
        return f"{self._config.gateway_url.rstrip('/')}/{cid}"
