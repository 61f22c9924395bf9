"""Abstract interface for content-addressed file storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from web3voice.domain.models import UploadRequest, UploadResult


class StorageGateway(ABC):
    """Abstract base class for pinning backends."""

    @abstractmethod
    def upload(
        self,
        request: UploadRequest,
        data: BinaryIO,
        timeout: float | None = None,
    ) -> UploadResult:
        """
        Uploads a file and returns its content identifier.

        Args:
            request: File name, size and content type of the upload.
            data: File-like object containing the data.
            timeout: Optional per-call deadline in seconds.

        Returns:
            The provider's content identifier, unchanged.

        Raises:
            InputError: If no file or an empty file is supplied.
            ConfigurationError: If provider credentials are missing.
            UpstreamError: If the provider fails or returns no identifier.
        """
        pass

    @abstractmethod
    def gateway_url(self, cid: str) -> str:
        """Returns the public URL the content can be fetched from."""
        pass
