"""Abstract interface for NFT minting."""

from abc import ABC, abstractmethod

from web3voice.domain.models import MintRequest, MintResult


class MintingService(ABC):
    """Abstract base class for minting backends."""

    @abstractmethod
    def mint(
        self, request: MintRequest, idempotency_key: str | None = None
    ) -> MintResult:
        """
        Mints an NFT referencing the request metadata.

        Args:
            request: Receiving account and validated metadata.
            idempotency_key: Optional caller token identifying a mint attempt.

        Returns:
            The provider's transaction outcome.

        Raises:
            ConfigurationError: If network, account or contract settings are missing.
            MintInProgressError: If the same attempt is still being processed.
            UpstreamError: If the network call fails.
        """
        pass
