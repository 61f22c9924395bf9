"""Abstract interfaces for external collaborators."""

from .cache_service import CacheService
from .minting_service import MintingService
from .storage_gateway import StorageGateway
from .transcription_service import TranscriptionService

__all__ = ["CacheService", "MintingService", "StorageGateway", "TranscriptionService"]
