"""Infrastructure layer exports."""

from .huggingface_transcriber import HuggingFaceTranscriber
from .near_minter import NearMinter, connect_account
from .pinata_storage import PinataStorageGateway
from .redis_cache import RedisCacheService

__all__ = [
    "HuggingFaceTranscriber",
    "NearMinter",
    "PinataStorageGateway",
    "RedisCacheService",
    "connect_account",
]
