"""FastAPI dependency injection configuration."""

import httpx
import redis

from web3voice.config import AppConfig, load_config
from web3voice.domain.idempotent_minter import IdempotentMinter
from web3voice.infrastructure import (
    HuggingFaceTranscriber,
    NearMinter,
    PinataStorageGateway,
    RedisCacheService,
)
from web3voice.interfaces import MintingService, StorageGateway, TranscriptionService
from web3voice.logging import setup_logging

logger = setup_logging()

_config = load_config()

_pinata_client = httpx.Client(timeout=_config.pinata.timeout_seconds)
_huggingface_client = httpx.Client(timeout=_config.huggingface.timeout_seconds)

# Redis connects lazily, on the first keyed mint
_redis_client = redis.Redis(
    host=_config.redis.host,
    port=_config.redis.port,
    decode_responses=True,
)
_cache = RedisCacheService(_redis_client, _config.redis.idempotency_ttl_seconds)

_storage = PinataStorageGateway(_pinata_client, _config.pinata)
_transcriber = HuggingFaceTranscriber(_huggingface_client, _config.huggingface)
_minter = IdempotentMinter(NearMinter(_config.near), _cache)

logger.info(
    "Gateway dependencies configured",
    extra={
        "near_network": _config.near.network_id,
        "near_contract": _config.near.contract_id,
        "redis_host": _config.redis.host,
    },
)


def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return _config


def get_storage_gateway() -> StorageGateway:
    """Returns the configured storage gateway."""
    return _storage


def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    return _transcriber


def get_minting_service() -> MintingService:
    """Returns the configured, de-duplicating minting service."""
    return _minter


def close_clients() -> None:
    """Releases pooled connections held by the outbound clients."""
    _pinata_client.close()
    _huggingface_client.close()
    _redis_client.close()
