"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class PinataConfig(BaseModel, frozen=True):
    """Pinata pinning service configuration."""

    api_key: str
    secret_api_key: str
    endpoint: str = "https://api.pinata.cloud/pinning/pinFileToIPFS"
    gateway_url: str = "https://gateway.pinata.cloud/ipfs/"
    timeout_seconds: float | None = None


class HuggingFaceConfig(BaseModel, frozen=True):
    """Hugging Face inference API configuration."""

    api_key: str
    model_url: str = (
        "https://api-inference.huggingface.co/models/openai/whisper-base"
    )
    timeout_seconds: float | None = None


class NearConfig(BaseModel, frozen=True):
    """NEAR network, signer account and NFT contract configuration."""

    network_id: str = "testnet"
    node_url: str = "https://rpc.testnet.near.org"
    wallet_url: str = "https://wallet.testnet.near.org"
    helper_url: str = "https://helper.testnet.near.org"
    account_id: str = ""
    contract_id: str = ""
    credentials_dir: Path = Path.home() / ".near-credentials"
    mint_method: str = "nft_mint"
    mint_gas: int = Field(default=30_000_000_000_000, gt=0)
    mint_deposit: int = Field(default=1, ge=0)

    @property
    def credentials_file(self) -> Path:
        """Returns the key file path for the signer account."""
        return self.credentials_dir / self.network_id / f"{self.account_id}.json"


class RedisConfig(BaseModel, frozen=True):
    """Redis connection configuration for mint de-duplication."""

    host: str
    port: int = 6379
    idempotency_ttl_seconds: int = 600


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    port: int = 5000
    cors_allow_origins: list[str] = ["*"]


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    pinata: PinataConfig
    huggingface: HuggingFaceConfig
    near: NearConfig
    redis: RedisConfig
    server: ServerConfig


def _optional_float(name: str) -> float | None:
    value = os.getenv(name, "")
    return float(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        pinata=PinataConfig(
            api_key=os.getenv("PINATA_API_KEY", ""),
            secret_api_key=os.getenv("PINATA_SECRET_API_KEY", ""),
            endpoint=os.getenv(
                "PINATA_ENDPOINT", "https://api.pinata.cloud/pinning/pinFileToIPFS"
            ),
            gateway_url=os.getenv(
                "PINATA_GATEWAY_URL", "https://gateway.pinata.cloud/ipfs/"
            ),
            timeout_seconds=_optional_float("PINATA_TIMEOUT_SECONDS"),
        ),
        huggingface=HuggingFaceConfig(
            api_key=os.getenv("HUGGING_FACE_API_KEY", ""),
            model_url=os.getenv(
                "HUGGING_FACE_MODEL_URL",
                "https://api-inference.huggingface.co/models/openai/whisper-base",
            ),
            timeout_seconds=_optional_float("HUGGING_FACE_TIMEOUT_SECONDS"),
        ),
        near=NearConfig(
            network_id=os.getenv("NEAR_NETWORK_ID", "testnet"),
            node_url=os.getenv("NEAR_NODE_URL", "https://rpc.testnet.near.org"),
            wallet_url=os.getenv("NEAR_WALLET_URL", "https://wallet.testnet.near.org"),
            helper_url=os.getenv("NEAR_HELPER_URL", "https://helper.testnet.near.org"),
            account_id=os.getenv("NEAR_ACCOUNT_ID", ""),
            contract_id=os.getenv("NEAR_CONTRACT_ID", ""),
            credentials_dir=Path(
                os.getenv("NEAR_CREDENTIALS_DIR", "~/.near-credentials")
            ).expanduser(),
            mint_method=os.getenv("NEAR_MINT_METHOD", "nft_mint"),
            mint_gas=int(os.getenv("NEAR_MINT_GAS", "30000000000000")),
            mint_deposit=int(os.getenv("NEAR_MINT_DEPOSIT", "1")),
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=int(os.getenv("REDIS_PORT", "6379")),
            idempotency_ttl_seconds=int(
                os.getenv("REDIS_IDEMPOTENCY_TTL_SECONDS", "600")
            ),
        ),
        server=ServerConfig(
            port=int(os.getenv("PORT", "5000")),
            cors_allow_origins=[
                origin.strip()
                for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
                if origin.strip()
            ],
        ),
    )
