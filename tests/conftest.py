"""Shared fixtures for the gateway tests."""

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

# Settings are read once at import of web3voice.dependencies.
os.environ.setdefault("PINATA_API_KEY", "test-pinata-key")
os.environ.setdefault("PINATA_SECRET_API_KEY", "test-pinata-secret")
os.environ.setdefault("HUGGING_FACE_API_KEY", "test-hf-key")
os.environ.setdefault("REDIS_HOST", "localhost")

from web3voice.config import HuggingFaceConfig, NearConfig, PinataConfig  # noqa: E402
from web3voice.interfaces import CacheService  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


class InMemoryCache(CacheService):
    """Dict-backed cache used in place of Redis."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def add(self, key: str, value: str) -> bool:
        if key in self.values:
            return False
        self.values[key] = value
        return True

    def delete(self, key: str) -> None:
        self.values.pop(key, None)


class FakeAccount:
    """Stands in for a near_api Account; records function calls."""

    def __init__(self, outcome: Any = None, error: Exception | None = None):
        self.outcome = outcome if outcome is not None else {"status": {"SuccessValue": ""}}
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def function_call(self, contract_id, method_name, args, gas, amount):
        self.calls.append(
            {
                "contract_id": contract_id,
                "method_name": method_name,
                "args": args,
                "gas": gas,
                "amount": amount,
            }
        )
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def pinata_config() -> PinataConfig:
    return PinataConfig(
        api_key="key",
        secret_api_key="secret",
        endpoint="https://pinata.test/pinning/pinFileToIPFS",
        gateway_url="https://ipfs.test/ipfs/",
    )


@pytest.fixture
def huggingface_config() -> HuggingFaceConfig:
    return HuggingFaceConfig(api_key="hf-token", model_url="https://hf.test/whisper")


@pytest.fixture
def near_config(tmp_path: Path) -> NearConfig:
    credentials = tmp_path / "testnet"
    credentials.mkdir()
    (credentials / "minter.testnet.json").write_text(
        json.dumps(
            {
                "account_id": "minter.testnet",
                "public_key": "ed25519:public",
                "private_key": "ed25519:secret",
            }
        ),
        encoding="utf-8",
    )
    return NearConfig(
        account_id="minter.testnet",
        contract_id="voice-nft.testnet",
        credentials_dir=tmp_path,
    )


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def reset_dependency_overrides() -> Iterator[None]:
    from web3voice.main import app

    try:
        yield
    finally:
        app.dependency_overrides.clear()
