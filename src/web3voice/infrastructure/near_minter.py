"""NEAR implementation of the MintingService interface."""

import json
from collections.abc import Callable
from typing import Any

from near_api.account import Account
from near_api.providers import JsonProvider
from near_api.signer import KeyPair, Signer

from web3voice.config import NearConfig
from web3voice.domain.models import MintRequest, MintResult
from web3voice.exceptions import ConfigurationError, UpstreamError
from web3voice.interfaces import MintingService
from web3voice.logging import setup_logging

logger = setup_logging()

PROVIDER = "near"

AccountFactory = Callable[[NearConfig, str], Any]


def connect_account(config: NearConfig, private_key: str) -> Account:
    """Opens the signer account against the configured RPC node."""
    provider = JsonProvider(config.node_url)
    signer = Signer(config.account_id, KeyPair(private_key))
    return Account(provider, signer, config.account_id)


class NearMinter(MintingService):
    """Calls the voice NFT contract's mint method from the signer account."""

    def __init__(
        self, config: NearConfig, account_factory: AccountFactory = connect_account
    ):
        self._config = config
        self._account_factory = account_factory

    def mint(
        self, request: MintRequest, idempotency_key: str | None = None
    ) -> MintResult:
        self._check_config()
        private_key = self._load_private_key()

        args = {
            "receiver_id": request.account_id,
            "metadata": request.metadata.model_dump(exclude_none=True),
        }
        log_context = {
            "receiver_id": request.account_id,
            "contract_id": self._config.contract_id,
            "cid": request.metadata.cid,
            "idempotency_key": idempotency_key,
        }

        try:
            account = self._account_factory(self._config, private_key)
            outcome = account.function_call(
                self._config.contract_id,
                self._config.mint_method,
                args,
                gas=self._config.mint_gas,
                amount=self._config.mint_deposit,
            )
        except Exception as e:
            logger.exception("NEAR mint failed", extra=log_context)
            raise UpstreamError(PROVIDER, str(e) or type(e).__name__, e) from e

        logger.info("NFT minted", extra=log_context)
        return MintResult(outcome=outcome)

    def _check_config(self) -> None:
        missing = [
            name
            for name, value in (
                ("NEAR_NETWORK_ID", self._config.network_id),
                ("NEAR_NODE_URL", self._config.node_url),
                ("NEAR_ACCOUNT_ID", self._config.account_id),
                ("NEAR_CONTRACT_ID", self._config.contract_id),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)

    def _load_private_key(self) -> str:
        """Reads the signer's key from a near-cli style credentials file."""
        path = self._config.credentials_file
        try:
            credentials = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigurationError(
                ["NEAR_CREDENTIALS_DIR"], detail=f"no key file at {path}"
            ) from e
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                ["NEAR_CREDENTIALS_DIR"], detail=f"unreadable key file at {path}"
            ) from e

        private_key = (
            credentials.get("private_key") if isinstance(credentials, dict) else None
        )
        if not private_key:
            raise ConfigurationError(
                ["NEAR_CREDENTIALS_DIR"], detail=f"no private_key in {path}"
            )
        return private_key
