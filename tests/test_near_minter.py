"""Tests for the NEAR minting gateway."""

import pytest
from conftest import FakeAccount

from web3voice.config import NearConfig
from web3voice.domain.models import MintRequest, VoiceMetadata
from web3voice.exceptions import ConfigurationError, UpstreamError
from web3voice.infrastructure import NearMinter


def _request(**metadata) -> MintRequest:
    return MintRequest(
        account_id="alice.test",
        metadata=VoiceMetadata(cid="Qm123", **metadata),
    )


def _minter(config: NearConfig, account: FakeAccount) -> tuple[NearMinter, list]:
    opened = []

    def factory(near_config, private_key):
        opened.append((near_config.account_id, private_key))
        return account

    return NearMinter(config, account_factory=factory), opened


class TestNearMinter:
    """Tests for NearMinter.mint."""

    def test_calls_mint_method_with_configured_gas_and_deposit(self, near_config):
        account = FakeAccount(outcome={"transaction": {"hash": "abc"}})
        minter, opened = _minter(near_config, account)

        result = minter.mint(_request(title="Morning memo", transcript="hi"))

        assert result.outcome == {"transaction": {"hash": "abc"}}
        assert opened == [("minter.testnet", "ed25519:secret")]
        assert account.calls == [
            {
                "contract_id": "voice-nft.testnet",
                "method_name": "nft_mint",
                "args": {
                    "receiver_id": "alice.test",
                    "metadata": {
                        "cid": "Qm123",
                        "title": "Morning memo",
                        "transcript": "hi",
                    },
                },
                "gas": 30_000_000_000_000,
                "amount": 1,
            }
        ]

    def test_identical_requests_mint_twice(self, near_config):
        """No de-duplication happens at this layer."""
        account = FakeAccount()
        minter, _ = _minter(near_config, account)

        minter.mint(_request())
        minter.mint(_request())

        assert len(account.calls) == 2

    def test_network_error_is_upstream_error(self, near_config):
        account = FakeAccount(error=ConnectionError("RPC node unreachable"))
        minter, _ = _minter(near_config, account)

        with pytest.raises(UpstreamError) as exc_info:
            minter.mint(_request())

        assert exc_info.value.message == "RPC node unreachable"
        assert exc_info.value.provider == "near"

    def test_account_lookup_failure_is_upstream_error(self, near_config):
        def factory(config, private_key):
            raise RuntimeError("account minter.testnet does not exist")

        minter = NearMinter(near_config, account_factory=factory)

        with pytest.raises(UpstreamError, match="does not exist"):
            minter.mint(_request())

    def test_missing_identifiers_is_configuration_error(self, near_config):
        config = near_config.model_copy(update={"account_id": "", "contract_id": ""})
        account = FakeAccount()
        minter, opened = _minter(config, account)

        with pytest.raises(ConfigurationError) as exc_info:
            minter.mint(_request())

        assert exc_info.value.missing == ["NEAR_ACCOUNT_ID", "NEAR_CONTRACT_ID"]
        assert opened == []
        assert account.calls == []

    def test_missing_key_file_is_configuration_error(self, near_config, tmp_path):
        config = near_config.model_copy(update={"credentials_dir": tmp_path / "nowhere"})
        minter, _ = _minter(config, FakeAccount())

        with pytest.raises(ConfigurationError, match="no key file"):
            minter.mint(_request())

    def test_key_file_without_private_key(self, near_config):
        near_config.credentials_file.write_text('{"account_id": "minter.testnet"}')
        minter, _ = _minter(near_config, FakeAccount())

        with pytest.raises(ConfigurationError, match="no private_key"):
            minter.mint(_request())
