"""Tests for the Pinata storage gateway."""

import io

import httpx
import pytest
from conftest import RecordingTransport

from web3voice.config import PinataConfig
from web3voice.domain.models import UploadRequest
from web3voice.exceptions import ConfigurationError, InputError, UpstreamError
from web3voice.infrastructure import PinataStorageGateway


def _gateway(config: PinataConfig, handler) -> tuple[PinataStorageGateway, RecordingTransport]:
    transport = RecordingTransport(handler)
    return PinataStorageGateway(httpx.Client(transport=transport), config), transport


class TestPinataStorageGateway:
    """Tests for PinataStorageGateway.upload."""

    def test_returns_ipfs_hash_verbatim(self, pinata_config):
        """The provider's IpfsHash is passed through unchanged."""
        gateway, transport = _gateway(
            pinata_config,
            lambda request: httpx.Response(
                200, json={"IpfsHash": "QmYwAPJzv5CZsnA", "PinSize": 3}
            ),
        )

        result = gateway.upload(
            UploadRequest(file_name="a.wav", size=3, content_type="audio/wav"),
            io.BytesIO(b"abc"),
        )

        assert result.cid == "QmYwAPJzv5CZsnA"
        sent = transport.requests[0]
        assert str(sent.url) == "https://pinata.test/pinning/pinFileToIPFS"
        assert sent.headers["pinata_api_key"] == "key"
        assert sent.headers["pinata_secret_api_key"] == "secret"
        assert sent.headers["content-type"].startswith("multipart/form-data")
        assert b'name="file"; filename="a.wav"' in sent.content
        assert b"abc" in sent.content

    def test_empty_file_never_reaches_provider(self, pinata_config):
        """A zero-byte upload is rejected before any HTTP call."""
        gateway, transport = _gateway(
            pinata_config, lambda request: httpx.Response(200, json={"IpfsHash": "Qm"})
        )

        with pytest.raises(InputError, match="No file uploaded"):
            gateway.upload(UploadRequest(file_name="a.wav", size=0), io.BytesIO(b""))

        assert transport.requests == []

    def test_missing_stream_is_input_error(self, pinata_config):
        gateway, transport = _gateway(
            pinata_config, lambda request: httpx.Response(200, json={"IpfsHash": "Qm"})
        )

        with pytest.raises(InputError):
            gateway.upload(UploadRequest(file_name="a.wav", size=3), None)

        assert transport.requests == []

    def test_missing_keys_is_configuration_error(self):
        config = PinataConfig(api_key="", secret_api_key="")
        gateway, transport = _gateway(
            config, lambda request: httpx.Response(200, json={"IpfsHash": "Qm"})
        )

        with pytest.raises(ConfigurationError) as exc_info:
            gateway.upload(UploadRequest(file_name="a.wav", size=3), io.BytesIO(b"abc"))

        assert exc_info.value.missing == ["PINATA_API_KEY", "PINATA_SECRET_API_KEY"]
        assert transport.requests == []

    def test_error_status_uses_provider_message(self, pinata_config):
        gateway, _ = _gateway(
            pinata_config,
            lambda request: httpx.Response(
                401,
                json={"error": {"reason": "INVALID_CREDENTIALS", "details": "Invalid API key"}},
            ),
        )

        with pytest.raises(UpstreamError) as exc_info:
            gateway.upload(UploadRequest(file_name="a.wav", size=3), io.BytesIO(b"abc"))

        assert exc_info.value.message == "Invalid API key"
        assert exc_info.value.provider == "pinata"

    def test_error_status_without_body(self, pinata_config):
        gateway, _ = _gateway(pinata_config, lambda request: httpx.Response(502))

        with pytest.raises(UpstreamError, match="Pinata returned HTTP 502"):
            gateway.upload(UploadRequest(file_name="a.wav", size=3), io.BytesIO(b"abc"))

    def test_missing_ipfs_hash_is_upstream_error(self, pinata_config):
        gateway, _ = _gateway(
            pinata_config, lambda request: httpx.Response(200, json={"PinSize": 3})
        )

        with pytest.raises(UpstreamError, match="IpfsHash"):
            gateway.upload(UploadRequest(file_name="a.wav", size=3), io.BytesIO(b"abc"))

    def test_non_json_body_is_upstream_error(self, pinata_config):
        gateway, _ = _gateway(
            pinata_config, lambda request: httpx.Response(200, text="<html>ok</html>")
        )

        with pytest.raises(UpstreamError, match="non-JSON"):
            gateway.upload(UploadRequest(file_name="a.wav", size=3), io.BytesIO(b"abc"))

    def test_transport_failure_is_upstream_error(self, pinata_config):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        gateway, _ = _gateway(pinata_config, refuse)

        with pytest.raises(UpstreamError, match="connection refused") as exc_info:
            gateway.upload(UploadRequest(file_name="a.wav", size=3), io.BytesIO(b"abc"))

        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_gateway_url(self, pinata_config):
        gateway, _ = _gateway(pinata_config, lambda request: httpx.Response(200))

        assert gateway.gateway_url("Qm123") == "https://ipfs.test/ipfs/Qm123"
