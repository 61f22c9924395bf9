"""De-duplication of mint attempts keyed by a caller-supplied token."""

import json

from web3voice.domain.models import MintRequest, MintResult
from web3voice.exceptions import CacheServiceError, InputError, MintInProgressError
from web3voice.interfaces import CacheService, MintingService
from web3voice.logging import setup_logging

logger = setup_logging()

PENDING = "pending"


class IdempotentMinter(MintingService):
    """
    Wraps a minting service so a retried attempt does not mint twice.

    Calls without an idempotency key go straight to the wrapped service.
    With a key, the first call claims it and stores the outcome; later calls
    with the same key replay that outcome. A failed mint releases the claim.
    """

    def __init__(
        self, minter: MintingService, cache: CacheService, key_prefix: str = "mint:"
    ):
        self._minter = minter
        self._cache = cache
        self._key_prefix = key_prefix

    def mint(
        self, request: MintRequest, idempotency_key: str | None = None
    ) -> MintResult:
        if not idempotency_key:
            return self._minter.mint(request)

        cache_key = f"{self._key_prefix}{idempotency_key}"
        fingerprint = request.model_dump(mode="json")

        cached = self._cache.get(cache_key)
        if cached is None and not self._cache.add(cache_key, PENDING):
            cached = self._cache.get(cache_key)
            if cached is None:
                raise MintInProgressError(idempotency_key)
        if cached is not None:
            return self._replay(cached, idempotency_key, fingerprint)

        try:
            result = self._minter.mint(request, idempotency_key)
        except Exception:
            logger.warning(
                "Mint failed, releasing idempotency key",
                extra={"idempotency_key": idempotency_key},
            )
            self._cache.delete(cache_key)
            raise

        try:
            self._cache.set(
                cache_key,
                json.dumps(
                    {"request": fingerprint, "result": result.model_dump(mode="json")}
                ),
            )
        except CacheServiceError:
            # The NFT exists; the pending marker still blocks a second mint.
            logger.exception(
                "Storing mint result failed",
                extra={"idempotency_key": idempotency_key},
            )
        return result

    def _replay(
        self, cached: str, idempotency_key: str, fingerprint: dict
    ) -> MintResult:
        if cached == PENDING:
            raise MintInProgressError(idempotency_key)

        try:
            entry = json.loads(cached)
            stored_request = entry["request"]
            stored_result = MintResult.model_validate(entry["result"])
        except (ValueError, TypeError, KeyError) as e:
            logger.exception(
                "Unreadable stored mint result",
                extra={"idempotency_key": idempotency_key},
            )
            raise CacheServiceError(
                f"{self._key_prefix}{idempotency_key}", "decode", cause=e
            ) from e

        if stored_request != fingerprint:
            raise InputError(
                f"Idempotency key '{idempotency_key}' was already used "
                "for a different mint request"
            )

        logger.info(
            "Replaying stored mint result",
            extra={"idempotency_key": idempotency_key},
        )
        return stored_result
