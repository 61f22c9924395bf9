"""NFT minting endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header

from web3voice.dependencies import get_minting_service
from web3voice.domain.models import MintRequest
from web3voice.interfaces import MintingService
from web3voice.logging import setup_logging
from web3voice.response_models import MintNftRequest, MintResponse

logger = setup_logging()

router = APIRouter(prefix="/near", tags=["near"])

MinterDep = Annotated[MintingService, Depends(get_minting_service)]


@router.post("/mint-nft", response_model=MintResponse)
def mint_nft(
    body: MintNftRequest,
    minter: MinterDep,
    idempotency_key: Annotated[str | None, Header()] = None,
) -> MintResponse:
    """
    Mints a voice NFT for ``accountId``.

    Minting is not idempotent unless the caller sends an ``Idempotency-Key``
    header; retries with the same key replay the first outcome.
    """
    logger.info(
        "Received mint request",
        extra={
            "account_id": body.account_id,
            "cid": body.metadata.cid,
            "idempotency_key": idempotency_key,
        },
    )
    result = minter.mint(
        MintRequest(account_id=body.account_id, metadata=body.metadata),
        idempotency_key,
    )
    return MintResponse(result=result.outcome)
