"""IPFS upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from web3voice.dependencies import get_storage_gateway
from web3voice.domain.models import UploadRequest
from web3voice.exceptions import InputError
from web3voice.interfaces import StorageGateway
from web3voice.logging import setup_logging
from web3voice.response_models import UploadResponse

logger = setup_logging()

router = APIRouter(prefix="/ipfs", tags=["ipfs"])

StorageDep = Annotated[StorageGateway, Depends(get_storage_gateway)]


@router.post("/upload", response_model=UploadResponse)
def upload_file(
    storage: StorageDep,
    file: UploadFile | None = File(None),
) -> UploadResponse:
    """Pins the uploaded file to IPFS and returns its CID."""
    if file is None:
        raise InputError("No file uploaded")

    request = UploadRequest(
        file_name=file.filename or "upload",
        size=file.size or 0,
        content_type=file.content_type,
    )
    logger.info(
        "Received upload request",
        extra={"file_name": request.file_name, "size": request.size},
    )

    result = storage.upload(request, file.file)
    return UploadResponse(cid=result.cid)
