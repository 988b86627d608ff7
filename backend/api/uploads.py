"""Upload API routes — create, list, get, delete."""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from backend.dependencies import get_upload_service
from backend.schemas.common import ErrorResponse, StatusResponse
from backend.schemas.upload import UploadRecord
from backend.services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["uploads"],
    responses={500: {"model": ErrorResponse}},
)

NOT_FOUND = {404: {"model": ErrorResponse}}


def _parse_id(raw: str) -> int:
    """Record id from the path; anything that is not an integer can never match a record."""
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")


@router.post(
    "/upload",
    response_model=UploadRecord,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def upload_file(
    file: UploadFile | None = File(None),
    uploader_name: str | None = Form(None, alias="uploaderName"),
    uploader_email: str | None = Form(None, alias="uploaderEmail"),
    metadata: str | None = Form(None),
    service: UploadService = Depends(get_upload_service),
):
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    try:
        record = await service.save_upload(file, uploader_name, uploader_email, metadata)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Upload of %s failed", file.filename)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to upload file")
    return record


@router.get("/uploads", response_model=list[UploadRecord])
async def list_uploads(service: UploadService = Depends(get_upload_service)):
    try:
        return service.list_uploads()
    except Exception:
        logger.exception("Listing uploads failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch uploads")


@router.get("/uploads/{upload_id}", response_model=UploadRecord, responses=NOT_FOUND)
async def get_upload(upload_id: str, service: UploadService = Depends(get_upload_service)):
    record_id = _parse_id(upload_id)
    try:
        record = service.get_upload(record_id)
    except Exception:
        logger.exception("Fetching upload %d failed", record_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch record")
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return record


@router.delete("/uploads/{upload_id}", response_model=StatusResponse, responses=NOT_FOUND)
async def delete_upload(upload_id: str, service: UploadService = Depends(get_upload_service)):
    record_id = _parse_id(upload_id)
    try:
        deleted = await service.delete_upload(record_id)
    except Exception:
        logger.exception("Deleting upload %d failed", record_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete record")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return StatusResponse(ok=True)
