"""
Presigned browser uploads: the admin UI PUTs the file straight to the
bucket, then saves the returned public URL on the owning resource.
"""
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from banderas.api.deps import get_container, require_admin
from banderas.api.resources import service_errors
from banderas.db.schemas.common import CamelModel
from banderas.services.container import ServiceContainer
from banderas.services.storage import is_image_type

router = APIRouter(prefix="/api/admin/upload", tags=["uploads"])

PRESIGNED_URL_EXPIRY_SECONDS = 300

_FOLDER_PATTERN = re.compile(r"^[A-Za-z0-9_\-/]+$")


class PresignedUrlRequest(CamelModel):
    file_type: Optional[str] = None
    folder: Optional[str] = None


class PresignedUrlResponse(CamelModel):
    upload_url: str
    file_key: str
    public_url: str


@router.post("/presigned-url", response_model=PresignedUrlResponse, dependencies=[Depends(require_admin)])
def generate_presigned_url(payload: PresignedUrlRequest, container: ServiceContainer = Depends(get_container)):
    if not payload.file_type:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="fileType is required")
    if not is_image_type(payload.file_type):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only image files are allowed")
    folder = (payload.folder or "uploads").strip("/")
    if not folder or ".." in folder or not _FOLDER_PATTERN.match(folder):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid folder")

    with service_errors("Failed to generate presigned URL"):
        return container.storage.generate_presigned_upload(
            payload.file_type, folder, PRESIGNED_URL_EXPIRY_SECONDS
        )
