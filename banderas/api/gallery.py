"""
Gallery items API.

Items are created either with a multipart image upload (``POST /``) or
with the URL of an image already uploaded to storage (``POST /with-url``).
Replaced and deleted images are removed from storage best-effort.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from banderas.api.deps import get_container, require_admin
from banderas.api.resources import build_resource_router, service_errors
from banderas.db import schemas
from banderas.services.container import ServiceContainer

router = APIRouter(prefix="/api/admin/gallery", tags=["gallery"])

NOT_FOUND = "Gallery item not found"


def _optional_text(value: Optional[str]) -> Optional[str]:
    return value or None


@router.get("/category/{category_id}", response_model=list[schemas.GalleryItem])
def get_items_by_category(category_id: str, container: ServiceContainer = Depends(get_container)):
    with service_errors("Failed to get gallery items"):
        return container.gallery.get_by_category(category_id)


@router.get("/uncategorized", response_model=list[schemas.GalleryItem])
def get_uncategorized_items(container: ServiceContainer = Depends(get_container)):
    with service_errors("Failed to get gallery items"):
        return container.gallery.get_uncategorized()


@router.post(
    "",
    response_model=schemas.GalleryItem,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
@router.post(
    "/",
    response_model=schemas.GalleryItem,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    include_in_schema=False,
)
def create_item_with_image(
    title: str = Form(...),
    description: Optional[str] = Form(default=None),
    category_id: Optional[str] = Form(default=None, alias="categoryId"),
    year: Optional[str] = Form(default=None),
    display_order: Optional[int] = Form(default=None, alias="displayOrder"),
    image: Optional[UploadFile] = File(default=None),
    container: ServiceContainer = Depends(get_container),
):
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image file is required")
    fields = {
        "title": title,
        "description": _optional_text(description),
        "category_id": _optional_text(category_id),
        "year": _optional_text(year),
        "display_order": display_order or 0,
    }
    with service_errors("Failed to create gallery item"):
        return container.gallery.create_with_image(fields, image.file.read(), image.content_type or "")


@router.post(
    "/with-url",
    response_model=schemas.GalleryItem,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_item_with_url(payload: schemas.GalleryItemCreate, container: ServiceContainer = Depends(get_container)):
    with service_errors("Failed to create gallery item"):
        return container.gallery.create_with_url(payload)


@router.put("/{item_id}", response_model=schemas.GalleryItem, dependencies=[Depends(require_admin)])
def update_item_with_image(
    item_id: str,
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    category_id: Optional[str] = Form(default=None, alias="categoryId"),
    year: Optional[str] = Form(default=None),
    display_order: Optional[int] = Form(default=None, alias="displayOrder"),
    image: Optional[UploadFile] = File(default=None),
    container: ServiceContainer = Depends(get_container),
):
    fields = {}
    if title:
        fields["title"] = title
    if description is not None:
        fields["description"] = _optional_text(description)
    if category_id is not None:
        fields["category_id"] = _optional_text(category_id)
    if year is not None:
        fields["year"] = _optional_text(year)
    if display_order is not None:
        fields["display_order"] = display_order

    with service_errors("Failed to update gallery item"):
        if image is not None:
            item = container.gallery.update_with_image(
                item_id, fields, image.file.read(), image.content_type or ""
            )
        else:
            item = container.gallery.update_with_image(item_id, fields)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
        return item


@router.put("/{item_id}/with-url", response_model=schemas.GalleryItem, dependencies=[Depends(require_admin)])
def update_item_with_url(
    item_id: str,
    payload: schemas.GalleryItemUpdate,
    container: ServiceContainer = Depends(get_container),
):
    with service_errors("Failed to update gallery item"):
        item = container.gallery.update_with_url(item_id, payload)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
        return item


build_resource_router(
    prefix="/api/admin/gallery",
    tag="gallery",
    service_name="gallery",
    read_schema=schemas.GalleryItem,
    create_schema=None,
    update_schema=None,
    singular="gallery item",
    plural="gallery items",
    router=router,
)
