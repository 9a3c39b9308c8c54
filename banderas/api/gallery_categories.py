from banderas.api.resources import build_resource_router
from banderas.db import schemas

router = build_resource_router(
    prefix="/api/admin/gallery-categories",
    tag="gallery-categories",
    service_name="gallery_categories",
    read_schema=schemas.GalleryCategory,
    create_schema=schemas.GalleryCategoryCreate,
    update_schema=schemas.GalleryCategoryUpdate,
    singular="gallery category",
    plural="gallery categories",
)
