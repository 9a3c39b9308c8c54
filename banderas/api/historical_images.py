from banderas.api.resources import build_resource_router
from banderas.db import schemas

router = build_resource_router(
    prefix="/api/admin/historical-images",
    tag="historical-images",
    service_name="historical_images",
    read_schema=schemas.HistoricalImage,
    create_schema=schemas.HistoricalImageCreate,
    update_schema=schemas.HistoricalImageUpdate,
    singular="historical image",
    plural="historical images",
)
