"""
Shield values API: the virtues listed on the shields page.
"""
from banderas.api.resources import build_resource_router
from banderas.db import schemas

router = build_resource_router(
    prefix="/api/admin/shield-values",
    tag="shield-values",
    service_name="shield_values",
    read_schema=schemas.ShieldValue,
    create_schema=schemas.ShieldValueCreate,
    update_schema=schemas.ShieldValueUpdate,
    singular="shield value",
    plural="shield values",
)
