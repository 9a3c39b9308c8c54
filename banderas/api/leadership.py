"""
Leadership periods (jefaturas) API.

``imageUrl`` must point into the configured storage; anything else is
rejected with 400.
"""
from banderas.api.resources import build_resource_router
from banderas.db import schemas

router = build_resource_router(
    prefix="/api/admin/leadership",
    tag="leadership",
    service_name="leadership",
    read_schema=schemas.LeadershipPeriod,
    create_schema=schemas.LeadershipPeriodCreate,
    update_schema=schemas.LeadershipPeriodUpdate,
    singular="leadership period",
    plural="leadership periods",
)
