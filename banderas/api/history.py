"""
Historical milestones API (timeline on the history page).
"""
from banderas.api.resources import build_resource_router
from banderas.db import schemas

router = build_resource_router(
    prefix="/api/admin/history",
    tag="history",
    service_name="history",
    read_schema=schemas.HistoricalMilestone,
    create_schema=schemas.HistoricalMilestoneCreate,
    update_schema=schemas.HistoricalMilestoneUpdate,
    singular="historical milestone",
    plural="historical milestones",
)
