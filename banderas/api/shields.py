"""
Shields (escudos) API.

At most one shield is the main shield; ``/main`` and ``/{id}/set-main``
are registered before the generic ``/{item_id}`` routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from banderas.api.deps import get_container, require_admin
from banderas.api.resources import build_resource_router, service_errors
from banderas.db import schemas
from banderas.services.container import ServiceContainer

router = APIRouter(prefix="/api/admin/shields", tags=["shields"])


@router.get("/main", response_model=schemas.Shield)
def get_main_shield(container: ServiceContainer = Depends(get_container)):
    with service_errors("Failed to get main shield"):
        shield = container.shields.get_main()
        if shield is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Main shield not found")
        return shield


@router.put("/{item_id}/set-main", response_model=schemas.Shield, dependencies=[Depends(require_admin)])
def set_main_shield(item_id: str, container: ServiceContainer = Depends(get_container)):
    with service_errors("Failed to set main shield"):
        shield = container.shields.set_main(item_id)
        if shield is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shield not found")
        return shield


build_resource_router(
    prefix="/api/admin/shields",
    tag="shields",
    service_name="shields",
    read_schema=schemas.Shield,
    create_schema=schemas.ShieldCreate,
    update_schema=schemas.ShieldUpdate,
    singular="shield",
    plural="shields",
    router=router,
)
