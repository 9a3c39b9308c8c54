"""
Uniform CRUD + reorder routes shared by every reorderable resource.

``build_resource_router`` registers list/get/create/update/delete/reorder
handlers on a router; resource modules add their own routes first when
they need paths that would otherwise be captured by ``/{item_id}``.
"""
import logging
from contextlib import contextmanager
from typing import Optional, Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from banderas.api.deps import get_container, require_admin
from banderas.db.schemas import ReorderRequest, SuccessResponse
from banderas.errors import NotFoundError, StorageError
from banderas.services.container import ServiceContainer

logger = logging.getLogger(__name__)


@contextmanager
def service_errors(message: str):
    """Map service failures to HTTP errors with a fixed, non-descriptive message."""
    try:
        yield
    except HTTPException:
        raise
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception(message)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def build_resource_router(
    *,
    prefix: str,
    tag: str,
    service_name: str,
    read_schema: Type[BaseModel],
    create_schema: Optional[Type[BaseModel]],
    update_schema: Optional[Type[BaseModel]],
    singular: str,
    plural: str,
    router: Optional[APIRouter] = None,
) -> APIRouter:
    """Attach the standard route set for one resource.

    Passing ``create_schema``/``update_schema`` as ``None`` leaves POST ``/``
    and PUT ``/{item_id}`` for the caller to define.
    """
    router = router or APIRouter(prefix=prefix, tags=[tag])
    not_found = f"{singular[0].upper()}{singular[1:]} not found"

    def service(container: ServiceContainer):
        return getattr(container, service_name)

    @router.get("", response_model=list[read_schema])
    @router.get("/", response_model=list[read_schema], include_in_schema=False)
    def list_items(container: ServiceContainer = Depends(get_container)):
        with service_errors(f"Failed to get {plural}"):
            return service(container).get_all()

    @router.post(
        "/reorder",
        response_model=SuccessResponse,
        dependencies=[Depends(require_admin)],
    )
    def reorder_items(payload: ReorderRequest, container: ServiceContainer = Depends(get_container)):
        with service_errors(f"Failed to reorder {plural}"):
            service(container).reorder(payload.items)
            return SuccessResponse()

    @router.get("/{item_id}", response_model=read_schema)
    def get_item(item_id: str, container: ServiceContainer = Depends(get_container)):
        with service_errors(f"Failed to get {singular}"):
            item = service(container).get_by_id(item_id)
            if item is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
            return item

    if create_schema is not None:
        @router.post(
            "",
            response_model=read_schema,
            status_code=status.HTTP_201_CREATED,
            dependencies=[Depends(require_admin)],
        )
        @router.post(
            "/",
            response_model=read_schema,
            status_code=status.HTTP_201_CREATED,
            dependencies=[Depends(require_admin)],
            include_in_schema=False,
        )
        def create_item(payload: create_schema, container: ServiceContainer = Depends(get_container)):
            with service_errors(f"Failed to create {singular}"):
                return service(container).create(payload)

    if update_schema is not None:
        @router.put(
            "/{item_id}",
            response_model=read_schema,
            dependencies=[Depends(require_admin)],
        )
        def update_item(
            item_id: str,
            payload: update_schema,
            container: ServiceContainer = Depends(get_container),
        ):
            with service_errors(f"Failed to update {singular}"):
                item = service(container).update(item_id, payload)
                if item is None:
                    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
                return item

    @router.delete(
        "/{item_id}",
        response_model=SuccessResponse,
        dependencies=[Depends(require_admin)],
    )
    def delete_item(item_id: str, container: ServiceContainer = Depends(get_container)):
        with service_errors(f"Failed to delete {singular}"):
            if not service(container).delete(item_id):
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
            return SuccessResponse()

    return router
