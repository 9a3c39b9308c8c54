"""
Site configuration API.

``PUT`` accepts either a JSON body or multipart form data; in the latter
case ``logo`` and ``favicon`` file parts are uploaded to storage and the
resulting URLs and keys written into the configuration.
"""
import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from banderas.api.deps import get_container, require_admin
from banderas.api.resources import service_errors
from banderas.db import schemas
from banderas.services.container import ServiceContainer
from banderas.services.site_config_service import UPLOAD_FIELDS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/site-config", tags=["site-config"])


def _requirements_from_form(values: list[str]) -> list[str]:
    """Accept a JSON array string, repeated fields, or newline-separated text."""
    if len(values) == 1:
        raw = values[0].strip()
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return [str(item).strip() for item in parsed if str(item).strip()]
        return [line.strip() for line in raw.splitlines() if line.strip()]
    return [value.strip() for value in values if value.strip()]


async def _parse_form(request: Request) -> tuple[dict[str, Any], dict[str, tuple[bytes, str]]]:
    form = await request.form()
    data: dict[str, Any] = {}
    files: dict[str, tuple[bytes, str]] = {}
    for key in set(form.keys()):
        values = form.getlist(key)
        if key in UPLOAD_FIELDS:
            upload = values[0]
            if isinstance(upload, UploadFile) and upload.filename:
                files[key] = (await upload.read(), upload.content_type or "")
            continue
        text_values = [v for v in values if isinstance(v, str)]
        if not text_values:
            continue
        if key in ("admissionRequirements", "admission_requirements"):
            data[key] = _requirements_from_form(text_values)
        else:
            data[key] = text_values[-1] if text_values[-1] != "" else None
    return data, files


@router.get("")
@router.get("/", include_in_schema=False)
def get_site_config(container: ServiceContainer = Depends(get_container)):
    with service_errors("Failed to get configuration"):
        config = container.site_config.get_config()
        if config is None:
            return {}
        return schemas.SiteConfig.model_validate(config).model_dump(by_alias=True, mode="json")


@router.put("", response_model=schemas.SiteConfig, dependencies=[Depends(require_admin)])
@router.put("/", response_model=schemas.SiteConfig, dependencies=[Depends(require_admin)], include_in_schema=False)
async def update_site_config(request: Request, container: ServiceContainer = Depends(get_container)):
    content_type = request.headers.get("content-type", "")
    files: dict[str, tuple[bytes, str]] = {}
    if content_type.startswith("multipart/form-data") or content_type.startswith("application/x-www-form-urlencoded"):
        raw, files = await _parse_form(request)
    else:
        try:
            raw = await request.json()
        except ValueError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body")
        if not isinstance(raw, dict):
            raise HTTPException(status_code=422, detail="Expected a JSON object")

    try:
        payload = schemas.SiteConfigUpdate.model_validate(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    with service_errors("Failed to update configuration"):
        if files:
            return await run_in_threadpool(container.site_config.update_config_with_files, payload, files)
        return await run_in_threadpool(container.site_config.update_config, payload)
