from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import BaseModel, JsonValue

from components import component_catalogue, render_document
from endpoints.editor_page import dashboard_html, editor_html
from persistence import (
    AsyncPageRepository,
    DocumentSerializationError,
    InvalidPageIdError,
    LoadStatus,
    page_id_from_segments,
    validate_page_id,
)
from settings import Settings

router = APIRouter(tags=["pages"])
logger = logging.getLogger(__name__)


class PageResponse(BaseModel):
    id: str
    status: LoadStatus
    data: JsonValue = None


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------
def _repo(request: Request) -> AsyncPageRepository:
    return request.app.state.page_repo


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _page_id(raw_path: str | None, settings: Settings) -> str:
    segments = (raw_path or "").split("/")
    page_id = page_id_from_segments(segments, default=settings.default_page_id)
    try:
        return validate_page_id(page_id)
    except InvalidPageIdError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _publish_url(page_id: str) -> str:
    return f"/api/pages/{quote(page_id, safe='/')}"


# -------------------------------------------------------------------
# HTML surfaces
# -------------------------------------------------------------------
@router.get("/")
async def index() -> RedirectResponse:
    return RedirectResponse(url="/dashboard", status_code=307)


@router.get("/dashboard")
async def dashboard(request: Request) -> HTMLResponse:
    settings = _settings(request)
    data = await _repo(request).load(settings.default_page_id)
    return HTMLResponse(dashboard_html(render_document(data if data is not None else {})), status_code=200)


@router.get("/edit")
@router.get("/edit/{puck_path:path}")
async def edit_page(request: Request, puck_path: str | None = None) -> HTMLResponse:
    settings = _settings(request)
    page_id = _page_id(puck_path, settings)
    data = await _repo(request).load(page_id)
    return HTMLResponse(
        editor_html(
            page_id=page_id,
            data=data if data is not None else {},
            catalogue=component_catalogue(),
            publish_url=_publish_url(page_id),
            cdn_url=settings.puck_cdn_url,
        ),
        status_code=200,
    )


# -------------------------------------------------------------------
# JSON API used by the editor page
# -------------------------------------------------------------------
@router.get("/api/components")
async def components() -> JSONResponse:
    return JSONResponse(component_catalogue())


@router.get("/api/pages/{page_path:path}")
async def get_page(request: Request, page_path: str) -> JSONResponse:
    page_id = _page_id(page_path, _settings(request))
    result = await _repo(request).lookup(page_id)
    resp = PageResponse(id=page_id, status=result.status, data=result.value if result.found else None)
    return JSONResponse(resp.model_dump(mode="json"))


@router.post("/api/pages/{page_path:path}")
async def publish_page(request: Request, page_path: str) -> JSONResponse:
    settings = _settings(request)
    page_id = _page_id(page_path, settings)

    raw = await request.body()
    try:
        doc: Any = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise HTTPException(status_code=400, detail=f"request body is not valid JSON: {e}") from e

    if settings.debug_log_requests:
        logger.info("PUBLISH %s: %d bytes", page_id, len(raw))

    try:
        await _repo(request).save(page_id, doc)
    except DocumentSerializationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    logger.info("Published page %s", page_id)
    return JSONResponse({"ok": True, "id": page_id})
