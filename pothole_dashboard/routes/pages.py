"""
Page routes — dashboard and analytics views rendered with Jinja2.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from pothole_dashboard.config import (
    MAP_ZOOM,
    MISSION_NAME,
    SITE_TITLE,
    TEMPLATES_DIR,
    TILE_URL,
)
from pothole_dashboard.dependencies import get_store, load_display_records_or_empty
from pothole_dashboard.derive import (
    category_distribution,
    map_center,
    progress_width,
    status_distribution,
    summarize,
    time_series,
)
from pothole_dashboard.models import Category
from pothole_dashboard.store import DetectionStore

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    site_title=SITE_TITLE,
    mission_name=MISSION_NAME,
    categories=list(Category),
    progress_width=progress_width,
)


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    selected: str | None = Query(None, description="Detection id to preselect"),
    store: DetectionStore = Depends(get_store),
):
    """Landing section, location log, and map."""
    records = load_display_records_or_empty(store)

    current = next((r for r in records if r.id == selected), None)
    if current is None and records:
        current = records[0]
    center = (current.latitude, current.longitude) if current else map_center(records)

    return templates.TemplateResponse(request, "dashboard.html", {
        "view": "dashboard",
        "detections": records,
        "selected": current,
        "markers": [r.to_dict() for r in records],
        "map_center": list(center),
        "map_zoom": MAP_ZOOM,
        "tile_url": TILE_URL,
    })


@router.get("/analytics", response_class=HTMLResponse)
async def analytics(request: Request, store: DetectionStore = Depends(get_store)):
    """Summary cards, charts, and the detection table."""
    records = load_display_records_or_empty(store)
    return templates.TemplateResponse(request, "analytics.html", {
        "view": "analytics",
        "detections": records,
        "summary": summarize(records),
        "type_distribution": category_distribution(records),
        "status_distribution": status_distribution(records),
        "time_series": [asdict(p) for p in time_series(records)],
    })
