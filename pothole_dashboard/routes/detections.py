"""
API routes — Detection records and analytics.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from pothole_dashboard.dependencies import (
    get_store,
    load_display_records,
    load_display_records_or_empty,
)
from pothole_dashboard.derive import (
    category_distribution,
    status_distribution,
    summarize,
    time_series,
)
from pothole_dashboard.errors import StorageUnavailable
from pothole_dashboard.store import DetectionStore

router = APIRouter(prefix="/api", tags=["detections"])
logger = logging.getLogger(__name__)


@router.get("/detections")
async def list_detections(store: DetectionStore = Depends(get_store)):
    """Return every detection, newest capture first."""
    try:
        records = load_display_records(store)
    except StorageUnavailable as e:
        logger.error("Could not list detections: %s", e)
        return JSONResponse(
            {"status": "error", "message": "Detection storage is unavailable."},
            status_code=503,
        )
    return [r.to_dict() for r in records]


@router.get("/analytics")
async def get_analytics(store: DetectionStore = Depends(get_store)):
    """Return the aggregates behind the analytics page."""
    records = load_display_records_or_empty(store)
    return {
        "summary": asdict(summarize(records)),
        "category_distribution": category_distribution(records),
        "status_distribution": status_distribution(records),
        "time_series": [asdict(p) for p in time_series(records)],
    }
