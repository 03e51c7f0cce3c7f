"""
Request dependencies shared by the API and page routes.
"""

import logging

from fastapi import Request

from pothole_dashboard.derive import to_display_record
from pothole_dashboard.errors import StorageUnavailable
from pothole_dashboard.models import DisplayRecord
from pothole_dashboard.store import DetectionStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> DetectionStore:
    """Dependency returning the store opened in the app lifespan."""
    return request.app.state.store


def load_display_records(store: DetectionStore) -> list[DisplayRecord]:
    """Fetch and convert every record. Raises StorageUnavailable."""
    return [to_display_record(r) for r in store.list_all()]


def load_display_records_or_empty(store: DetectionStore) -> list[DisplayRecord]:
    """Like load_display_records, but an unreachable store yields no records."""
    try:
        return load_display_records(store)
    except StorageUnavailable as e:
        logger.error("Detections unavailable, showing empty state: %s", e)
        return []
