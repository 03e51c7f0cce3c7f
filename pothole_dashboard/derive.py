"""
Derived views over an in-memory list of detection records.

Every function here is pure: it takes records and returns new values without
touching the store. Pages and API routes recompute these on every request.
"""

from dataclasses import dataclass

from pothole_dashboard.config import DEFAULT_MAP_CENTER
from pothole_dashboard.models import Category, DetectionRecord, DisplayRecord

HAZARD_COLOR = "#ef4444"
CLEAR_COLOR = "#10b981"


@dataclass(frozen=True)
class TimePoint:
    time: str
    confidence: float


@dataclass(frozen=True)
class AnalyticsSummary:
    total: int
    large_hazards: int
    hazards: int
    average_confidence: float


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format degrees as ``"22.6209° N, 88.4275° E"``."""
    ns = "N" if latitude >= 0 else "S"
    ew = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.4f}° {ns}, {abs(longitude):.4f}° {ew}"


def to_display_record(record: DetectionRecord) -> DisplayRecord:
    return DisplayRecord(
        **record.model_dump(exclude={"coordinates"}),
        coordinates=format_coordinates(record.latitude, record.longitude),
    )


def max_confidence(record: DetectionRecord) -> float:
    c = record.confidence
    return max(c.a, c.b, c.c)


def progress_width(record: DetectionRecord) -> float:
    """Width, in percent, of the confidence bar shown for a table row."""
    return max_confidence(record) * 100


def group_by_category(records) -> dict[Category, int]:
    counts = {category: 0 for category in Category}
    for r in records:
        counts[r.category] += 1
    return counts


def group_by_status(records) -> dict[str, int]:
    hazard = sum(1 for r in records if r.hazard_detected)
    return {"hazard": hazard, "clear": len(records) - hazard}


def time_series(records) -> list[TimePoint]:
    """Max confidence (percent) per record, ordered by time of day.

    The sort is stable, so records sharing a time keep their input order.
    """
    points = [TimePoint(r.time_of_day, max_confidence(r) * 100) for r in records]
    return sorted(points, key=lambda p: p.time)


def average_confidence(records) -> float:
    """Mean max confidence as a percentage; 0.0 when there are no records."""
    if not records:
        return 0.0
    return sum(max_confidence(r) for r in records) / len(records) * 100


def _share(value: int, total: int) -> int:
    """Whole-number percentage of total; 0 when total is 0."""
    return round(value / total * 100) if total else 0


def category_distribution(records) -> list[dict]:
    counts = group_by_category(records)
    return [
        {
            "code": category.value,
            "name": f"{category.label} ({category.value})",
            "value": counts[category],
            "share": _share(counts[category], len(records)),
            "color": category.color,
        }
        for category in Category
    ]


def status_distribution(records) -> list[dict]:
    counts = group_by_status(records)
    total = len(records)
    return [
        {"name": "Hazard", "value": counts["hazard"], "share": _share(counts["hazard"], total), "color": HAZARD_COLOR},
        {"name": "Clear", "value": counts["clear"], "share": _share(counts["clear"], total), "color": CLEAR_COLOR},
    ]


def summarize(records) -> AnalyticsSummary:
    return AnalyticsSummary(
        total=len(records),
        large_hazards=group_by_category(records)[Category.LARGE],
        hazards=group_by_status(records)["hazard"],
        average_confidence=round(average_confidence(records), 1),
    )


def map_center(records) -> tuple[float, float]:
    if not records:
        return DEFAULT_MAP_CENTER
    first = records[0]
    return (first.latitude, first.longitude)
