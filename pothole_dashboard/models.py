"""
Detection models: the SQLAlchemy table row and the validated domain records.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from sqlalchemy import Column, Float, Integer, String

from pothole_dashboard.database import Base
from pothole_dashboard.errors import MalformedRecord


# ── Categories ─────────────────────────────────────────────────────────

class Category(str, Enum):
    SMALL = "A"
    MEDIUM = "B"
    LARGE = "C"

    @property
    def label(self) -> str:
        return CATEGORY_INFO[self]["label"]

    @property
    def color(self) -> str:
        return CATEGORY_INFO[self]["color"]

    @classmethod
    def from_label(cls, label: str) -> "Category":
        for category, info in CATEGORY_INFO.items():
            if info["label"].lower() == label.strip().lower():
                return category
        raise ValueError(f"Unknown category label: {label!r}")


# Shared by the table, charts and list views.
CATEGORY_INFO = {
    Category.SMALL: {"label": "Small", "color": "#3b82f6"},
    Category.MEDIUM: {"label": "Medium", "color": "#f59e0b"},
    Category.LARGE: {"label": "Large", "color": "#ef4444"},
}


# ── ORM ────────────────────────────────────────────────────────────────

class DetectionRow(Base):
    __tablename__ = "detections"

    id = Column(String, primary_key=True, index=True)
    image_name = Column(String)
    status = Column(Integer)  # 0 or 1
    type = Column(String(1))
    conf_a = Column(Float)
    conf_b = Column(Float)
    conf_c = Column(Float)
    timestamp = Column(String, index=True)
    lat = Column(Float)
    lng = Column(Float)


# ── Domain Records ─────────────────────────────────────────────────────

class Confidence(BaseModel):
    """Per-category probabilities. They are not required to sum to 1."""

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)
    b: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)
    c: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)

    def for_category(self, category: Category) -> float:
        return {Category.SMALL: self.a, Category.MEDIUM: self.b, Category.LARGE: self.c}[category]


class DetectionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    image_name: str
    hazard_detected: bool = Field(..., strict=True)
    category: Category
    confidence: Confidence
    captured_at: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)

    @property
    def time_of_day(self) -> str:
        return self.captured_at.split(" ", 1)[1]


class DisplayRecord(DetectionRecord):
    coordinates: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "image_name": self.image_name,
            "status": self.hazard_detected,
            "type": self.category.value,
            "label": self.category.label,
            "confidence": {
                "A": self.confidence.a,
                "B": self.confidence.b,
                "C": self.confidence.c,
            },
            "timestamp": self.captured_at,
            "lat": self.latitude,
            "lng": self.longitude,
            "coordinates": self.coordinates,
        }


def _status_flag(status):
    """Map the stored 0/1 status to a bool; anything else is left for validation to reject."""
    if not isinstance(status, str) and status in (0, 1):
        return bool(status)
    return status


def record_from_row(row: DetectionRow) -> DetectionRecord:
    """Validate a stored row. Raises MalformedRecord on any bad field."""
    try:
        return DetectionRecord(
            id=row.id,
            image_name=row.image_name,
            hazard_detected=_status_flag(row.status),
            category=row.type,
            confidence={"a": row.conf_a, "b": row.conf_b, "c": row.conf_c},
            captured_at=row.timestamp,
            latitude=row.lat,
            longitude=row.lng,
        )
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MalformedRecord(row.id, f"invalid field(s): {fields}") from e
