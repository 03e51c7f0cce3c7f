import pytest

from pothole_dashboard.errors import MalformedRecord
from pothole_dashboard.models import (
    CATEGORY_INFO,
    Category,
    DetectionRow,
    record_from_row,
)


def _row(**overrides) -> DetectionRow:
    values = dict(
        id="R1", image_name="frame.png", status=True, type="C",
        conf_a=0.0002, conf_b=0.0089, conf_c=0.9908,
        timestamp="2026-02-17 07:08:39", lat=22.620917, lng=88.427489,
    )
    values.update(overrides)
    return DetectionRow(**values)


def test_category_labels() -> None:
    assert Category("A").label == "Small"
    assert Category("B").label == "Medium"
    assert Category("C").label == "Large"
    assert set(CATEGORY_INFO) == set(Category)


def test_category_from_label_is_case_insensitive() -> None:
    assert Category.from_label("small") is Category.SMALL
    assert Category.from_label(" Large ") is Category.LARGE
    with pytest.raises(ValueError):
        Category.from_label("Huge")


def test_seeded_categories_round_trip_through_labels(records) -> None:
    for r in records:
        assert Category.from_label(r.category.label) is r.category
        assert Category(r.category.value) is r.category


def test_record_from_row_converts_status_to_bool() -> None:
    record = record_from_row(_row(status=False))
    assert record.hazard_detected is False
    assert record.category is Category.LARGE
    assert record.confidence.c == 0.9908
    assert record.time_of_day == "07:08:39"


@pytest.mark.parametrize(
    "overrides",
    [
        {"type": "D"},
        {"type": None},
        {"image_name": None},
        {"status": None},
        {"conf_b": None},
        {"conf_a": 1.5},
        {"timestamp": "yesterday"},
        {"lat": None},
        {"lat": float("inf")},
        {"lat": float("nan")},
        {"lat": 91.0},
        {"lng": -180.5},
        {"conf_c": float("nan")},
        {"status": "yes"},
        {"status": 2},
    ],
)
def test_record_from_row_rejects_malformed_rows(overrides) -> None:
    with pytest.raises(MalformedRecord) as exc:
        record_from_row(_row(**overrides))
    assert exc.value.row_id == "R1"


def test_confidence_need_not_sum_to_one(make_record) -> None:
    record = make_record(confidence={"a": 0.9, "b": 0.9, "c": 0.9})
    assert record.confidence.for_category(Category.MEDIUM) == 0.9


@pytest.mark.parametrize("status, expected", [(1, True), (0, False), (True, True)])
def test_record_from_row_accepts_zero_one_status(status, expected) -> None:
    assert record_from_row(_row(status=status)).hazard_detected is expected
