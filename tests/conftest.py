import pytest
from fastapi.testclient import TestClient

from pothole_dashboard.main import create_app
from pothole_dashboard.models import DetectionRecord
from pothole_dashboard.store import DetectionStore


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'detections.db'}"


@pytest.fixture
def store(database_url):
    with DetectionStore(database_url) as s:
        yield s


@pytest.fixture
def seeded_store(store):
    store.seed_if_empty()
    return store


@pytest.fixture
def records(seeded_store):
    return seeded_store.list_all()


@pytest.fixture
def client(database_url):
    with TestClient(create_app(DetectionStore(database_url))) as c:
        yield c


@pytest.fixture
def unavailable_client(tmp_path):
    missing = tmp_path / "missing" / "detections.db"
    with TestClient(create_app(DetectionStore(f"sqlite:///{missing}"))) as c:
        yield c


@pytest.fixture
def make_record():
    def _make(**overrides) -> DetectionRecord:
        values = {
            "id": "T1",
            "image_name": "frame.png",
            "hazard_detected": True,
            "category": "B",
            "confidence": {"a": 0.1, "b": 0.8, "c": 0.1},
            "captured_at": "2026-02-17 10:00:00",
            "latitude": 22.5,
            "longitude": 88.3,
        }
        values.update(overrides)
        return DetectionRecord(**values)

    return _make
