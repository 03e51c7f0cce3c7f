from pothole_dashboard.models import DetectionRow


def test_list_detections(client) -> None:
    response = client.get("/api/detections")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 30
    assert data[0]["id"] == "DATA30"
    assert data[0]["timestamp"] == "2026-02-17 09:00:53"
    assert data[0]["status"] is False
    assert data[0]["coordinates"] == "22.6209° N, 88.4271° E"
    assert set(data[0]["confidence"]) == {"A", "B", "C"}


def test_list_detections_is_stable_across_calls(client) -> None:
    assert client.get("/api/detections").json() == client.get("/api/detections").json()


def test_list_detections_storage_unavailable(unavailable_client) -> None:
    response = unavailable_client.get("/api/detections")
    assert response.status_code == 503
    assert response.json()["status"] == "error"


def test_analytics(client) -> None:
    data = client.get("/api/analytics").json()
    assert data["summary"]["total"] == 30
    assert data["summary"]["large_hazards"] == 10
    assert [d["value"] for d in data["category_distribution"]] == [10, 10, 10]
    assert [d["value"] for d in data["status_distribution"]] == [20, 10]
    assert data["time_series"][0]["time"] == "07:08:39"


def test_analytics_storage_unavailable_is_empty(unavailable_client) -> None:
    response = unavailable_client.get("/api/analytics")
    assert response.status_code == 200
    data = response.json()
    assert data["summary"] == {
        "total": 0,
        "large_hazards": 0,
        "hazards": 0,
        "average_confidence": 0.0,
    }
    assert data["time_series"] == []


def test_list_detections_skips_non_finite_coordinates(client) -> None:
    store = client.app.state.store
    db = store._session()
    try:
        db.add(DetectionRow(
            id="INF1", image_name="x.png", status=1, type="C",
            conf_a=0.0, conf_b=0.1, conf_c=0.9,
            timestamp="2026-02-17 10:00:00", lat=float("inf"), lng=1.0,
        ))
        db.commit()
    finally:
        db.close()

    response = client.get("/api/detections")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 30
    assert "INF1" not in {d["id"] for d in data}
