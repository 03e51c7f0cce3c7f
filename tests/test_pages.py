def test_dashboard_preselects_newest_detection(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "<h3>DATA30</h3>" in response.text
    assert "Location Logs" in response.text


def test_dashboard_selects_requested_detection(client) -> None:
    response = client.get("/", params={"selected": "DATA1"})
    assert "<h3>DATA1</h3>" in response.text
    assert "22.6209° N, 88.4275° E" in response.text


def test_dashboard_unknown_selection_falls_back_to_first(client) -> None:
    response = client.get("/", params={"selected": "NOPE"})
    assert "<h3>DATA30</h3>" in response.text


def test_dashboard_empty_state_when_storage_unavailable(unavailable_client) -> None:
    response = unavailable_client.get("/")
    assert response.status_code == 200
    assert "No detections available yet." in response.text


def test_analytics_page(client) -> None:
    response = client.get("/analytics")
    assert response.status_code == 200
    assert "Total Detections" in response.text
    assert "Small (A)" in response.text
    assert "DATA17" in response.text


def test_analytics_page_empty_state(unavailable_client) -> None:
    response = unavailable_client.get("/analytics")
    assert response.status_code == 200
    assert "No detections available yet." in response.text
    assert "0.0%" in response.text


def test_analytics_page_legends_show_shares(client) -> None:
    response = client.get("/analytics")
    assert "Small (A): 33%" in response.text
    assert "Hazard: 67%" in response.text
    assert 'id="status-chart"' in response.text


def test_map_popup_is_built_from_text_nodes(client) -> None:
    response = client.get("/static/dashboard.js")
    assert response.status_code == 200
    assert "textContent" in response.text
    assert "bindPopup(popupContent(d))" in response.text
