"""Device telemetry, live location sharing and unsafe report tests."""

import json

SAMPLE = {"latitude": 28.6139, "longitude": 77.209, "accuracy_meters": 8.0}


def test_location_push_not_uploaded_when_not_tracking(client, backend, location_feed):
    r = client.post("/device/location", json=SAMPLE)

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "uploaded": False}
    assert location_feed.last_known.latitude == 28.6139
    assert backend.requests == []


def test_tracking_uploads_each_sample(client, backend):
    backend.respond("POST", "/api/v1/users/location", json={"success": True, "message": "ok"})

    started = client.post("/tracking/start").json()
    assert started["is_tracking"] is True
    assert started["started_at"] is not None

    r = client.post("/device/location", json=SAMPLE)

    assert r.json()["uploaded"] is True
    sent = json.loads(backend.requests_to("/api/v1/users/location")[0].content)
    assert sent["location"]["coordinates"] == [77.209, 28.6139]
    assert sent["location"]["accuracy"] == 8.0
    assert isinstance(sent["location"]["timestamp"], int)

    stopped = client.post("/tracking/stop").json()
    assert stopped["is_tracking"] is False
    client.post("/device/location", json=SAMPLE)
    assert len(backend.requests_to("/api/v1/users/location")) == 1


def test_upload_failure_does_not_fail_push(client, backend):
    backend.respond("POST", "/api/v1/users/location", status_code=500, json={"message": "db down"})
    client.post("/tracking/start")

    r = client.post("/device/location", json=SAMPLE)

    assert r.status_code == 200
    assert r.json()["uploaded"] is False


def test_tracking_requires_location_permission(client):
    client.post("/device/permissions", json={"location": False})

    r = client.post("/tracking/start")

    assert r.status_code == 403
    assert client.get("/tracking").json()["is_tracking"] is False


def test_tracking_status_includes_last_location(client):
    client.post("/device/location", json=SAMPLE)
    status = client.get("/tracking").json()
    assert status["last_location"]["longitude"] == 77.209


def test_battery_push(client, device_state):
    r = client.post("/device/battery", json={"percent": 15, "is_charging": True})
    assert r.status_code == 200
    assert device_state.battery.percent == 15

    assert client.post("/device/battery", json={"percent": 101}).status_code == 422


def test_invalid_coordinates_rejected(client):
    assert client.post("/device/location", json={"latitude": 91, "longitude": 0}).status_code == 422


def test_unsafe_report_uses_last_known_location(client, backend):
    backend.respond("POST", "/api/v1/alerts/unsafe", json={"success": True, "message": "Reported"})
    client.post("/device/location", json=SAMPLE)

    r = client.post("/alerts/unsafe", json={"description": "Broken street lights"})

    assert r.status_code == 200
    assert r.json()["message"] == "Reported"
    sent = json.loads(backend.requests_to("/api/v1/alerts/unsafe")[0].content)
    assert sent["description"] == "Broken street lights"
    assert sent["location"]["coordinates"] == [77.209, 28.6139]


def test_unsafe_report_without_location(client):
    r = client.post("/alerts/unsafe", json={"description": "Dark alley"})
    assert r.status_code == 400

    client.post("/device/permissions", json={"location": False})
    r = client.post("/alerts/unsafe", json={"description": "Dark alley"})
    assert r.status_code == 403
