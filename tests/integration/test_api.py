"""API 集成测试"""

from fastapi.testclient import TestClient

from schengen_calc.api.main import app

client = TestClient(app)

HISTORY = [{"country": "FR", "entry_date": "2024-03-04", "exit_date": "2024-06-01"}]


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_status():
    r = client.post("/status", json={"visits": HISTORY, "reference_date": "2024-06-01"})
    assert r.status_code == 200
    data = r.json()
    assert data["used_days"] == 90
    assert data["remaining_days"] == 0
    assert data["is_compliant"] is True


def test_report():
    r = client.post("/report", json={"visits": HISTORY, "reference_date": "2024-06-01"})
    data = r.json()
    assert r.status_code == 200
    assert data["warnings"][0]["code"] == "LIMIT_REACHED"
    assert data["next_allowed_entry"] == "2024-08-31"


def test_violations():
    visits = [{"country": "DE", "entryDate": "2024-01-01", "exitDate": "2024-03-31"}]
    r = client.post("/violations", json={"visits": visits, "today": "2024-06-01"})
    assert r.status_code == 200
    periods = r.json()["violations"]
    assert len(periods) == 1
    assert periods[0]["start"] == "2024-03-31"
    assert periods[0]["peak_used_days"] == 91


def test_validate_trip_rejected():
    visits = [{"country": "FR", "entry_date": "2024-03-09", "exit_date": "2024-06-01"}]
    r = client.post(
        "/validate-trip",
        json={
            "visits": visits,
            "entry_date": "2024-06-02",
            "exit_date": "2024-06-11",
            "country": "DE",
            "today": "2024-06-01",
        },
    )
    assert r.status_code == 200
    data = r.json()
    assert data["can_travel"] is False
    assert data["max_stay_days"] == 5
    assert data["warnings"]


def test_validate_trip_reversed_dates():
    r = client.post(
        "/validate-trip",
        json={"visits": [], "entry_date": "2024-06-10", "exit_date": "2024-06-01", "country": "DE"},
    )
    assert r.status_code == 400
    body = r.json()
    assert body["error"] is True
    assert body["code"] == "INVALID_INTERVAL"


def test_safe_window():
    r = client.post(
        "/safe-window",
        json={"visits": HISTORY, "duration_days": 30, "today": "2024-06-01"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["found"] is True
    assert data["window"] == {"start_date": "2024-08-31", "end_date": "2024-09-29"}


def test_safe_window_not_found():
    r = client.post(
        "/safe-window",
        json={"visits": HISTORY, "duration_days": 30, "horizon_days": 10, "today": "2024-06-01"},
    )
    assert r.status_code == 200
    assert r.json() == {"found": False, "window": None}


def test_safe_window_invalid_duration():
    r = client.post("/safe-window", json={"visits": [], "duration_days": 0})
    assert r.status_code == 400
    assert r.json()["code"] == "INVALID_DURATION"


def test_members():
    assert client.get("/members/DE").json() == {"country": "DE", "code": "DE", "is_member": True}
    data = client.get("/members/Ireland").json()
    assert data["code"] == "IE"
    assert data["is_member"] is False


def test_metrics_after_calls():
    client.post("/status", json={"visits": HISTORY, "reference_date": "2024-06-01"})
    data = client.get("/metrics").json()
    assert data["total_calls"] >= 1
    assert data["operations"]["compute_status"]["ok"] >= 1
