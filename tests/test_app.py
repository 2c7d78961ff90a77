from __future__ import annotations

import pytest

from smart_office.main import create_app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "ATTENDANCE_CSV_PATH": str(tmp_path / "attendance.csv"),
            "REPORT_DIR": str(tmp_path / "reports"),
            "ACTIVITY_LOG_PATH": "",
        }
    )
    app.config["TESTING"] = True
    return app.test_client()


def test_scan_and_list_records(client, tmp_path):
    resp = client.post("/attendance/scan", json={"employee_id": 1, "direction": "in"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["persisted"] is True
    assert body["record"]["employee_name"] == "Alice"
    assert body["record"]["direction"] == "IN"
    assert (tmp_path / "attendance.csv").read_text(encoding="utf-8").startswith("1,Alice,RFID,1,")

    resp = client.get("/attendance/records")
    assert [r["employee_id"] for r in resp.get_json()["records"]] == [1]


def test_scan_unknown_employee(client):
    resp = client.post("/attendance/scan", json={"employee_id": 99, "direction": "out"})

    assert resp.get_json()["record"]["employee_name"] == "Unknown-99"


def test_scan_validation_errors(client):
    assert client.post("/attendance/scan", json={"employee_id": "x", "direction": "in"}).status_code == 400
    assert client.post("/attendance/scan", json={"employee_id": 1, "direction": "up"}).status_code == 400
    assert client.get("/attendance/records?date=2025-13-01").status_code == 400
    assert client.get("/attendance/records?start=2025-01-01").status_code == 400


def test_reports_text_and_csv(client, tmp_path):
    resp = client.get("/reports/daily?date=2025-01-06")
    assert resp.status_code == 200
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True).startswith("Daily Attendance Report for 2025-01-06")
    assert (tmp_path / "reports" / "attendance-report-20250106.csv").exists()

    resp = client.get("/reports/weekly.csv?date=2025-01-08")
    assert resp.mimetype == "text/csv"
    assert "attendance-report-week-20250106.csv" in resp.headers["Content-Disposition"]
    assert resp.get_data(as_text=True) == "empId,empName,daysPresent,totalHours,notes\n"

    resp = client.get("/reports/monthly?year=2025&month=2")
    assert resp.get_data(as_text=True).startswith("Monthly Attendance Report for 2025-02")


def test_report_bad_input(client):
    assert client.get("/reports/daily?date=yesterday").status_code == 400
    assert client.get("/reports/monthly?year=2025&month=13").status_code == 400
    assert client.get("/reports/monthly.csv?year=abc&month=1").status_code == 400
