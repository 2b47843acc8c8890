from datetime import date

import pytest

from src.ethio_hr.ethio_hr.container import wire_container
from src.ethio_hr.ethio_hr.core.enums import LeaveStatus
from src.ethio_hr.ethio_hr.geofence.model import WorkSite
from src.ethio_hr.ethio_hr.main import create_app
from tests.fakes import (
    InMemoryAttendance,
    InMemoryEmployees,
    InMemoryLeaves,
    InMemoryWorkSites,
    employee,
    event,
    leave,
)

OFFICE = WorkSite(site_id="1", name="Head Office", latitude=9.005401, longitude=38.763612, radius_meters=100)
AT_OFFICE = {"latitude": 9.005421, "longitude": 38.763641, "accuracy": 8.0}


class ExplodingEmployees:
    def find_employees(self, **kwargs):
        raise RuntimeError("database is down")


def _container(employees=None):
    return wire_container(
        employees_repo=employees or InMemoryEmployees([employee("E1", transport_allowance=600)]),
        attendance_repo=InMemoryAttendance([event("E1", date(2024, 5, 6), (8, 0), (17, 0))]),
        leaves_repo=InMemoryLeaves([leave("E1", date(2024, 5, 7), date(2024, 5, 7), LeaveStatus.PENDING)]),
        work_sites_repo=InMemoryWorkSites({"E1": [OFFICE]}),
    )


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=_container())
    return app.test_client()


def test_ethiopian_date_lookup(client):
    res = client.get("/api/calendar/ethiopian?date=2023-09-12")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["formatted"] == "1 Meskerem 2016 (Maksegno)"


def test_gregorian_lookup_rejects_invalid_pagume_day(client):
    res = client.get("/api/calendar/gregorian?year=2016&month=13&day=6")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_malformed_date_is_a_bad_request(client):
    assert client.get("/api/calendar/ethiopian?date=12/09/2023").status_code == 400


def test_holidays_for_a_month(client):
    body = client.get("/api/calendar/holidays?year=2024&month=5").get_json()

    assert body["count"] == 5
    assert body["holidays"][0]["name"] == "Labour Day"


def test_working_day_queries(client):
    assert client.get("/api/calendar/working-days?start=2024-05-01&end=2024-05-31").get_json()["workingDays"] == 23
    assert client.get("/api/calendar/is-working-day?date=2024-05-04").get_json()["isWorkingDay"] is False
    assert client.get("/api/calendar/next-working-day?date=2024-05-03").get_json()["gregorian"] == "2024-05-06"
    grid = client.get("/api/calendar/month?year=2024&month=5").get_json()
    assert grid["calendar"][:3] == [None, None, None]


def test_validate_location(client):
    res = client.post("/api/attendance/validate-location", json={"employeeId": "E1", **AT_OFFICE})

    assert res.status_code == 200
    body = res.get_json()
    assert body["valid"] is True
    assert body["site"]["name"] == "Head Office"


def test_validate_location_uses_the_most_accurate_sample(client):
    readings = [
        {"latitude": 9.035421, "longitude": 38.763641, "accuracy": 900.0},
        AT_OFFICE,
    ]
    res = client.post("/api/attendance/validate-location", json={"employeeId": "E1", "readings": readings})

    assert res.status_code == 200
    assert res.get_json()["valid"] is True


def test_validate_location_without_sites_is_not_an_error(client):
    res = client.post("/api/attendance/validate-location", json={"employeeId": "E9", **AT_OFFICE})

    assert res.status_code == 200
    assert res.get_json()["reason"] == "no_sites_configured"


def test_gps_validation_scores_out_of_range_coordinates(client):
    res = client.post("/api/attendance/gps-validation", json={"latitude": 95.5, "longitude": 38.76})

    assert res.status_code == 200
    report = res.get_json()["validation"]
    assert report["isValid"] is False
    assert "Invalid latitude value" in report["issues"]


def test_check_in_and_out(client):
    res = client.post("/api/attendance/check-in", json={"employeeId": "E1", "location": AT_OFFICE})
    assert res.status_code == 201

    again = client.post("/api/attendance/check-in", json={"employeeId": "E1", "location": AT_OFFICE})
    assert again.status_code == 400

    out = client.post("/api/attendance/check-out", json={"employeeId": "E1", "location": AT_OFFICE})
    assert out.status_code == 200
    assert out.get_json()["checkOutTime"] is not None


def test_check_in_outside_the_geofence_is_forbidden(client):
    res = client.post(
        "/api/attendance/check-in",
        json={"employeeId": "E1", "location": {"latitude": 9.035421, "longitude": 38.763641}},
    )

    assert res.status_code == 403
    assert res.get_json()["geofence"]["reason"] == "out_of_range"


def test_spoofed_check_in_is_forbidden(client):
    res = client.post(
        "/api/attendance/check-in",
        json={"employeeId": "E1", "location": {"latitude": 9.005, "longitude": 38.764}},
    )

    assert res.status_code == 403
    assert res.get_json()["integrity"]["riskScore"] == 30


def test_reconciled_attendance(client):
    res = client.get("/api/attendance/reconciled?startDate=2024-05-06&endDate=2024-05-07")

    assert res.status_code == 200
    body = res.get_json()
    assert [r["status"] for r in body["records"]] == ["present", "absent"]
    assert body["statistics"]["totalRecords"] == 2
    assert body["dateRange"] == {"startDate": "2024-05-06", "endDate": "2024-05-07"}


def test_reconciled_attendance_rejects_reversed_range(client):
    res = client.get("/api/attendance/reconciled?startDate=2024-05-07&endDate=2024-05-06")

    assert res.status_code == 400


@pytest.mark.parametrize(
    "query",
    ["", "?startDate=2024-05-06", "?endDate=2024-05-07"],
)
def test_reconciled_attendance_requires_both_dates(client, query):
    res = client.get(f"/api/attendance/reconciled{query}")

    assert res.status_code == 400
    assert res.get_json()["message"] == "Start date and end date are required"


def test_reconciled_attendance_leave_details_are_opt_in(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire_container(
        employees_repo=InMemoryEmployees([employee("E1")]),
        attendance_repo=InMemoryAttendance([]),
        leaves_repo=InMemoryLeaves([leave("E1", date(2024, 5, 7), date(2024, 5, 7), LeaveStatus.APPROVED)]),
        work_sites_repo=InMemoryWorkSites({}),
    )
    client = create_app(container=container).test_client()
    url = "/api/attendance/reconciled?startDate=2024-05-07&endDate=2024-05-07"

    default = client.get(url).get_json()["records"][0]
    detailed = client.get(url + "&includeLeaveDetails=true").get_json()["records"][0]

    assert default["status"] == "on_leave"
    assert default["leaveInfo"] is None
    assert detailed["leaveInfo"]["leaveType"] == "annual"


def test_payroll_calculate(client):
    res = client.post("/api/payroll/calculate", json={"month": 5, "year": 2024})

    assert res.status_code == 200
    body = res.get_json()
    line = body["lines"][0]
    assert line["deductionDays"] == 1
    assert line["deductionDates"] == ["2024-05-07"]
    assert body["workingDays"] == 23
    assert body["summary"]["employeeCount"] == 1


def test_payroll_calculate_rejects_bad_month(client):
    assert client.post("/api/payroll/calculate", json={"month": 13, "year": 2024}).status_code == 400


def test_payroll_estimate_and_export(client):
    estimate = client.get("/api/payroll/estimate?month=5&year=2024").get_json()
    assert estimate["adjusted"] is False
    assert estimate["lines"][0]["netSalary"] == 4750

    export = client.get("/api/payroll/export.csv?month=5&year=2024")
    assert export.status_code == 200
    assert export.mimetype == "text/csv"
    assert "payroll_2024_05.csv" in export.headers["Content-Disposition"]
    assert export.data.decode("utf-8-sig").splitlines()[0].startswith("employee_id,name")


def test_unexpected_errors_become_500(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=_container(employees=ExplodingEmployees()))

    res = app.test_client().post("/api/payroll/calculate", json={"month": 5, "year": 2024})

    assert res.status_code == 500
    assert res.get_json()["message"] == "Internal server error"
