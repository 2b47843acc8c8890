from datetime import datetime, timedelta

import pytest

from src.ethio_hr.ethio_hr.attendance.service import AttendanceService
from src.ethio_hr.ethio_hr.core.enums import GeofenceReason
from src.ethio_hr.ethio_hr.core.exceptions import GeofenceError, LocationIntegrityError, ValidationError
from src.ethio_hr.ethio_hr.geofence.gps_integrity import MANUAL_COORDINATES, TELEPORTATION
from src.ethio_hr.ethio_hr.geofence.model import LocationReading, WorkSite
from src.ethio_hr.ethio_hr.geofence.service import GeofenceService
from tests.fakes import InMemoryAttendance, InMemoryEmployees, InMemoryWorkSites, employee

OFFICE = WorkSite(site_id="1", name="Head Office", latitude=9.005401, longitude=38.763612, radius_meters=100)
AT_OFFICE = LocationReading(latitude=9.005421, longitude=38.763641, accuracy_meters=8.0)
ACROSS_TOWN = LocationReading(latitude=9.035421, longitude=38.763641, accuracy_meters=8.0)
MORNING = datetime(2024, 5, 6, 8, 15)
EVENING = datetime(2024, 5, 6, 17, 40)


def _service(sites=None):
    attendance = InMemoryAttendance()
    service = AttendanceService(
        attendance,
        InMemoryEmployees([employee("E1")]),
        GeofenceService(InMemoryWorkSites({"E1": [OFFICE]} if sites is None else sites)),
    )
    return service, attendance


def test_check_in_then_check_out_records_one_event():
    service, attendance = _service()

    service.check_in("E1", AT_OFFICE, now=MORNING, notes="on time")
    event = service.check_out("E1", AT_OFFICE, now=EVENING)

    assert attendance.events == [event]
    assert event.check_in_time == MORNING
    assert event.check_out_time == EVENING
    assert event.check_in_location == AT_OFFICE
    assert event.notes == "on time"


def test_second_check_in_same_day_is_rejected():
    service, _ = _service()
    service.check_in("E1", AT_OFFICE, now=MORNING)

    with pytest.raises(ValidationError):
        service.check_in("E1", AT_OFFICE, now=MORNING + timedelta(hours=1))


def test_check_out_requires_a_check_in():
    service, _ = _service()

    with pytest.raises(ValidationError):
        service.check_out("E1", AT_OFFICE, now=EVENING)


def test_second_check_out_is_rejected():
    service, _ = _service()
    service.check_in("E1", AT_OFFICE, now=MORNING)
    service.check_out("E1", AT_OFFICE, now=EVENING)

    with pytest.raises(ValidationError):
        service.check_out("E1", AT_OFFICE, now=EVENING + timedelta(minutes=5))


def test_reading_outside_work_sites_raises_geofence_error():
    service, attendance = _service()

    with pytest.raises(GeofenceError) as exc:
        service.check_in("E1", ACROSS_TOWN, now=MORNING)

    assert exc.value.result.reason == GeofenceReason.OUT_OF_RANGE
    assert exc.value.result.site == OFFICE
    assert attendance.events == []


def test_employee_without_sites_gets_no_sites_configured():
    service, _ = _service(sites={})

    with pytest.raises(GeofenceError) as exc:
        service.check_in("E1", AT_OFFICE, now=MORNING)

    assert exc.value.result.reason == GeofenceReason.NO_SITES_CONFIGURED


def test_spoofed_reading_is_rejected_before_the_geofence():
    service, attendance = _service()
    spoofed = LocationReading(latitude=9.005, longitude=38.764, accuracy_meters=5.0)

    with pytest.raises(LocationIntegrityError) as exc:
        service.check_in("E1", spoofed, now=MORNING)

    assert MANUAL_COORDINATES in exc.value.report.issues
    assert attendance.events == []


def test_teleporting_between_readings_is_rejected():
    service, _ = _service()
    at = LocationReading(AT_OFFICE.latitude, AT_OFFICE.longitude, 8.0, timestamp=MORNING)
    previous = [LocationReading(ACROSS_TOWN.latitude + 0.1, ACROSS_TOWN.longitude, 8.0, timestamp=MORNING - timedelta(minutes=5))]

    with pytest.raises(LocationIntegrityError) as exc:
        service.check_in("E1", at, now=MORNING, previous_readings=previous)

    assert TELEPORTATION in exc.value.report.issues


def test_unknown_or_malformed_employee_is_rejected():
    service, _ = _service()

    with pytest.raises(ValidationError):
        service.check_in("NOBODY", AT_OFFICE, now=MORNING)
    with pytest.raises(ValidationError):
        service.check_in("bad id!", AT_OFFICE, now=MORNING)
