from datetime import datetime, timedelta

from src.ethio_hr.ethio_hr.geofence.gps_integrity import (
    INVALID_LATITUDE,
    MANUAL_COORDINATES,
    SUSPICIOUS_ACCURACY,
    TELEPORTATION,
    GpsIntegrityChecker,
)
from src.ethio_hr.ethio_hr.geofence.model import LocationReading

NOW = datetime(2024, 5, 6, 8, 30)


def test_realistic_reading_passes():
    report = GpsIntegrityChecker().check(LocationReading(9.005401, 38.763612, accuracy_meters=12.0, timestamp=NOW))

    assert report.valid
    assert report.risk_score == 0
    assert report.issues == []


def test_round_coordinates_look_manually_entered():
    report = GpsIntegrityChecker().check_integrity(LocationReading(9.005, 38.763, accuracy_meters=10.0))

    assert not report.valid
    assert report.issues == [MANUAL_COORDINATES]
    assert report.risk_score == 30


def test_sub_meter_accuracy_is_suspicious():
    report = GpsIntegrityChecker().check_integrity(LocationReading(9.005401, 38.763612, accuracy_meters=0.4))

    assert SUSPICIOUS_ACCURACY in report.issues
    assert report.risk_score == 20


def test_risk_score_is_capped_at_100():
    report = GpsIntegrityChecker().check_integrity(LocationReading(120.0, 200.0, accuracy_meters=0.5))

    assert INVALID_LATITUDE in report.issues
    assert report.risk_score == 100
    assert report.to_dict()["isValid"] is False


def test_jump_of_kilometres_within_an_hour_is_teleportation():
    previous = [LocationReading(9.005401, 38.763612, timestamp=NOW - timedelta(minutes=10))]
    current = LocationReading(9.105401, 38.763612, timestamp=NOW)

    report = GpsIntegrityChecker().check(current, previous)

    assert TELEPORTATION in report.issues
    assert report.risk_score == 80


def test_same_jump_over_several_hours_is_fine():
    previous = [LocationReading(9.005401, 38.763612, timestamp=NOW - timedelta(hours=3))]
    current = LocationReading(9.105401, 38.763612, timestamp=NOW)

    assert GpsIntegrityChecker().check(current, previous).valid
