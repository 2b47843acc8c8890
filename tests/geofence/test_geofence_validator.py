import math

import pytest

from src.ethio_hr.ethio_hr.core.enums import GeofenceReason
from src.ethio_hr.ethio_hr.core.exceptions import ValidationError
from src.ethio_hr.ethio_hr.geofence.distance import haversine_meters
from src.ethio_hr.ethio_hr.geofence.model import LocationReading, WorkSite
from src.ethio_hr.ethio_hr.geofence.validator import GeofenceValidator, most_accurate

HQ = WorkSite(site_id="1", name="Head Office", latitude=9.0054, longitude=38.7636, radius_meters=100)
BRANCH = WorkSite(site_id="2", name="Bole Branch", latitude=8.9806, longitude=38.7578, radius_meters=250)


def _north_of(site: WorkSite, meters: float) -> LocationReading:
    dlat = math.degrees(meters / 6_371_000)
    return LocationReading(latitude=site.latitude + dlat, longitude=site.longitude)


def _shifted(site: WorkSite, meters: float) -> WorkSite:
    dlat = math.degrees(meters / 6_371_000)
    return WorkSite(site.site_id, site.name, site.latitude + dlat, site.longitude, site.radius_meters)


def test_haversine_zero_and_known_distance():
    assert haversine_meters(9.0, 38.7, 9.0, 38.7) == 0
    # One degree of latitude on a 6371 km sphere.
    assert haversine_meters(0, 0, 1, 0) == pytest.approx(111_194.9, abs=0.1)


def test_site_center_is_always_valid():
    tiny = WorkSite(site_id="3", name="Kiosk", latitude=9.01, longitude=38.76, radius_meters=0.5)
    result = GeofenceValidator().validate(LocationReading(9.01, 38.76), [tiny])

    assert result.valid
    assert result.reason == GeofenceReason.WITHIN_SITE
    assert result.distance_meters == 0


def test_one_meter_past_the_radius_is_invalid():
    validator = GeofenceValidator()

    inside = validator.validate(_north_of(HQ, 99), [HQ])
    outside = validator.validate(_north_of(HQ, 101), [HQ])

    assert inside.valid
    assert not outside.valid
    assert outside.reason == GeofenceReason.OUT_OF_RANGE
    assert outside.site == HQ
    assert outside.distance_meters == pytest.approx(101, abs=0.01)


def test_any_site_within_its_own_radius_matches():
    # The nearest site is too small; a farther site with a wide radius still covers the reading.
    kiosk = WorkSite(site_id="k", name="Kiosk", latitude=9.0, longitude=38.7, radius_meters=50)
    campus = WorkSite(site_id="c", name="Campus", latitude=9.0, longitude=38.7, radius_meters=1000)
    kiosk = _shifted(kiosk, 300)
    campus = _shifted(campus, -600)
    reading = LocationReading(latitude=9.0, longitude=38.7)

    result = GeofenceValidator().validate(reading, [kiosk, campus])

    assert result.valid
    assert result.site == campus
    assert result.distance_meters == pytest.approx(600, abs=0.01)


def test_out_of_range_reports_the_nearest_site():
    reading = _north_of(HQ, 500)
    result = GeofenceValidator().validate(reading, [BRANCH, HQ])

    assert not result.valid
    assert result.site == HQ
    assert "Must be within 100m" in result.message


def test_no_sites_is_a_distinct_result_state():
    result = GeofenceValidator().validate(LocationReading(9.0, 38.7), [])

    assert not result.valid
    assert result.reason == GeofenceReason.NO_SITES_CONFIGURED
    assert result.site is None
    assert result.to_dict()["distanceMeters"] is None


def test_out_of_range_coordinates_are_rejected():
    with pytest.raises(ValidationError):
        GeofenceValidator().validate(LocationReading(91.0, 38.7), [HQ])


def test_most_accurate_prefers_smallest_accuracy_radius():
    readings = [
        LocationReading(9.0, 38.7, accuracy_meters=None),
        LocationReading(9.1, 38.7, accuracy_meters=35.0),
        LocationReading(9.2, 38.7, accuracy_meters=8.0),
    ]

    assert most_accurate(readings).latitude == 9.2


def test_most_accurate_requires_a_reading():
    with pytest.raises(ValidationError):
        most_accurate([])


def test_result_without_a_site_reports_missing_assignment():
    result = GeofenceValidator().validate(_north_of(HQ, 10), [])

    assert result.site is None
    assert result.message.startswith("No work locations assigned")
