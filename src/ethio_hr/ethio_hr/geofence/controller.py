from __future__ import annotations

from flask import Flask, request

from ..common.responses import error_response, ok
from ..container import Container
from ..core.exceptions import ValidationError
from .model import LocationReading
from .validator import most_accurate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/validate-location", methods=["POST"], endpoint="api_validate_location")
    def api_validate_location():
        try:
            data = request.get_json(silent=True) or {}
            employee_id = data.get("employeeId") or data.get("employee_id")
            samples = data.get("readings")
            if samples is not None:
                if not isinstance(samples, list):
                    raise ValidationError("readings must be a list")
                reading = most_accurate(LocationReading.from_payload(s) for s in samples)
            else:
                reading = LocationReading.from_payload(data)
            result = container.geofence_service.validate_location(employee_id, reading)
            return ok(result.to_dict())
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/gps-validation", methods=["POST"], endpoint="api_gps_validation")
    def api_gps_validation():
        try:
            data = request.get_json(silent=True) or {}
            reading = LocationReading.from_payload(data, check_range=False)
            previous_raw = data.get("previousLocations") or []
            if not isinstance(previous_raw, list):
                raise ValidationError("previousLocations must be a list")
            previous = [LocationReading.from_payload(p, check_range=False) for p in previous_raw]
            report = container.geofence_service.check_integrity(reading, previous)
            return ok({"validation": report.to_dict()})
        except Exception as e:
            return error_response(e)
