from __future__ import annotations

from flask import Flask, request

from ..common.request_args import arg_bool, arg_date
from ..common.responses import error_response, ok
from ..common.validators import require_date_range
from ..container import Container
from ..core.exceptions import ValidationError
from ..geofence.model import LocationReading


def register(app: Flask, container: Container) -> None:
    def _event_payload():
        data = request.get_json(silent=True) or {}
        employee_id = data.get("employeeId") or data.get("employee_id")
        location = data.get("location") or data
        previous_raw = data.get("previousLocations") or []
        if not isinstance(previous_raw, list):
            raise ValidationError("previousLocations must be a list")
        return (
            employee_id,
            LocationReading.from_payload(location),
            [LocationReading.from_payload(p, check_range=False) for p in previous_raw],
            data.get("notes"),
        )

    @app.route("/api/attendance/reconciled", methods=["GET"], endpoint="api_attendance_reconciled")
    def api_attendance_reconciled():
        try:
            start, end = require_date_range(
                arg_date(request.args, "startDate"),
                arg_date(request.args, "endDate"),
            )
            result = container.reconciliation_service.reconcile(
                start=start,
                end=end,
                employee_id=request.args.get("employeeId"),
                department=request.args.get("department"),
            )
            include_leave = arg_bool(request.args, "includeLeaveDetails")
            return ok(
                {
                    "dateRange": {"startDate": start.isoformat(), "endDate": end.isoformat()},
                    **result.to_dict(include_leave_details=include_leave),
                }
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="api_attendance_check_in")
    def api_attendance_check_in():
        try:
            employee_id, reading, previous, notes = _event_payload()
            event = container.attendance_service.check_in(
                employee_id, reading, notes=notes, previous_readings=previous
            )
            return ok(
                {
                    "message": "Check-in recorded",
                    "date": event.work_date.isoformat(),
                    "checkInTime": event.check_in_time.isoformat() if event.check_in_time else None,
                },
                201,
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="api_attendance_check_out")
    def api_attendance_check_out():
        try:
            employee_id, reading, previous, notes = _event_payload()
            event = container.attendance_service.check_out(
                employee_id, reading, notes=notes, previous_readings=previous
            )
            return ok(
                {
                    "message": "Check-out recorded",
                    "date": event.work_date.isoformat(),
                    "checkInTime": event.check_in_time.isoformat() if event.check_in_time else None,
                    "checkOutTime": event.check_out_time.isoformat() if event.check_out_time else None,
                }
            )
        except Exception as e:
            return error_response(e)
