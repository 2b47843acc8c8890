from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_employee_id
from ..core.exceptions import GeofenceError, LocationIntegrityError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..geofence.model import GeofenceResult, LocationReading
from ..geofence.service import GeofenceService
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in/check-out intake gated by GPS integrity and the employee's work sites."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        geofence: GeofenceService,
    ):
        self._attendance = attendance
        self._employees = employees
        self._geofence = geofence

    def _get_employee(self, employee_id: str) -> Employee:
        found = self._employees.find_employees(employee_ids=[employee_id])
        if not found:
            raise ValidationError("Employee not found")
        return found[0]

    def _verify_location(
        self,
        employee_id: str,
        reading: LocationReading,
        previous_readings: Optional[Sequence[LocationReading]],
    ) -> GeofenceResult:
        report = self._geofence.check_integrity(reading, previous_readings)
        if not report.valid:
            logger.warning("Rejected reading for %s: %s", employee_id, "; ".join(report.issues))
            raise LocationIntegrityError("Location data failed integrity checks", report)

        result = self._geofence.validate_location(employee_id, reading)
        if not result.valid:
            logger.info("Employee %s outside work sites (%s)", employee_id, result.reason.value)
            raise GeofenceError(result.message, result)
        return result

    def check_in(
        self,
        employee_id: str,
        reading: LocationReading,
        *,
        now: Optional[datetime] = None,
        notes: Optional[str] = None,
        previous_readings: Optional[Sequence[LocationReading]] = None,
    ) -> AttendanceEvent:
        employee_id = require_employee_id(employee_id)
        now = now or now_local()
        today = now.date()

        self._get_employee(employee_id)

        existing = self._attendance.get_for_employee_and_date(employee_id, today)
        if existing and existing.check_in_time is not None:
            raise ValidationError("Already checked in today")

        self._verify_location(employee_id, reading, previous_readings)

        event = self._attendance.upsert_checkin(
            employee_id=employee_id,
            work_date=today,
            check_in_time=now,
            location=reading,
            notes=notes,
        )
        logger.info("Check-in recorded for %s on %s", employee_id, today)
        return event

    def check_out(
        self,
        employee_id: str,
        reading: LocationReading,
        *,
        now: Optional[datetime] = None,
        notes: Optional[str] = None,
        previous_readings: Optional[Sequence[LocationReading]] = None,
    ) -> AttendanceEvent:
        employee_id = require_employee_id(employee_id)
        now = now or now_local()
        today = now.date()

        self._get_employee(employee_id)

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record or record.check_in_time is None:
            raise ValidationError("No check-in record found for today")
        if record.check_out_time is not None:
            raise ValidationError("Already checked out today")

        self._verify_location(employee_id, reading, previous_readings)

        event = self._attendance.update_checkout(
            employee_id=employee_id,
            work_date=today,
            check_out_time=now,
            location=reading,
            notes=notes,
        )
        logger.info("Check-out recorded for %s on %s", employee_id, today)
        return event
