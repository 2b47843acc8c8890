from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_employee_id
from .gps_integrity import GpsIntegrityChecker, IntegrityReport
from .model import GeofenceResult, LocationReading
from .repository import WorkSiteRepository
from .validator import GeofenceValidator


class GeofenceService:
    def __init__(
        self,
        sites: WorkSiteRepository,
        *,
        validator: Optional[GeofenceValidator] = None,
        integrity: Optional[GpsIntegrityChecker] = None,
    ):
        self._sites = sites
        self._validator = validator or GeofenceValidator()
        self._integrity = integrity or GpsIntegrityChecker()

    def validate_location(self, employee_id: str, reading: LocationReading) -> GeofenceResult:
        employee_id = require_employee_id(employee_id)
        sites = self._sites.find_work_sites(employee_id)
        return self._validator.validate(reading, sites)

    def check_integrity(
        self,
        reading: LocationReading,
        previous: Optional[Sequence[LocationReading]] = None,
    ) -> IntegrityReport:
        return self._integrity.check(reading, previous)
