from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..geofence.model import GeofenceResult
    from ..geofence.gps_integrity import IntegrityReport


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class CalendarConversionError(DomainError):
    """Raised when a date lies outside the supported calendar range or is not a valid date."""


class GeofenceError(DomainError):
    """Raised by the check-in/check-out intake when a reading is outside every work site."""

    def __init__(self, message: str, result: "GeofenceResult"):
        super().__init__(message)
        self.result = result


class LocationIntegrityError(DomainError):
    """Raised when a GPS reading shows spoofing indicators."""

    def __init__(self, message: str, report: "IntegrityReport"):
        super().__init__(message)
        self.report = report
