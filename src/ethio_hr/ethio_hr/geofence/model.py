from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import require_coordinate
from ..core.constants import DEFAULT_SITE_RADIUS_METERS
from ..core.enums import GeofenceReason
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkSite:
    """Authorized work location: a circle around a coordinate."""

    site_id: str
    name: str
    latitude: float
    longitude: float
    radius_meters: float = DEFAULT_SITE_RADIUS_METERS

    def to_dict(self) -> dict:
        return {
            "id": self.site_id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius_meters,
        }


@dataclass(frozen=True)
class LocationReading:
    latitude: float
    longitude: float
    accuracy_meters: Optional[float] = None
    timestamp: Optional[datetime] = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any], *, check_range: bool = True) -> "LocationReading":
        """Build from a JSON body.

        With ``check_range`` off, out-of-range coordinates are kept so the
        integrity checker can score them.
        """

        if check_range:
            lat, lon = require_coordinate(data.get("latitude"), data.get("longitude"))
        else:
            try:
                lat, lon = float(data["latitude"]), float(data["longitude"])
            except (KeyError, TypeError, ValueError):
                raise ValidationError("Latitude and longitude are required")
        accuracy = data.get("accuracy", data.get("accuracy_meters"))
        try:
            accuracy_meters = float(accuracy) if accuracy is not None else None
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid accuracy: {accuracy!r}")
        return cls(
            latitude=lat,
            longitude=lon,
            accuracy_meters=accuracy_meters,
            timestamp=parse_iso_datetime(data.get("timestamp")),
        )


@dataclass(frozen=True)
class GeofenceResult:
    valid: bool
    reason: GeofenceReason
    site: Optional[WorkSite] = None
    distance_meters: Optional[float] = None

    @property
    def message(self) -> str:
        if self.site is None or self.distance_meters is None:
            return "No work locations assigned to this employee. Please contact administrator."
        meters = round(self.distance_meters)
        if self.valid:
            return f"Location verified! You are {meters}m from {self.site.name}."
        return f"You are {meters}m from {self.site.name}. Must be within {self.site.radius_meters:g}m."

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "reason": self.reason.value,
            "site": self.site.to_dict() if self.site else None,
            "distanceMeters": round(self.distance_meters, 2) if self.distance_meters is not None else None,
            "message": self.message,
        }
