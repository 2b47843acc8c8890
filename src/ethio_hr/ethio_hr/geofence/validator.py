from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.validators import require_coordinate
from ..core.enums import GeofenceReason
from ..core.exceptions import ValidationError
from .distance import haversine_meters
from .model import GeofenceResult, LocationReading, WorkSite


def most_accurate(readings: Iterable[LocationReading]) -> LocationReading:
    """Pick the sample with the lowest reported accuracy radius.

    Samples without an accuracy figure rank last.
    """

    best: Optional[LocationReading] = None
    for r in readings:
        if best is None:
            best = r
            continue
        acc = r.accuracy_meters if r.accuracy_meters is not None else float("inf")
        best_acc = best.accuracy_meters if best.accuracy_meters is not None else float("inf")
        if acc < best_acc:
            best = r
    if best is None:
        raise ValidationError("At least one location reading is required")
    return best


class GeofenceValidator:
    """Stateless check of a reading against a set of work-site circles."""

    def validate(self, reading: LocationReading, sites: Sequence[WorkSite]) -> GeofenceResult:
        lat, lon = require_coordinate(reading.latitude, reading.longitude)

        if not sites:
            return GeofenceResult(valid=False, reason=GeofenceReason.NO_SITES_CONFIGURED)

        measured = [(haversine_meters(lat, lon, s.latitude, s.longitude), s) for s in sites]
        matches = [(d, s) for d, s in measured if d <= s.radius_meters]
        if matches:
            distance, site = min(matches, key=lambda m: m[0])
            return GeofenceResult(valid=True, reason=GeofenceReason.WITHIN_SITE, site=site, distance_meters=distance)

        distance, site = min(measured, key=lambda m: m[0])
        return GeofenceResult(valid=False, reason=GeofenceReason.OUT_OF_RANGE, site=site, distance_meters=distance)
