"""Heuristics against spoofed GPS readings.

Risk scores add up per indicator and are capped at 100. Any indicator makes the
reading invalid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .distance import haversine_meters
from .model import LocationReading

INVALID_LATITUDE = "Invalid latitude value"
INVALID_LONGITUDE = "Invalid longitude value"
SUSPICIOUS_ACCURACY = "Suspiciously high GPS accuracy"
MANUAL_COORDINATES = "Coordinates appear to be manually entered"
TELEPORTATION = "Impossible location change detected (teleportation)"

TELEPORT_DISTANCE_METERS = 1000.0
TELEPORT_WINDOW_HOURS = 1.0


@dataclass(frozen=True)
class IntegrityReport:
    valid: bool
    risk_score: int
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @classmethod
    def build(cls, issues: list[str], risk: int, recommendations: list[str]) -> "IntegrityReport":
        return cls(valid=not issues, risk_score=min(risk, 100), issues=issues, recommendations=recommendations)

    def merge(self, other: "IntegrityReport") -> "IntegrityReport":
        return IntegrityReport(
            valid=self.valid and other.valid,
            risk_score=max(self.risk_score, other.risk_score),
            issues=self.issues + other.issues,
            recommendations=self.recommendations + other.recommendations,
        )

    def to_dict(self) -> dict:
        return {
            "isValid": self.valid,
            "riskScore": self.risk_score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


class GpsIntegrityChecker:
    def check_integrity(self, reading: LocationReading) -> IntegrityReport:
        issues: list[str] = []
        risk = 0

        if not -90 <= reading.latitude <= 90:
            issues.append(INVALID_LATITUDE)
            risk += 50
        if not -180 <= reading.longitude <= 180:
            issues.append(INVALID_LONGITUDE)
            risk += 50

        if reading.accuracy_meters is not None and 0 < reading.accuracy_meters < 1:
            issues.append(SUSPICIOUS_ACCURACY)
            risk += 20

        # Fake-GPS apps tend to produce coordinates with three or fewer decimals.
        if round(reading.latitude, 3) == reading.latitude and round(reading.longitude, 3) == reading.longitude:
            issues.append(MANUAL_COORDINATES)
            risk += 30

        return IntegrityReport.build(issues, risk, self._recommendations(issues))

    def check_consistency(
        self,
        reading: LocationReading,
        previous: Optional[Sequence[LocationReading]],
    ) -> IntegrityReport:
        """Compare with the most recent previous reading (first element)."""

        if not previous:
            return IntegrityReport.build([], 0, [])

        last = previous[0]
        issues: list[str] = []
        risk = 0
        if reading.timestamp is not None and last.timestamp is not None:
            distance = haversine_meters(reading.latitude, reading.longitude, last.latitude, last.longitude)
            hours = abs((reading.timestamp - last.timestamp).total_seconds()) / 3600
            if distance > TELEPORT_DISTANCE_METERS and hours < TELEPORT_WINDOW_HOURS:
                issues.append(TELEPORTATION)
                risk += 80

        recommendations = ["Please verify your location is accurate"] if issues else []
        return IntegrityReport.build(issues, risk, recommendations)

    def check(self, reading: LocationReading, previous: Optional[Sequence[LocationReading]] = None) -> IntegrityReport:
        return self.check_integrity(reading).merge(self.check_consistency(reading, previous))

    @staticmethod
    def _recommendations(issues: list[str]) -> list[str]:
        out: list[str] = []
        if INVALID_LATITUDE in issues or INVALID_LONGITUDE in issues:
            out.append("Please ensure GPS is enabled and working properly")
        if SUSPICIOUS_ACCURACY in issues:
            out.append("GPS accuracy seems unusually high. Please verify location services")
        if MANUAL_COORDINATES in issues:
            out.append("Location appears to be manually set. Please use actual GPS location")
        return out
