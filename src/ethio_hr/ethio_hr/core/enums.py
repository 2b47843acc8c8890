from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Canonical status of one reconciled employee-day."""

    PRESENT = "present"
    PARTIAL = "partial"
    ABSENT = "absent"
    ON_LEAVE = "on_leave"
    HOLIDAY = "holiday"
    WEEKEND = "weekend"


class LeaveStatus(str, Enum):
    """Approval state of a leave request as stored by the leave workflow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    DENIED = "denied"

    @classmethod
    def unresolved_or_refused(cls) -> tuple["LeaveStatus", ...]:
        return (cls.PENDING, cls.REJECTED, cls.DENIED)


class HolidayCategory(str, Enum):
    RELIGIOUS = "religious"
    CIVIC = "civic"


class GeofenceReason(str, Enum):
    """Why a location reading was accepted or refused."""

    WITHIN_SITE = "within_site"
    OUT_OF_RANGE = "out_of_range"
    NO_SITES_CONFIGURED = "no_sites_configured"
