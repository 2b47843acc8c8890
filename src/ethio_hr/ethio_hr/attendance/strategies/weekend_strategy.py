from __future__ import annotations

from datetime import date, time
from typing import Optional

from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent
from .base import DayDecision, DayStrategy


class WeekendStrategy(DayStrategy):
    """Non-working day. Check-ins on such days are not evaluated."""

    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        return DayDecision(status=DayStatus.WEEKEND, absence_reason="Non-working day")
