from __future__ import annotations

from datetime import date, time
from typing import Optional

from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent
from .base import DayDecision, DayStrategy


class HolidayStrategy(DayStrategy):
    """Declared holiday: nothing else about the day is consulted."""

    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        name = holiday.name if holiday else "Holiday"
        return DayDecision(status=DayStatus.HOLIDAY, holiday=holiday, absence_reason=f"Holiday: {name}")
