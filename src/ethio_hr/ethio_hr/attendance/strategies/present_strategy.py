from __future__ import annotations

from datetime import date, time
from typing import Optional

from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent
from .base import DayDecision, DayStrategy


class PresentStrategy(DayStrategy):
    """Both check-in and check-out: worked hours, no deduction."""

    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        if event is None or event.check_in_time is None or event.check_out_time is None:
            raise ValueError(f"Present day on {day.isoformat()} needs check-in and check-out times")
        hours = (event.check_out_time - event.check_in_time).total_seconds() / 3600
        return DayDecision(status=DayStatus.PRESENT, working_hours=max(0.0, hours))
