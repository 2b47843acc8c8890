from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ...core.constants import HALF_DAY_DEDUCTION
from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent
from .base import DayDecision, DayStrategy


class PartialStrategy(DayStrategy):
    """Checked in but never checked out: hours run to the end-of-day cut-off."""

    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        if event is None or event.check_in_time is None:
            raise ValueError(f"Partial day on {day.isoformat()} needs a check-in time")
        check_in = event.check_in_time
        cutoff = datetime.combine(check_in.date(), workday_end, tzinfo=check_in.tzinfo)
        hours = max(0.0, (cutoff - check_in).total_seconds() / 3600)
        return DayDecision(status=DayStatus.PARTIAL, working_hours=hours, deduction_units=HALF_DAY_DEDUCTION)
