from __future__ import annotations

from datetime import date, time
from typing import Optional

from ...core.constants import FULL_DAY_DEDUCTION
from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent
from .base import DayDecision, DayStrategy


class AbsentStrategy(DayStrategy):
    """Working day without a check-in: one full deduction unit."""

    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        return DayDecision(
            status=DayStatus.ABSENT,
            deduction_units=FULL_DAY_DEDUCTION,
            absence_reason="No check-in recorded",
        )
