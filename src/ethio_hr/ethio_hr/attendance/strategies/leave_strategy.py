from __future__ import annotations

from datetime import date, time
from typing import Optional

from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent, LeaveInfo
from .base import DayDecision, DayStrategy


class ApprovedLeaveStrategy(DayStrategy):
    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        info = None
        if leave is not None:
            info = LeaveInfo(
                leave_type=leave.leave_type,
                leave_id=leave.leave_id,
                reason=leave.reason,
                start_date=leave.start_date,
                end_date=leave.end_date,
            )
        return DayDecision(status=DayStatus.ON_LEAVE, leave_info=info)
