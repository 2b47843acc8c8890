from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..ethiopian_calendar.model import Holiday
from ..leave.model import LeaveRequest
from .model import AttendanceEvent
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStrategy
from .strategies.holiday_strategy import HolidayStrategy
from .strategies.leave_strategy import ApprovedLeaveStrategy
from .strategies.partial_strategy import PartialStrategy
from .strategies.present_strategy import PresentStrategy
from .strategies.weekend_strategy import WeekendStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose the strategy for a day.

    Precedence is holiday > weekend > approved leave > attendance, so a holiday
    inside an approved leave is credited as a holiday and a weekend check-in is
    never evaluated.
    """

    holiday: DayStrategy = field(default_factory=HolidayStrategy)
    weekend: DayStrategy = field(default_factory=WeekendStrategy)
    on_leave: DayStrategy = field(default_factory=ApprovedLeaveStrategy)
    absent: DayStrategy = field(default_factory=AbsentStrategy)
    partial: DayStrategy = field(default_factory=PartialStrategy)
    present: DayStrategy = field(default_factory=PresentStrategy)

    def for_day(
        self,
        *,
        holiday: Optional[Holiday],
        is_working_day: bool,
        approved_leave: Optional[LeaveRequest],
        event: Optional[AttendanceEvent],
    ) -> DayStrategy:
        if holiday is not None:
            return self.holiday
        if not is_working_day:
            return self.weekend
        if approved_leave is not None:
            return self.on_leave
        if event is None or event.check_in_time is None:
            return self.absent
        if event.check_out_time is None:
            return self.partial
        return self.present
