from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ...core.constants import NO_DEDUCTION
from ...core.enums import DayStatus
from ...ethiopian_calendar.model import Holiday
from ...leave.model import LeaveRequest
from ..model import AttendanceEvent, LeaveInfo


@dataclass(frozen=True)
class DayDecision:
    status: DayStatus
    working_hours: float = 0.0
    deduction_units: float = NO_DEDUCTION
    leave_info: Optional[LeaveInfo] = None
    holiday: Optional[Holiday] = None
    absence_reason: Optional[str] = None


class DayStrategy(ABC):
    """Strategy Pattern: encapsulate how one employee-day gets its status."""

    @abstractmethod
    def decide(
        self,
        *,
        day: date,
        event: Optional[AttendanceEvent],
        leave: Optional[LeaveRequest],
        holiday: Optional[Holiday],
        workday_end: time,
    ) -> DayDecision:
        raise NotImplementedError
