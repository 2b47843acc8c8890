from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import iter_days
from ..core.enums import LeaveStatus
from ..leave.model import LeaveRequest


@dataclass(frozen=True)
class DeductionTally:
    days: int = 0
    dates: list[date] = field(default_factory=list)


def count_deduction_days(
    *,
    employee_id: str,
    start: date,
    end: date,
    events: Iterable[AttendanceEvent],
    leaves: Iterable[LeaveRequest],
) -> DeductionTally:
    """Days with no check-in that are covered by a pending, rejected or denied leave.

    Every calendar day of the range is scanned. Weekends and holidays are not
    skipped here, unlike in the day-by-day reconciliation.
    """

    checked_in = {
        e.work_date
        for e in events
        if e.employee_id == employee_id and e.check_in_time is not None
    }
    unresolved = LeaveStatus.unresolved_or_refused()
    claims = [lv for lv in leaves if lv.employee_id == employee_id and lv.status in unresolved]

    dates = [
        day
        for day in iter_days(start, end)
        if day not in checked_in and any(lv.covers(day) for lv in claims)
    ]
    return DeductionTally(days=len(dates), dates=dates)
