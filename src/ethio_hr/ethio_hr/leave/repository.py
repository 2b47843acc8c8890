from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def find_leave_requests(
        self,
        *,
        start_date: date,
        end_date: date,
        statuses: Iterable[LeaveStatus],
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        """Requests in one of the statuses whose period overlaps [start_date, end_date]."""

        raise NotImplementedError
