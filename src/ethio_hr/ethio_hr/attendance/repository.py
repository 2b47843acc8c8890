from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..geofence.model import LocationReading
from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    def find_events(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def upsert_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        location: Optional[LocationReading] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEvent:
        """Create the day's record, or fill the check-in of an existing one."""

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_out_time: datetime,
        location: Optional[LocationReading] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEvent:
        raise NotImplementedError
