"""In-memory repositories shared by the service and API tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from src.ethio_hr.ethio_hr.attendance.model import AttendanceEvent
from src.ethio_hr.ethio_hr.core.enums import LeaveStatus
from src.ethio_hr.ethio_hr.core.exceptions import ValidationError
from src.ethio_hr.ethio_hr.employees.model import Employee
from src.ethio_hr.ethio_hr.geofence.model import LocationReading, WorkSite
from src.ethio_hr.ethio_hr.leave.model import LeaveRequest


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)

    def find_employees(
        self,
        *,
        employee_ids: Optional[Iterable[str]] = None,
        department: Optional[str] = None,
        active_only: bool = True,
    ) -> Sequence[Employee]:
        ids = set(employee_ids) if employee_ids is not None else None
        return [
            e
            for e in self.employees
            if (ids is None or e.employee_id in ids)
            and (department is None or e.department == department)
            and (not active_only or e.is_active)
        ]


class InMemoryAttendance:
    def __init__(self, events: Optional[list[AttendanceEvent]] = None):
        self._by_key: dict[tuple[str, date], AttendanceEvent] = {}
        self._id = 0
        for e in events or []:
            self._by_key[(e.employee_id, e.work_date)] = e

    @property
    def events(self) -> list[AttendanceEvent]:
        return list(self._by_key.values())

    def find_events(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceEvent]:
        return [
            e
            for e in self._by_key.values()
            if start_date <= e.work_date <= end_date and (employee_id is None or e.employee_id == employee_id)
        ]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceEvent]:
        return self._by_key.get((employee_id, work_date))

    def upsert_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        location: Optional[LocationReading] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEvent:
        self._id += 1
        event = AttendanceEvent(
            event_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in_time,
            check_in_location=location,
            notes=notes,
        )
        self._by_key[(employee_id, work_date)] = event
        return event

    def update_checkout(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_out_time: datetime,
        location: Optional[LocationReading] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEvent:
        current = self._by_key.get((employee_id, work_date))
        if current is None:
            raise ValidationError("No check-in record found for today")
        event = replace(
            current,
            check_out_time=check_out_time,
            check_out_location=location,
            notes=notes or current.notes,
        )
        self._by_key[(employee_id, work_date)] = event
        return event


@dataclass
class InMemoryLeaves:
    requests: list[LeaveRequest] = field(default_factory=list)

    def find_leave_requests(
        self,
        *,
        start_date: date,
        end_date: date,
        statuses: Iterable[LeaveStatus],
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        wanted = set(statuses)
        return [
            r
            for r in self.requests
            if r.status in wanted
            and r.start_date <= end_date
            and r.end_date >= start_date
            and (employee_id is None or r.employee_id == employee_id)
        ]


@dataclass
class InMemoryWorkSites:
    sites_by_employee: dict[str, list[WorkSite]] = field(default_factory=dict)

    def find_work_sites(self, employee_id: str) -> Sequence[WorkSite]:
        return list(self.sites_by_employee.get(employee_id, []))


def employee(employee_id: str = "EMP001", **overrides) -> Employee:
    data = {
        "employee_id": employee_id,
        "name": "Abebe Kebede",
        "department": "Finance",
        "designation": "Accountant",
        "gross_salary": 5000.0,
        "transport_allowance": 0.0,
    }
    data.update(overrides)
    return Employee(**data)


def leave(
    employee_id: str,
    start: date,
    end: date,
    status: LeaveStatus,
    *,
    leave_id: str = "L1",
    leave_type: str = "annual",
) -> LeaveRequest:
    return LeaveRequest(
        leave_id=leave_id,
        employee_id=employee_id,
        start_date=start,
        end_date=end,
        leave_type=leave_type,
        status=status,
        reason="family",
    )


def event(
    employee_id: str,
    day: date,
    check_in: Optional[tuple[int, int]] = None,
    check_out: Optional[tuple[int, int]] = None,
) -> AttendanceEvent:
    return AttendanceEvent(
        employee_id=employee_id,
        work_date=day,
        check_in_time=datetime(day.year, day.month, day.day, *check_in) if check_in else None,
        check_out_time=datetime(day.year, day.month, day.day, *check_out) if check_out else None,
    )
