from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.numbers import round2
from ..core.enums import DayStatus
from ..ethiopian_calendar.model import Holiday
from ..geofence.model import LocationReading


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one employee's check-in/check-out record for one day."""

    employee_id: str
    work_date: date
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    check_in_location: Optional[LocationReading] = None
    check_out_location: Optional[LocationReading] = None
    notes: Optional[str] = None
    event_id: Optional[int] = None


@dataclass(frozen=True)
class LeaveInfo:
    leave_type: str
    leave_id: str
    reason: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "leaveType": self.leave_type,
            "leaveId": self.leave_id,
            "reason": self.reason,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
        }


@dataclass(frozen=True)
class ReconciledDay:
    """Read-model: the single canonical status of one employee-day."""

    employee_id: str
    work_date: date
    status: DayStatus
    working_hours: float
    payroll_deduction_units: float
    employee_name: str = ""
    department: str = ""
    leave_info: Optional[LeaveInfo] = None
    holiday: Optional[Holiday] = None
    absence_reason: Optional[str] = None
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None

    def to_dict(self, *, include_leave_details: bool = True) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "department": self.department,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "workingHours": round2(self.working_hours),
            "payrollDeduction": self.payroll_deduction_units,
            "absenceReason": self.absence_reason,
            "leaveInfo": self.leave_info.to_dict() if (self.leave_info and include_leave_details) else None,
            "holiday": self.holiday.to_dict() if self.holiday else None,
            "checkInTime": self.check_in_time.isoformat() if self.check_in_time else None,
            "checkOutTime": self.check_out_time.isoformat() if self.check_out_time else None,
        }


@dataclass(frozen=True)
class SkippedEmployee:
    employee_id: str
    error: str

    def to_dict(self) -> dict:
        return {"employeeId": self.employee_id, "error": self.error}

