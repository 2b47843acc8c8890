from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..common.numbers import round2
from ..core.enums import DayStatus
from .model import ReconciledDay

UNKNOWN_DEPARTMENT = "Unknown"


def _empty_counts() -> dict[str, float]:
    bucket: dict[str, float] = {"totalDays": 0, "totalHours": 0.0, "payrollDeductions": 0.0}
    for status in DayStatus:
        bucket[status.value] = 0
    return bucket


def _bump(bucket: dict[str, float], record: ReconciledDay) -> None:
    bucket["totalDays"] += 1
    bucket["totalHours"] += record.working_hours
    bucket["payrollDeductions"] += record.payroll_deduction_units
    bucket[record.status.value] += 1


def _rounded(bucket: dict) -> dict:
    out = dict(bucket)
    out["totalHours"] = round2(out["totalHours"])
    return out


@dataclass
class AttendanceStatistics:
    total_records: int = 0
    total_employees: int = 0
    total_working_hours: float = 0.0
    average_working_hours: float = 0.0
    total_payroll_deductions: float = 0.0
    status_counts: dict[str, int] = field(default_factory=lambda: {s.value: 0 for s in DayStatus})
    by_department: dict[str, dict] = field(default_factory=dict)
    by_employee: dict[str, dict] = field(default_factory=dict)
    by_leave_type: dict[str, int] = field(default_factory=dict)
    attendance_trend: dict[str, dict] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "totalRecords": self.total_records,
            "totalEmployees": self.total_employees,
            "totalWorkingHours": round2(self.total_working_hours),
            "averageWorkingHours": round2(self.average_working_hours),
            "totalPayrollDeductions": self.total_payroll_deductions,
            "statusCounts": dict(self.status_counts),
            "byDepartment": {k: _rounded(v) for k, v in self.by_department.items()},
            "byEmployee": {k: _rounded(v) for k, v in self.by_employee.items()},
            "byLeaveType": dict(self.by_leave_type),
            "attendanceTrend": {k: dict(v) for k, v in self.attendance_trend.items()},
        }


def build_statistics(records: Iterable[ReconciledDay]) -> AttendanceStatistics:
    """Single-pass reduction of reconciled days into report aggregates."""

    stats = AttendanceStatistics()
    employees: set[str] = set()

    for r in records:
        stats.total_records += 1
        employees.add(r.employee_id)
        stats.total_working_hours += r.working_hours
        stats.total_payroll_deductions += r.payroll_deduction_units
        stats.status_counts[r.status.value] += 1

        if r.status == DayStatus.ON_LEAVE and r.leave_info is not None:
            lt = r.leave_info.leave_type
            stats.by_leave_type[lt] = stats.by_leave_type.get(lt, 0) + 1

        dept = r.department or UNKNOWN_DEPARTMENT
        _bump(stats.by_department.setdefault(dept, _empty_counts()), r)

        emp = stats.by_employee.get(r.employee_id)
        if emp is None:
            emp = _empty_counts()
            emp["employeeName"] = r.employee_name
            stats.by_employee[r.employee_id] = emp
        _bump(emp, r)

        trend = stats.attendance_trend.setdefault(r.work_date.isoformat(), {"total": 0, **{s.value: 0 for s in DayStatus}})
        trend["total"] += 1
        trend[r.status.value] += 1

    stats.total_employees = len(employees)
    if stats.total_records:
        stats.average_working_hours = stats.total_working_hours / stats.total_records
    return stats
