from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.validators import optional_employee_id, require_date_range
from ..core.enums import LeaveStatus
from ..employees.repository import EmployeeRepository
from ..leave.repository import LeaveRepository
from .reconciler import AttendanceReconciler, ReconciliationResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class ReconciliationService:
    """Fetches one batch of attendance, approved leave and employees, then reconciles it."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        reconciler: AttendanceReconciler,
    ):
        self._attendance = attendance
        self._leaves = leaves
        self._employees = employees
        self._reconciler = reconciler

    def reconcile(
        self,
        *,
        start: Optional[date],
        end: Optional[date],
        employee_id: Optional[str] = None,
        department: Optional[str] = None,
    ) -> ReconciliationResult:
        start, end = require_date_range(start, end)
        employee_id = optional_employee_id(employee_id)
        department = (department or "").strip() or None

        employees = self._employees.find_employees(
            employee_ids=[employee_id] if employee_id else None,
            department=department,
        )
        events = self._attendance.find_events(start_date=start, end_date=end, employee_id=employee_id)
        leaves = self._leaves.find_leave_requests(
            start_date=start,
            end_date=end,
            statuses=[LeaveStatus.APPROVED],
            employee_id=employee_id,
        )

        result = self._reconciler.reconcile(
            employees,
            start=start,
            end=end,
            events=events,
            approved_leaves=leaves,
            department=department,
        )
        logger.info(
            "Reconciled %s..%s: %d employee(s), %d record(s), %d skipped",
            start,
            end,
            result.statistics.total_employees,
            result.statistics.total_records,
            len(result.skipped),
        )
        return result
