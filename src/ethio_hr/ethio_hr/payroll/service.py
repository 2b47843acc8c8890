from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Optional

from ..attendance.model import SkippedEmployee
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..common.validators import require_employee_id, require_month
from ..core.enums import LeaveStatus
from ..core.exceptions import DomainError
from ..employees.repository import EmployeeRepository
from ..ethiopian_calendar.service import CalendarService
from ..leave.repository import LeaveRepository
from .calculator.adjusted_calculator import AdjustedPayrollCalculator
from .calculator.base import PayrollCalculator, PayrollInput
from .calculator.unadjusted_calculator import UnadjustedPayrollCalculator
from .deductions import DeductionTally, count_deduction_days
from .model import CSV_FIELDS, PayPeriod, PayrollLine, PayrollRun, PayrollSummary

logger = logging.getLogger(__name__)


class PayrollService:
    """Monthly payroll runs over all active employees or an explicit id list."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        calendar: CalendarService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        estimate_calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._calendar = calendar
        self._calculator = calculator or AdjustedPayrollCalculator()
        self._estimate_calculator = estimate_calculator or UnadjustedPayrollCalculator()

    def _employee_ids(self, employee_ids: Optional[Iterable[object]]) -> Optional[list[str]]:
        if employee_ids is None:
            return None
        return [require_employee_id(e) for e in employee_ids]

    def compute_payroll(
        self,
        month: object,
        year: object,
        employee_ids: Optional[Iterable[object]] = None,
    ) -> PayrollRun:
        m, y = require_month(month, year)
        ids = self._employee_ids(employee_ids)
        return self._run(m, y, ids, adjusted=True)

    def compute_unadjusted_payroll(
        self,
        month: object,
        year: object,
        employee_ids: Optional[Iterable[object]] = None,
    ) -> PayrollRun:
        """Estimate on raw gross salaries; no attendance or leave is read."""

        m, y = require_month(month, year)
        ids = self._employee_ids(employee_ids)
        return self._run(m, y, ids, adjusted=False)

    def _run(self, month: int, year: int, employee_ids: Optional[list[str]], *, adjusted: bool) -> PayrollRun:
        period = PayPeriod(month=month, year=year)
        first, last = month_bounds(year, month)
        working_days = self._calendar.working_days_between(first, last)
        total_days = (last - first).days + 1
        holidays = self._calendar.holidays_in_month(year, month)

        employees = self._employees.find_employees(employee_ids=employee_ids, active_only=True)

        events_by_employee: dict[str, list] = {}
        leaves_by_employee: dict[str, list] = {}
        if adjusted and employees:
            single = employee_ids[0] if employee_ids and len(employee_ids) == 1 else None
            for ev in self._attendance.find_events(start_date=first, end_date=last, employee_id=single):
                events_by_employee.setdefault(ev.employee_id, []).append(ev)
            for lv in self._leaves.find_leave_requests(
                start_date=first,
                end_date=last,
                statuses=list(LeaveStatus.unresolved_or_refused()),
                employee_id=single,
            ):
                leaves_by_employee.setdefault(lv.employee_id, []).append(lv)

        calculator = self._calculator if adjusted else self._estimate_calculator
        lines: list[PayrollLine] = []
        skipped: list[SkippedEmployee] = []

        for emp in employees:
            try:
                tally = DeductionTally()
                if adjusted:
                    tally = count_deduction_days(
                        employee_id=emp.employee_id,
                        start=first,
                        end=last,
                        events=events_by_employee.get(emp.employee_id, []),
                        leaves=leaves_by_employee.get(emp.employee_id, []),
                    )
                lines.append(
                    calculator.calculate(
                        PayrollInput(
                            employee=emp,
                            period=period,
                            working_days=working_days,
                            total_days=total_days,
                            deductions=tally,
                        )
                    )
                )
            except (DomainError, TypeError, ValueError) as e:
                logger.exception("Payroll failed for employee %s", emp.employee_id)
                skipped.append(SkippedEmployee(employee_id=emp.employee_id, error=str(e)))

        summary = PayrollSummary.from_lines(lines)
        if working_days == 0:
            logger.warning("No working days in %02d/%d; daily rate is 0", month, year)
        logger.info(
            "Payroll %02d/%d (%s): %d line(s), %d skipped, net total %.2f",
            month,
            year,
            "adjusted" if adjusted else "unadjusted",
            len(lines),
            len(skipped),
            summary.total_net,
        )

        return PayrollRun(
            period=period,
            lines=lines,
            summary=summary,
            adjusted=adjusted,
            working_days=working_days,
            total_days=total_days,
            holidays=holidays,
            skipped=skipped,
        )

    @staticmethod
    def to_csv(run: PayrollRun) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in run.csv_rows():
            writer.writerow(row)
        return out.getvalue()
