from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, time
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import iter_days
from ..core.constants import DEFAULT_WORKDAY_END
from ..core.enums import LeaveStatus
from ..core.exceptions import DomainError
from ..employees.model import Employee
from ..ethiopian_calendar.service import CalendarService
from ..leave.model import LeaveRequest
from .factory import DayStrategyFactory
from .model import AttendanceEvent, ReconciledDay, SkippedEmployee
from .statistics import AttendanceStatistics, build_statistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconciliationResult:
    records: list[ReconciledDay]
    statistics: AttendanceStatistics
    skipped: list[SkippedEmployee] = field(default_factory=list)

    def to_dict(self, *, include_leave_details: bool = True) -> dict:
        return {
            "records": [r.to_dict(include_leave_details=include_leave_details) for r in self.records],
            "statistics": self.statistics.to_dict(),
            "skipped": [s.to_dict() for s in self.skipped],
            "totalRecords": len(self.records),
        }


class AttendanceReconciler:
    """Merges attendance events, approved leave and the calendar into one status per employee-day.

    Works purely on in-memory collections; the caller fetches them first.
    """

    def __init__(
        self,
        calendar: CalendarService,
        *,
        strategy_factory: Optional[DayStrategyFactory] = None,
        workday_end: time = DEFAULT_WORKDAY_END,
    ):
        self._calendar = calendar
        self._factory = strategy_factory or DayStrategyFactory()
        self._workday_end = workday_end

    def reconcile_employee(
        self,
        employee: Employee,
        *,
        start: date,
        end: date,
        events: Iterable[AttendanceEvent],
        approved_leaves: Iterable[LeaveRequest],
    ) -> list[ReconciledDay]:
        events_by_day = {e.work_date: e for e in events if e.employee_id == employee.employee_id}
        leaves = [
            lv
            for lv in approved_leaves
            if lv.employee_id == employee.employee_id and lv.status == LeaveStatus.APPROVED
        ]

        out: list[ReconciledDay] = []
        for day in iter_days(start, end):
            event = events_by_day.get(day)
            leave = next((lv for lv in leaves if lv.covers(day)), None)
            holiday = self._calendar.is_holiday(day)

            strategy = self._factory.for_day(
                holiday=holiday,
                is_working_day=self._calendar.is_working_day(day),
                approved_leave=leave,
                event=event,
            )
            decision = strategy.decide(
                day=day,
                event=event,
                leave=leave,
                holiday=holiday,
                workday_end=self._workday_end,
            )

            out.append(
                ReconciledDay(
                    employee_id=employee.employee_id,
                    employee_name=employee.name,
                    department=employee.department,
                    work_date=day,
                    status=decision.status,
                    working_hours=decision.working_hours,
                    payroll_deduction_units=decision.deduction_units,
                    leave_info=decision.leave_info,
                    holiday=decision.holiday,
                    absence_reason=decision.absence_reason,
                    check_in_time=event.check_in_time if event else None,
                    check_out_time=event.check_out_time if event else None,
                )
            )
        return out

    def reconcile(
        self,
        employees: Sequence[Employee],
        *,
        start: date,
        end: date,
        events: Sequence[AttendanceEvent],
        approved_leaves: Sequence[LeaveRequest],
        department: Optional[str] = None,
    ) -> ReconciliationResult:
        """Reconcile every employee in the population.

        Events whose employee has no profile in ``employees`` are dropped; an
        employee whose data cannot be reconciled is reported in ``skipped``.
        """

        population = [e for e in employees if department is None or e.department == department]
        known = {e.employee_id for e in population}

        orphans = {e.employee_id for e in events if e.employee_id not in known}
        if orphans:
            logger.debug("Excluding attendance of %d employee(s) outside the population", len(orphans))

        events_by_employee: dict[str, list[AttendanceEvent]] = {}
        for ev in events:
            if ev.employee_id in known:
                events_by_employee.setdefault(ev.employee_id, []).append(ev)

        leaves_by_employee: dict[str, list[LeaveRequest]] = {}
        for lv in approved_leaves:
            if lv.employee_id in known:
                leaves_by_employee.setdefault(lv.employee_id, []).append(lv)

        records: list[ReconciledDay] = []
        skipped: list[SkippedEmployee] = []
        for employee in population:
            try:
                records.extend(
                    self.reconcile_employee(
                        employee,
                        start=start,
                        end=end,
                        events=events_by_employee.get(employee.employee_id, []),
                        approved_leaves=leaves_by_employee.get(employee.employee_id, []),
                    )
                )
            except (DomainError, TypeError, ValueError) as e:
                logger.exception("Reconciliation failed for employee %s", employee.employee_id)
                skipped.append(SkippedEmployee(employee_id=employee.employee_id, error=str(e)))

        records.sort(key=lambda r: (r.work_date, r.employee_id))
        return ReconciliationResult(records=records, statistics=build_statistics(records), skipped=skipped)
