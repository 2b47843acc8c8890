from datetime import date

import pytest

from src.ethio_hr.ethio_hr.attendance.reconciler import AttendanceReconciler
from src.ethio_hr.ethio_hr.attendance.reconciliation_service import ReconciliationService
from src.ethio_hr.ethio_hr.core.enums import DayStatus, LeaveStatus
from src.ethio_hr.ethio_hr.core.exceptions import ValidationError
from src.ethio_hr.ethio_hr.ethiopian_calendar.service import CalendarService
from tests.fakes import InMemoryAttendance, InMemoryEmployees, InMemoryLeaves, employee, event, leave


def _service():
    employees = InMemoryEmployees([employee("E1"), employee("E2", department="Operations")])
    attendance = InMemoryAttendance(
        [
            event("E1", date(2024, 5, 6), (8, 0), (17, 0)),
            event("E2", date(2024, 5, 6), (9, 0)),
        ]
    )
    leaves = InMemoryLeaves(
        [
            leave("E2", date(2024, 5, 7), date(2024, 5, 7), LeaveStatus.APPROVED, leave_type="sick"),
            leave("E1", date(2024, 5, 7), date(2024, 5, 7), LeaveStatus.PENDING, leave_id="L2"),
        ]
    )
    return ReconciliationService(attendance, leaves, employees, AttendanceReconciler(CalendarService()))


def test_reconcile_all_employees_for_a_range():
    result = _service().reconcile(start=date(2024, 5, 6), end=date(2024, 5, 7))
    status = {(r.employee_id, r.work_date.day): r.status for r in result.records}

    assert status == {
        ("E1", 6): DayStatus.PRESENT,
        ("E2", 6): DayStatus.PARTIAL,
        ("E1", 7): DayStatus.ABSENT,
        ("E2", 7): DayStatus.ON_LEAVE,
    }
    assert result.statistics.by_leave_type == {"sick": 1}


def test_reconcile_single_employee_and_department():
    service = _service()

    only_e2 = service.reconcile(start=date(2024, 5, 6), end=date(2024, 5, 7), employee_id="E2")
    operations = service.reconcile(start=date(2024, 5, 6), end=date(2024, 5, 7), department="Operations")

    assert {r.employee_id for r in only_e2.records} == {"E2"}
    assert {r.employee_id for r in operations.records} == {"E2"}


def test_unknown_employee_yields_an_empty_result():
    result = _service().reconcile(start=date(2024, 5, 6), end=date(2024, 5, 7), employee_id="E404")

    assert result.records == []
    assert result.statistics.total_records == 0


@pytest.mark.parametrize(
    "start, end, employee_id",
    [
        (None, date(2024, 5, 7), None),
        (date(2024, 5, 7), None, None),
        (date(2024, 5, 8), date(2024, 5, 7), None),
        (date(2024, 5, 6), date(2024, 5, 7), "not valid!"),
    ],
)
def test_invalid_input_is_rejected(start, end, employee_id):
    with pytest.raises(ValidationError):
        _service().reconcile(start=start, end=end, employee_id=employee_id)
