from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ...core.constants import EMPLOYEE_PENSION_RATE, EMPLOYER_PENSION_RATE
from ...employees.model import Employee
from ..deductions import DeductionTally
from ..model import PayPeriod, PayrollLine
from ..tax import income_tax


@dataclass(frozen=True)
class PayrollInput:
    employee: Employee
    period: PayPeriod
    working_days: int
    total_days: int
    deductions: DeductionTally = field(default_factory=DeductionTally)


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, data: PayrollInput) -> PayrollLine:
        raise NotImplementedError

    @staticmethod
    def _line(
        data: PayrollInput,
        *,
        adjusted_gross: float,
        deduction_amount: float,
    ) -> PayrollLine:
        emp = data.employee
        employee_pension = adjusted_gross * EMPLOYEE_PENSION_RATE
        employer_pension = adjusted_gross * EMPLOYER_PENSION_RATE
        tax = income_tax(adjusted_gross)
        net = adjusted_gross - (tax + employee_pension) + emp.transport_allowance

        return PayrollLine(
            employee_id=emp.employee_id,
            name=emp.name,
            department=emp.department,
            designation=emp.designation,
            period=data.period,
            gross_salary=emp.gross_salary,
            adjusted_gross=adjusted_gross,
            deduction_days=data.deductions.days,
            deduction_dates=tuple(data.deductions.dates),
            deduction_amount=deduction_amount,
            employee_pension=employee_pension,
            employer_pension=employer_pension,
            income_tax=tax,
            transport_allowance=emp.transport_allowance,
            net_salary=net,
            working_days=data.working_days,
            total_days=data.total_days,
        )
