from __future__ import annotations

from .base import PayrollCalculator, PayrollInput
from ..model import PayrollLine


class AdjustedPayrollCalculator(PayrollCalculator):
    """Pro-rates gross pay by deduction days: gross / working days per day, not below 0."""

    def daily_rate(self, data: PayrollInput) -> float:
        if data.working_days <= 0:
            return 0.0
        return data.employee.gross_salary / data.working_days

    def calculate(self, data: PayrollInput) -> PayrollLine:
        deduction_amount = self.daily_rate(data) * data.deductions.days
        adjusted_gross = max(0.0, data.employee.gross_salary - deduction_amount)
        return self._line(data, adjusted_gross=adjusted_gross, deduction_amount=deduction_amount)
