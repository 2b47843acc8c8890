from __future__ import annotations

from dataclasses import replace

from ..deductions import DeductionTally
from ..model import PayrollLine
from .base import PayrollCalculator, PayrollInput


class UnadjustedPayrollCalculator(PayrollCalculator):
    """Quick estimate on the raw gross; attendance and leave are ignored."""

    def calculate(self, data: PayrollInput) -> PayrollLine:
        data = replace(data, deductions=DeductionTally())
        return self._line(data, adjusted_gross=data.employee.gross_salary, deduction_amount=0.0)
