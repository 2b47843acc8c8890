from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import SkippedEmployee
from ..common.numbers import round2
from ..ethiopian_calendar.model import Holiday

CSV_FIELDS = [
    "employee_id",
    "name",
    "department",
    "designation",
    "month",
    "year",
    "gross_salary",
    "deduction_days",
    "deduction_amount",
    "adjusted_gross",
    "income_tax",
    "employee_pension",
    "employer_pension",
    "transport_allowance",
    "net_salary",
]


@dataclass(frozen=True)
class PayPeriod:
    month: int
    year: int

    def to_dict(self) -> dict:
        return {"month": self.month, "year": self.year}


@dataclass(frozen=True)
class PayrollLine:
    """One employee's pay for one period.

    Money fields hold unrounded values; rounding happens in to_dict/csv_row only.
    """

    employee_id: str
    period: PayPeriod
    gross_salary: float
    adjusted_gross: float
    deduction_days: int
    deduction_amount: float
    employee_pension: float
    employer_pension: float
    income_tax: float
    transport_allowance: float
    net_salary: float
    name: str = ""
    department: str = ""
    designation: str = ""
    deduction_dates: tuple[date, ...] = ()
    working_days: int = 0
    total_days: int = 0

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "department": self.department,
            "designation": self.designation,
            "period": self.period.to_dict(),
            "grossSalary": round2(self.gross_salary),
            "adjustedGross": round2(self.adjusted_gross),
            "deductionDays": self.deduction_days,
            "deductionDates": [d.isoformat() for d in self.deduction_dates],
            "deductionAmount": round2(self.deduction_amount),
            "employeePension": round2(self.employee_pension),
            "employerPension": round2(self.employer_pension),
            "incomeTax": round2(self.income_tax),
            "transportAllowance": round2(self.transport_allowance),
            "netSalary": round2(self.net_salary),
            "workingDays": self.working_days,
            "totalDays": self.total_days,
        }

    def csv_row(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "designation": self.designation,
            "month": self.period.month,
            "year": self.period.year,
            "gross_salary": f"{round2(self.gross_salary):.2f}",
            "deduction_days": self.deduction_days,
            "deduction_amount": f"{round2(self.deduction_amount):.2f}",
            "adjusted_gross": f"{round2(self.adjusted_gross):.2f}",
            "income_tax": f"{round2(self.income_tax):.2f}",
            "employee_pension": f"{round2(self.employee_pension):.2f}",
            "employer_pension": f"{round2(self.employer_pension):.2f}",
            "transport_allowance": f"{round2(self.transport_allowance):.2f}",
            "net_salary": f"{round2(self.net_salary):.2f}",
        }


@dataclass(frozen=True)
class PayrollSummary:
    employee_count: int = 0
    total_gross: float = 0.0
    total_adjusted_gross: float = 0.0
    total_income_tax: float = 0.0
    total_employee_pension: float = 0.0
    total_employer_pension: float = 0.0
    total_transport_allowance: float = 0.0
    total_net: float = 0.0

    @classmethod
    def from_lines(cls, lines: list[PayrollLine]) -> "PayrollSummary":
        return cls(
            employee_count=len(lines),
            total_gross=sum(l.gross_salary for l in lines),
            total_adjusted_gross=sum(l.adjusted_gross for l in lines),
            total_income_tax=sum(l.income_tax for l in lines),
            total_employee_pension=sum(l.employee_pension for l in lines),
            total_employer_pension=sum(l.employer_pension for l in lines),
            total_transport_allowance=sum(l.transport_allowance for l in lines),
            total_net=sum(l.net_salary for l in lines),
        )

    def to_dict(self) -> dict:
        return {
            "employeeCount": self.employee_count,
            "totalGross": round2(self.total_gross),
            "totalAdjustedGross": round2(self.total_adjusted_gross),
            "totalIncomeTax": round2(self.total_income_tax),
            "totalEmployeePension": round2(self.total_employee_pension),
            "totalEmployerPension": round2(self.total_employer_pension),
            "totalTransportAllowance": round2(self.total_transport_allowance),
            "totalNet": round2(self.total_net),
        }


@dataclass(frozen=True)
class PayrollRun:
    period: PayPeriod
    lines: list[PayrollLine]
    summary: PayrollSummary
    adjusted: bool = True
    working_days: int = 0
    total_days: int = 0
    holidays: list[Holiday] = field(default_factory=list)
    skipped: list[SkippedEmployee] = field(default_factory=list)

    def line_for(self, employee_id: str) -> Optional[PayrollLine]:
        return next((l for l in self.lines if l.employee_id == employee_id), None)

    def to_dict(self) -> dict:
        return {
            "period": self.period.to_dict(),
            "adjusted": self.adjusted,
            "workingDays": self.working_days,
            "totalDays": self.total_days,
            "holidaysInMonth": [h.to_dict() for h in self.holidays],
            "lines": [l.to_dict() for l in self.lines],
            "summary": self.summary.to_dict(),
            "skipped": [s.to_dict() for s in self.skipped],
        }

    def csv_rows(self) -> list[dict]:
        return [l.csv_row() for l in self.lines]
