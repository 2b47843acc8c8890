from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Canonical employee shape consumed by reconciliation and payroll.

    Note: Built by normalize_employee_record at the data-access boundary; the
    core never looks at raw store documents.
    """

    employee_id: str
    name: str
    department: str
    designation: str
    gross_salary: float
    transport_allowance: float = 0.0
    email: Optional[str] = None
    is_active: bool = True
