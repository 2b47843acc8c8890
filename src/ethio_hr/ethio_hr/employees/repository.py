from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def find_employees(
        self,
        *,
        employee_ids: Optional[Iterable[str]] = None,
        department: Optional[str] = None,
        active_only: bool = True,
    ) -> Sequence[Employee]:
        raise NotImplementedError
