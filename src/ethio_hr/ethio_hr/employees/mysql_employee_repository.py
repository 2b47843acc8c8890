from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_placeholders
from .model import Employee
from .normalize import normalize_employee_record
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_employees(
        self,
        *,
        employee_ids: Optional[Iterable[str]] = None,
        department: Optional[str] = None,
        active_only: bool = True,
    ) -> Sequence[Employee]:
        clauses = ["1=1"]
        params: list[object] = []

        if active_only:
            clauses.append("e.status=%s")
            params.append("active")

        ids = list(employee_ids) if employee_ids is not None else None
        if ids is not None:
            if not ids:
                return []
            clauses.append(f"e.employee_id IN ({in_placeholders(ids)})")
            params.extend(ids)

        if department:
            # Legacy rows keep the department inside personal_details only.
            clauses.append(
                "(d.dept_name=%s OR JSON_UNQUOTE(JSON_EXTRACT(e.personal_details, '$.department'))=%s)"
            )
            params.extend([department, department])

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.employee_id, e.full_name, e.email, d.dept_name AS department,
                       e.designation, e.gross_salary, e.transport_allowance, e.status,
                       e.personal_details
                FROM employees e
                LEFT JOIN departments d ON d.dept_id = e.dept_id
                WHERE {where}
                ORDER BY e.employee_id ASC
                """,
                tuple(params),
            )
            return [normalize_employee_record(r) for r in fetchall(cur)]
