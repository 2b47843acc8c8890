from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_placeholders
from .model import LeaveRequest
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_leave_requests(
        self,
        *,
        start_date: date,
        end_date: date,
        statuses: Iterable[LeaveStatus],
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        status_values = [s.value for s in statuses]
        if not status_values:
            return []

        clauses = [f"lr.status IN ({in_placeholders(status_values)})", "lr.start_date <= %s", "lr.end_date >= %s"]
        params: list[object] = [*status_values, end_date, start_date]

        if employee_id is not None:
            clauses.append("lr.employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT lr.leave_id, lr.employee_id, lr.start_date, lr.end_date,
                       lr.leave_type, lr.status, lr.reason
                FROM leave_requests lr
                WHERE {where}
                ORDER BY lr.start_date ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                LeaveRequest(
                    leave_id=str(r["leave_id"]),
                    employee_id=str(r["employee_id"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    leave_type=r.get("leave_type") or "general",
                    status=LeaveStatus(str(r["status"]).lower()),
                    reason=r.get("reason"),
                )
                for r in rows
            ]
