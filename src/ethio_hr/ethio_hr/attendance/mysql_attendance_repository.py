from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..geofence.model import LocationReading
from .model import AttendanceEvent
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, work_date, check_in_time, check_out_time,
    check_in_lat, check_in_lon, check_in_accuracy,
    check_out_lat, check_out_lon, check_out_accuracy, notes
"""


def _location(r: dict[str, Any], prefix: str, at: Optional[datetime]) -> Optional[LocationReading]:
    lat = r.get(f"{prefix}_lat")
    lon = r.get(f"{prefix}_lon")
    if lat is None or lon is None:
        return None
    accuracy = r.get(f"{prefix}_accuracy")
    return LocationReading(
        latitude=float(lat),
        longitude=float(lon),
        accuracy_meters=float(accuracy) if accuracy is not None else None,
        timestamp=at,
    )


def _to_event(r: dict[str, Any]) -> AttendanceEvent:
    check_in = r.get("check_in_time")
    check_out = r.get("check_out_time")
    return AttendanceEvent(
        event_id=int(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        check_in_time=check_in,
        check_out_time=check_out,
        check_in_location=_location(r, "check_in", check_in),
        check_out_location=_location(r, "check_out", check_out),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_events(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceEvent]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_attendance
                WHERE {where}
                ORDER BY work_date ASC, employee_id ASC
                """,
                tuple(params),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_event(r) if r else None

    def upsert_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        location: Optional[LocationReading] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_attendance(
                    employee_id, work_date, check_in_time,
                    check_in_lat, check_in_lon, check_in_accuracy, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    check_in_time=VALUES(check_in_time),
                    check_in_lat=VALUES(check_in_lat),
                    check_in_lon=VALUES(check_in_lon),
                    check_in_accuracy=VALUES(check_in_accuracy),
                    notes=COALESCE(VALUES(notes), notes)
                """,
                (
                    employee_id,
                    work_date,
                    check_in_time,
                    location.latitude if location else None,
                    location.longitude if location else None,
                    location.accuracy_meters if location else None,
                    notes,
                ),
            )
        event = self.get_for_employee_and_date(employee_id, work_date)
        if event is None:
            raise ValidationError("Failed to record check-in")
        return event

    def update_checkout(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_out_time: datetime,
        location: Optional[LocationReading] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE daily_attendance
                SET check_out_time=%s, check_out_lat=%s, check_out_lon=%s, check_out_accuracy=%s,
                    notes=COALESCE(%s, notes)
                WHERE employee_id=%s AND work_date=%s
                """,
                (
                    check_out_time,
                    location.latitude if location else None,
                    location.longitude if location else None,
                    location.accuracy_meters if location else None,
                    notes,
                    employee_id,
                    work_date,
                ),
            )
            if cur.rowcount <= 0:
                raise ValidationError("No check-in record found for today")
        event = self.get_for_employee_and_date(employee_id, work_date)
        if event is None:
            raise ValidationError("Failed to record check-out")
        return event
