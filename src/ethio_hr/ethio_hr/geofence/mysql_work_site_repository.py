from __future__ import annotations

from typing import Sequence

from ..core.constants import DEFAULT_SITE_RADIUS_METERS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import WorkSite
from .repository import WorkSiteRepository


class MySQLWorkSiteRepository(WorkSiteRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, default_radius_meters: float = DEFAULT_SITE_RADIUS_METERS):
        self._conn_factory = conn_factory
        self._default_radius = float(default_radius_meters)

    def find_work_sites(self, employee_id: str) -> Sequence[WorkSite]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ws.site_id, ws.name, ws.latitude, ws.longitude, ws.radius_meters
                FROM work_sites ws
                JOIN employee_work_sites ews ON ews.site_id = ws.site_id
                WHERE ews.employee_id=%s
                ORDER BY ws.name ASC
                """,
                (employee_id,),
            )
            rows = fetchall(cur)
            return [
                WorkSite(
                    site_id=str(r["site_id"]),
                    name=r["name"],
                    latitude=float(r["latitude"]),
                    longitude=float(r["longitude"]),
                    radius_meters=float(r.get("radius_meters") or self._default_radius),
                )
                for r in rows
            ]
