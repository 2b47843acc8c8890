from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError

_EMPLOYEE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def require_employee_id(value: object, field_name: str = "employee_id") -> str:
    v = str(value).strip() if value is not None else ""
    if not _EMPLOYEE_ID_RE.match(v):
        raise ValidationError(f"{field_name} is malformed: {value!r}")
    return v


def optional_employee_id(value: object) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_employee_id(value)


def require_date_range(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    if start is None or end is None:
        raise ValidationError("Start date and end date are required")
    if end < start:
        raise ValidationError("End date must be on or after start date")
    return start, end


def require_month(month: object, year: object) -> tuple[int, int]:
    try:
        m = int(month)  # type: ignore[arg-type]
        y = int(year)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError("Month and year must be integers")
    if not 1 <= m <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {m}")
    if not 1 <= y <= 9999:
        raise ValidationError(f"Year out of range: {y}")
    return m, y


def require_coordinate(latitude: object, longitude: object) -> tuple[float, float]:
    try:
        lat = float(latitude)  # type: ignore[arg-type]
        lon = float(longitude)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError("Latitude and longitude are required")
    if not -90.0 <= lat <= 90.0:
        raise ValidationError(f"Latitude out of range: {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValidationError(f"Longitude out of range: {lon}")
    return lat, lon
