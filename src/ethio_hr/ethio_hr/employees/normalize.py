"""Collapse the differently-shaped employee records into one Employee.

Records come either flat (``department``, ``gross_salary``) or in the legacy
document shape with a nested ``personalDetails`` object and camelCase keys.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .model import Employee

UNKNOWN = "Unknown"


def _details(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    details = raw.get("personalDetails") or raw.get("personal_details") or {}
    if isinstance(details, (str, bytes)):
        try:
            details = json.loads(details)
        except ValueError:
            return {}
    return details if isinstance(details, Mapping) else {}


def _first(*values: Any) -> Optional[Any]:
    for v in values:
        if v is not None and v != "":
            return v
    return None


def _money(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid salary figure: {value!r}")


def normalize_employee_record(raw: Mapping[str, Any]) -> Employee:
    details = _details(raw)

    employee_id = _first(raw.get("employee_id"), raw.get("_id"), raw.get("id"))
    if employee_id is None:
        raise ValidationError("Employee record has no id")

    # Top-level fields win for department/designation, nested ones for name/email.
    name = _first(details.get("name"), raw.get("name"), raw.get("full_name")) or UNKNOWN
    email = _first(details.get("email"), raw.get("email"))
    department = _first(raw.get("department"), details.get("department")) or UNKNOWN
    designation = _first(raw.get("designation"), details.get("designation")) or UNKNOWN

    gross = _first(
        raw.get("gross_salary"),
        raw.get("grossSalary"),
        raw.get("base_salary"),
        raw.get("baseSalary"),
    )
    transport = _first(raw.get("transport_allowance"), raw.get("transportAllowance"))

    status = _first(raw.get("status"), "active")
    is_active = raw.get("is_active")
    if is_active is None:
        is_active = str(status).lower() == "active"

    return Employee(
        employee_id=str(employee_id),
        name=str(name),
        email=str(email) if email is not None else None,
        department=str(department),
        designation=str(designation),
        gross_salary=_money(gross),
        transport_allowance=_money(transport),
        is_active=bool(is_active),
    )
