from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def arg_date(args: Mapping[str, str], name: str) -> Optional[date]:
    value = args.get(name)
    if value is None or not value.strip():
        return None
    return parse_iso_date(value)


def require_arg_date(args: Mapping[str, str], name: str) -> date:
    value = arg_date(args, name)
    if value is None:
        raise ValidationError(f"{name} is required (YYYY-MM-DD)")
    return value


def arg_int(args: Mapping[str, object], name: str, default: Optional[int] = None) -> int:
    value = args.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValidationError(f"{name} is required")
        return default
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer")


def arg_bool(args: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = args.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}
