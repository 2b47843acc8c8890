"""Gregorian <-> Ethiopian conversion through Julian Day Numbers.

The Ethiopian year has twelve 30-day months followed by Pagume (5 days, 6 in a
leap year). A year is leap when ``year % 4 == 3``. Dates are counted from the
Amete Mihret epoch.
"""

from __future__ import annotations

from datetime import date

from ..core.exceptions import CalendarConversionError
from .model import DAY_NAMES, MONTH_NAMES, CalendarDate, EthiopianDate

AMETE_MIHRET_JDN_OFFSET = 1723856
# JDN of Meskerem 1, year 1.
ETHIOPIC_EPOCH_JDN = AMETE_MIHRET_JDN_OFFSET + 365

# date.toordinal() + this == Julian Day Number (at noon).
ORDINAL_TO_JDN = 1721425

_MIN_JDN = ETHIOPIC_EPOCH_JDN
_MAX_JDN = date.max.toordinal() + ORDINAL_TO_JDN


def is_ethiopian_leap_year(year: int) -> bool:
    return year % 4 == 3


def pagume_length(year: int) -> int:
    return 6 if is_ethiopian_leap_year(year) else 5


def gregorian_to_jdn(d: date) -> int:
    return d.toordinal() + ORDINAL_TO_JDN


def jdn_to_gregorian(jdn: int) -> date:
    if not _MIN_JDN <= jdn <= _MAX_JDN:
        raise CalendarConversionError(f"Julian day {jdn} is outside the supported range")
    return date.fromordinal(jdn - ORDINAL_TO_JDN)


def ethiopian_to_jdn(year: int, month: int, day: int) -> int:
    validate_ethiopian(year, month, day)
    return ETHIOPIC_EPOCH_JDN + 365 * (year - 1) + year // 4 + 30 * month + day - 31


def jdn_to_ethiopian(jdn: int) -> tuple[int, int, int]:
    if not _MIN_JDN <= jdn <= _MAX_JDN:
        raise CalendarConversionError(f"Julian day {jdn} is outside the supported range")
    days = jdn - AMETE_MIHRET_JDN_OFFSET
    r = days % 1461
    n = (r % 365) + 365 * (r // 1460)
    year = 4 * (days // 1461) + r // 365 - r // 1460
    month = n // 30 + 1
    day = n % 30 + 1
    return year, month, day


def validate_ethiopian(year: int, month: int, day: int) -> None:
    if year < 1:
        raise CalendarConversionError(f"Ethiopian year out of range: {year}")
    if not 1 <= month <= 13:
        raise CalendarConversionError(f"Ethiopian month must be 1-13, got {month}")
    limit = pagume_length(year) if month == 13 else 30
    if not 1 <= day <= limit:
        raise CalendarConversionError(f"Day {day} is not valid for {MONTH_NAMES[month - 1]} {year}")


def day_name(d: date) -> str:
    # date.weekday() is Monday-first, DAY_NAMES is Sunday-first.
    return DAY_NAMES[(d.weekday() + 1) % 7]


def to_ethiopian(d: date) -> EthiopianDate:
    year, month, day = jdn_to_ethiopian(gregorian_to_jdn(d))
    return EthiopianDate(
        year=year,
        month=month,
        day=day,
        month_name=MONTH_NAMES[month - 1],
        day_name=day_name(d),
    )


def to_gregorian(year: int, month: int, day: int) -> date:
    return jdn_to_gregorian(ethiopian_to_jdn(year, month, day))


def calendar_date(d: date) -> CalendarDate:
    return CalendarDate(gregorian=d, ethiopian=to_ethiopian(d))


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Julian (Old Style) calendar date to JDN."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
