from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..common.datetime_utils import as_date, iter_days, month_bounds, now_local
from ..core.exceptions import CalendarConversionError
from . import conversion
from .holiday_rules import HOLIDAY_RULES, HolidayRule, holidays_in_ethiopian_year
from .model import CalendarDate, EthiopianDate, Holiday

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


class CalendarService:
    """Ethiopian calendar, holiday table and working-day model.

    One instance is meant to be injected into the reconciler and the payroll
    engine. Holiday tables are cached per instance and per Gregorian year.
    """

    def __init__(self, *, rules: Optional[tuple[HolidayRule, ...]] = None):
        self._rules = rules or HOLIDAY_RULES
        self._holidays_by_year: dict[int, list[Holiday]] = {}
        self._holiday_by_date: dict[int, dict[date, Holiday]] = {}

    # -------- Conversion --------
    def to_ethiopian(self, value: DateLike) -> EthiopianDate:
        return conversion.to_ethiopian(as_date(value))

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        return conversion.to_gregorian(int(year), int(month), int(day))

    def calendar_date(self, value: DateLike) -> CalendarDate:
        return conversion.calendar_date(as_date(value))

    def ethiopian_date_info(self, value: DateLike) -> dict:
        d = as_date(value)
        ethiopian = self.to_ethiopian(d)
        return {
            "gregorian": d.isoformat(),
            "ethiopian": ethiopian.to_dict(),
            "formatted": ethiopian.format(),
        }

    def current_ethiopian_date(self) -> EthiopianDate:
        return self.to_ethiopian(now_local())

    # -------- Holidays --------
    def holidays_for_year(self, gregorian_year: int) -> list[Holiday]:
        """Holidays whose Gregorian date falls in the given year, ordered by date.

        A Gregorian year overlaps two Ethiopian years, so the holidays of every
        Ethiopian month of both (Pagume included) are collected. A holiday rule
        that cannot be computed for one of those years is skipped so the rest of
        the year is still available.
        """

        cached = self._holidays_by_year.get(gregorian_year)
        if cached is not None:
            return list(cached)

        out: list[Holiday] = []
        for eth_year in (gregorian_year - 8, gregorian_year - 7):
            try:
                year_holidays = holidays_in_ethiopian_year(eth_year, rules=self._rules)
            except CalendarConversionError as e:
                logger.warning("Skipping holidays for Ethiopian year %s: %s", eth_year, e)
                continue
            out.extend(h for h in year_holidays if h.gregorian.year == gregorian_year)

        out.sort(key=lambda h: (h.gregorian, h.name))
        self._holidays_by_year[gregorian_year] = out

        by_date: dict[date, Holiday] = {}
        for h in out:
            # Prefer a day off over a working observance on the same date.
            current = by_date.get(h.gregorian)
            if current is None or (current.is_working_day and not h.is_working_day):
                by_date[h.gregorian] = h
        self._holiday_by_date[gregorian_year] = by_date
        return list(out)

    def holidays_in_month(self, year: int, month: int) -> list[Holiday]:
        """Holidays of a Gregorian month."""
        return [h for h in self.holidays_for_year(year) if h.gregorian.month == month]

    def is_holiday(self, value: DateLike, *, include_working: bool = False) -> Optional[Holiday]:
        """Holiday falling on the date, or None.

        Observances flagged ``is_working_day`` are only returned when
        ``include_working`` is set; by default only days off count.
        """

        d = as_date(value)
        self.holidays_for_year(d.year)
        holiday = self._holiday_by_date[d.year].get(d)
        if holiday is None:
            return None
        if holiday.is_working_day and not include_working:
            return None
        return holiday

    # -------- Working days --------
    def is_working_day(self, value: DateLike) -> bool:
        """Weekday check only (Saturday and Sunday are off).

        Note: holidays are intentionally not consulted here; callers that need
        them must also call is_holiday.
        """

        return as_date(value).weekday() < 5

    def working_days_between(self, start: DateLike, end: DateLike) -> int:
        return sum(1 for d in iter_days(as_date(start), as_date(end)) if self.is_working_day(d))

    def _step(self, d: date, days: int) -> date:
        try:
            return d + timedelta(days=days)
        except OverflowError:
            raise CalendarConversionError(f"No working day within the supported range from {d.isoformat()}")

    def next_working_day(self, value: DateLike) -> date:
        d = self._step(as_date(value), 1)
        while not self.is_working_day(d):
            d = self._step(d, 1)
        return d

    def previous_working_day(self, value: DateLike) -> date:
        d = self._step(as_date(value), -1)
        while not self.is_working_day(d):
            d = self._step(d, -1)
        return d

    def calendar_month(self, year: int, month: int) -> dict:
        """Month grid for calendar views: Sunday-first, blank cells before day 1."""

        first, last = month_bounds(year, month)
        leading_blanks = (first.weekday() + 1) % 7

        cells: list[Optional[dict]] = [None] * leading_blanks
        for d in iter_days(first, last):
            holiday = self.is_holiday(d)
            cells.append(
                {
                    "day": d.day,
                    "date": d.isoformat(),
                    "ethiopian": self.to_ethiopian(d).to_dict(),
                    "isWeekend": d.weekday() >= 5,
                    "isHoliday": holiday is not None,
                    "isWorkingDay": self.is_working_day(d),
                    "holiday": holiday.to_dict() if holiday else None,
                }
            )

        return {
            "year": year,
            "month": month,
            "monthName": first.strftime("%B"),
            "calendar": cells,
            "holidays": [h.to_dict() for h in self.holidays_in_month(year, month)],
        }
