"""Holiday table of the Ethiopian public calendar.

Holidays come from four kinds of rules:

- fixed Ethiopian dates (Enkutatash, Meskel, Timket, ...);
- fixed Gregorian dates (Labour Day);
- Orthodox movable feasts anchored on Fasika, computed with the Julian computus;
- Islamic feasts, taken from the observed dates published by the ``holidays`` package.

Everything is derived from the year number; nothing here is persisted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

import holidays

from ..core.enums import HolidayCategory
from ..core.exceptions import CalendarConversionError
from .conversion import (
    calendar_date,
    is_ethiopian_leap_year,
    jdn_to_gregorian,
    julian_to_jdn,
    to_ethiopian,
    to_gregorian,
    validate_ethiopian,
)
from .model import Holiday

logger = logging.getLogger(__name__)

# Names of the Islamic feasts in the library's English and Amharic catalogues.
EID_AL_FITR_NAMES = ("fitr", "ፈጥር")
EID_AL_ADHA_NAMES = ("adha", "አድሃ", "አረፋ")
MAWLID_NAMES = ("prophet", "mawlid", "መውሊድ")


@dataclass(frozen=True)
class HolidayRule:
    name: str
    localized_name: str
    category: HolidayCategory
    # Returns the Gregorian dates the holiday falls on during the given Ethiopian year.
    dates_in_year: Callable[[int], list[date]]
    is_working_day: bool = False


def _fixed(month: int, day: int) -> Callable[[int], list[date]]:
    def dates(eth_year: int) -> list[date]:
        return [to_gregorian(eth_year, month, day)]

    return dates


def _genna(eth_year: int) -> list[date]:
    # Tahesas 29, moved to Tahesas 28 when the previous year had a 6-day Pagume.
    day = 28 if is_ethiopian_leap_year(eth_year - 1) else 29
    return [to_gregorian(eth_year, 4, day)]


def _gregorian_fixed(month: int, day: int) -> Callable[[int], list[date]]:
    def dates(eth_year: int) -> list[date]:
        out = []
        for gregorian_year in (eth_year + 7, eth_year + 8):
            d = date(gregorian_year, month, day)
            if to_ethiopian(d).year == eth_year:
                out.append(d)
        return out

    return dates


def orthodox_easter(gregorian_year: int) -> date:
    """Fasika: Julian computus, converted to the Gregorian calendar."""
    a = gregorian_year % 4
    b = gregorian_year % 7
    c = gregorian_year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = (d + e + 114) % 31 + 1
    return jdn_to_gregorian(julian_to_jdn(gregorian_year, month, day))


def _easter_offset(days: int) -> Callable[[int], list[date]]:
    def dates(eth_year: int) -> list[date]:
        # Fasika always falls in Megabit/Miazia, i.e. in Gregorian year eth_year + 8.
        return [orthodox_easter(eth_year + 8) + timedelta(days=days)]

    return dates


def _islamic(names: tuple[str, ...]) -> Callable[[int], list[date]]:
    def dates(eth_year: int) -> list[date]:
        # An Ethiopian year spans the end of one Gregorian year and the start of the next.
        observed = holidays.Ethiopia(years=(eth_year + 7, eth_year + 8), language="en_US")
        out = []
        for d in sorted(observed):
            labels = [label.lower() for label in observed.get_list(d)]
            if not any(n in label for n in names for label in labels):
                continue
            if to_ethiopian(d).year == eth_year:
                out.append(d)
        return out

    return dates


HOLIDAY_RULES: tuple[HolidayRule, ...] = (
    HolidayRule("Enkutatash", "እንቁጣጣሽ", HolidayCategory.CIVIC, _fixed(1, 1)),
    HolidayRule("Meskel", "መስቀል", HolidayCategory.RELIGIOUS, _fixed(1, 17)),
    HolidayRule("Genna", "ገና", HolidayCategory.RELIGIOUS, _genna),
    HolidayRule("Timket", "ጥምቀት", HolidayCategory.RELIGIOUS, _fixed(5, 11)),
    HolidayRule("Adwa Victory Day", "የአድዋ ድል በዓል", HolidayCategory.CIVIC, _fixed(6, 23)),
    HolidayRule("Labour Day", "የሰራተኞች ቀን", HolidayCategory.CIVIC, _gregorian_fixed(5, 1)),
    HolidayRule("Patriots' Victory Day", "የአርበኞች ቀን", HolidayCategory.CIVIC, _fixed(8, 27)),
    HolidayRule("Derg Downfall Day", "ደርግ የወደቀበት ቀን", HolidayCategory.CIVIC, _fixed(9, 20)),
    HolidayRule("Siklet", "ስቅለት", HolidayCategory.RELIGIOUS, _easter_offset(-2)),
    HolidayRule("Fasika", "ፋሲካ", HolidayCategory.RELIGIOUS, _easter_offset(0)),
    HolidayRule("Eid al-Fitr", "ኢድ አልፈጥር", HolidayCategory.RELIGIOUS, _islamic(EID_AL_FITR_NAMES)),
    HolidayRule("Eid al-Adha", "ኢድ አልአድሃ", HolidayCategory.RELIGIOUS, _islamic(EID_AL_ADHA_NAMES)),
    HolidayRule("Mawlid", "መውሊድ", HolidayCategory.RELIGIOUS, _islamic(MAWLID_NAMES)),
    # Observances that stay ordinary working days.
    HolidayRule("Debre Zeit", "ደብረ ዘይት", HolidayCategory.RELIGIOUS, _easter_offset(-28), is_working_day=True),
    HolidayRule("Hosanna", "ሆሳዕና", HolidayCategory.RELIGIOUS, _easter_offset(-7), is_working_day=True),
    HolidayRule("Buhe", "ቡሄ", HolidayCategory.RELIGIOUS, _fixed(12, 13), is_working_day=True),
)


def holidays_in_ethiopian_year(
    eth_year: int,
    *,
    rules: Optional[tuple[HolidayRule, ...]] = None,
) -> list[Holiday]:
    """Holidays whose Ethiopian date falls in ``eth_year``, ordered by date.

    Each rule is evaluated on its own; a rule that cannot be computed for the
    year is logged and left out while the other rules still contribute.
    """

    validate_ethiopian(eth_year, 1, 1)
    out: list[Holiday] = []
    for rule in rules or HOLIDAY_RULES:
        try:
            found = [calendar_date(d) for d in rule.dates_in_year(eth_year)]
        except (CalendarConversionError, ValueError, OverflowError) as e:
            logger.warning("Skipping holiday %s for Ethiopian year %s: %s", rule.name, eth_year, e)
            continue
        for cd in found:
            if cd.ethiopian.year != eth_year:
                continue
            out.append(
                Holiday(
                    date=cd,
                    name=rule.name,
                    localized_name=rule.localized_name,
                    category=rule.category,
                    is_working_day=rule.is_working_day,
                )
            )
    out.sort(key=lambda h: (h.gregorian, h.name))
    return out


def holidays_in_ethiopian_month(
    eth_year: int,
    eth_month: int,
    *,
    rules: Optional[tuple[HolidayRule, ...]] = None,
) -> list[Holiday]:
    """Holidays whose Ethiopian date falls in (eth_year, eth_month), ordered by date."""

    validate_ethiopian(eth_year, eth_month, 1)
    return [h for h in holidays_in_ethiopian_year(eth_year, rules=rules) if h.date.ethiopian.month == eth_month]
