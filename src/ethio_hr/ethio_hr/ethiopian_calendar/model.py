from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import HolidayCategory

MONTH_NAMES = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahesas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Ginbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagume",
)

# Indexed Sunday-first.
DAY_NAMES = ("Ehud", "Segno", "Maksegno", "Rob", "Hamus", "Arb", "Kidame")


@dataclass(frozen=True)
class EthiopianDate:
    """Day in the Ethiopian calendar (month 13 is the short month Pagume)."""

    year: int
    month: int
    day: int
    month_name: str
    day_name: str

    def format(self) -> str:
        return f"{self.day} {self.month_name} {self.year} ({self.day_name})"

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "monthName": self.month_name,
            "dayName": self.day_name,
        }


@dataclass(frozen=True)
class CalendarDate:
    """One day seen in both calendars. The Gregorian date is the identity."""

    gregorian: date
    ethiopian: EthiopianDate

    def iso(self) -> str:
        return self.gregorian.isoformat()


@dataclass(frozen=True)
class Holiday:
    date: CalendarDate
    name: str
    localized_name: str
    category: HolidayCategory
    is_working_day: bool = False

    @property
    def gregorian(self) -> date:
        return self.date.gregorian

    def to_dict(self) -> dict:
        return {
            "date": self.date.iso(),
            "ethiopian": self.date.ethiopian.to_dict(),
            "name": self.name,
            "nameAmharic": self.localized_name,
            "type": self.category.value,
            "isWorkingDay": self.is_working_day,
        }
