"""
Date arithmetic for guideline evaluation.

Parses the ``DD/MM/YYYY`` answers collected for a patient and derives the
calendar-aware elapsed times (age at onset, time since diagnosis, current age)
that the guideline threshold ladders compare against.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

# Patterns
_DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")

_DAYS_PER_YEAR = 365.25


@dataclass(frozen=True)
class DateDifference:
    """
    Elapsed calendar time between two dates.

    Attributes:
        years: Whole years elapsed.
        days: Days since the most recent anniversary of the earlier date.
    """

    years: int
    days: int

    def at_most(self, years: int) -> bool:
        """True if the elapsed time is no more than exactly ``years`` years."""
        return self.years < years or (self.years == years and self.days == 0)

    def exceeds(self, years: int) -> bool:
        """True if the elapsed time is at least one day past ``years`` years."""
        return not self.at_most(years)


def parse_date(text: str) -> Optional[date]:
    """
    Parse a strict ``DD/MM/YYYY`` string.

    Returns None for any other shape and for dates that do not exist
    (e.g. 31/02/2023), never raises.
    """
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        return None
    day, month, year = (int(part) for part in text.split("/"))
    # date() refuses out-of-range fields such as 31/02
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def _anniversary(start: date, year: int) -> date:
    # 29 February falls on 1 March in non-leap years
    try:
        return start.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def years_days_diff(first: date, second: date) -> DateDifference:
    """
    Whole years plus remaining days between two dates, in either order.

    >>> years_days_diff(date(2020, 1, 1), date(2024, 1, 2))
    DateDifference(years=4, days=1)
    """
    if first > second:
        first, second = second, first

    years = second.year - first.year
    if (second.month, second.day) < (first.month, first.day):
        years -= 1

    anniversary = _anniversary(first, first.year + years)
    return DateDifference(years=years, days=(second - anniversary).days)


def elapsed_years(start: date, end: date) -> float:
    """Elapsed time in fractional years (365.25-day years); negative if end precedes start."""
    return (end - start).days / _DAYS_PER_YEAR
