"""Partial date grammar for date search parameters.

Accepted forms (single-digit month/day allowed):
    - `yyyy`
    - `yyyy-MM`
    - `yyyy-MM-dd`
    - `MM-dd` (month-day only, e.g. for seasonal queries)

A partial date denotes the inclusive calendar interval it covers: `2001` is 2001-01-01..2001-12-31,
`2001-02` is 2001-02-01..2001-02-28.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date

_YEARFUL_RE = re.compile(
    r"^(?P<year>\d{4})(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?$",
    flags=re.ASCII,
)
_MONTH_DAY_RE = re.compile(r"^(?P<month>\d{1,2})-(?P<day>\d{1,2})$", flags=re.ASCII)

# Leap year used to check month-day values, so that 02-29 is accepted.
_LEAP_YEAR = 2000


@dataclass(frozen=True)
class PartialDate:
    """A date with year, month or day precision, or a month-day without year."""

    year: int | None
    month: int | None = None
    day: int | None = None

    def bounds(self) -> tuple[date, date]:
        """The inclusive `(first_day, last_day)` interval covered by this partial date.

        Raises:
            ValueError: For month-day values, which do not denote a fixed interval.
        """

        if self.year is None:
            raise ValueError("month-day values have no calendar bounds")
        if self.month is None:
            return date(self.year, 1, 1), date(self.year, 12, 31)
        if self.day is None:
            last_day = calendar.monthrange(self.year, self.month)[1]
            return date(self.year, self.month, 1), date(self.year, self.month, last_day)
        d = date(self.year, self.month, self.day)
        return d, d


def parse_partial_date(value: str) -> PartialDate:
    """Parse a partial date string.

    Raises:
        ValueError: If the value matches none of the accepted forms or is not a calendar date.
    """

    text = (value or "").strip()

    match = _YEARFUL_RE.fullmatch(text)
    if match:
        year = int(match.group("year"))
        month = int(match.group("month")) if match.group("month") else None
        day = int(match.group("day")) if match.group("day") else None
        if month is not None:
            # Raises ValueError for month 0/13 or a day outside the month.
            date(year, month, day or 1)
        return PartialDate(year=year, month=month, day=day)

    match = _MONTH_DAY_RE.fullmatch(text)
    if match:
        month = int(match.group("month"))
        day = int(match.group("day"))
        date(_LEAP_YEAR, month, day)
        return PartialDate(year=None, month=month, day=day)

    raise ValueError(f"not a partial date: {value!r}")


def is_partial_date(value: str) -> bool:
    """Whether the value is a valid partial date."""

    try:
        parse_partial_date(value)
    except ValueError:
        return False
    return True
