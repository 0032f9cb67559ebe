"""Civil date parsing and calendar-month arithmetic"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import List

from household_billing.domain.exceptions import InvalidDateFormat

_CIVIL_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_YEAR_MONTH_RE = re.compile(r"([0-9]{4})-([0-9]{2})")


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month, ordered chronologically"""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @property
    def index(self) -> int:
        """Absolute month number: year * 12 + (month - 1)"""
        return self.year * 12 + (self.month - 1)

    @classmethod
    def from_index(cls, index: int) -> "YearMonth":
        year, month0 = divmod(index, 12)
        return cls(year, month0 + 1)

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse "YYYY-MM" """
        match = _YEAR_MONTH_RE.fullmatch(value) if isinstance(value, str) else None
        if not match:
            raise ValueError(f"Expected YYYY-MM, got {value!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def shift(self, months: int) -> "YearMonth":
        return YearMonth.from_index(self.index + months)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def parse_civil_date(value) -> date:
    """
    Read a purchase date as a plain civil date.

    Accepts a ``date`` (but not a ``datetime``) or a string of the exact form
    YYYY-MM-DD. The string is split into its parts directly so no timezone
    conversion can shift the day.

    Raises:
        InvalidDateFormat: for any other value, or an impossible calendar date
    """
    if isinstance(value, datetime):
        raise InvalidDateFormat(f"Expected a civil date without time, got datetime {value!r}")
    if isinstance(value, date):
        return value

    match = _CIVIL_DATE_RE.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise InvalidDateFormat(f"Expected YYYY-MM-DD, got {value!r}")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateFormat(f"Invalid calendar date {value!r}: {e}") from e


def month_range(start: YearMonth, count: int) -> List[YearMonth]:
    """Generate `count` consecutive months beginning at `start`"""
    return [start.shift(i) for i in range(count)]


def default_horizon(anchor: date, months: int = 24) -> List[YearMonth]:
    """Dashboard horizon: `months` consecutive months from January of the anchor's year"""
    return month_range(YearMonth(anchor.year, 1), months)
