"""
Calendar helpers shared by every statistics component.

All arithmetic happens on local calendar dates. Datetimes are anchored at
noon so day differences never straddle a midnight or DST boundary.
"""

import math
from datetime import date, datetime, timedelta
from typing import Iterator, List, Optional, Union

MONTH_NAMES: List[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_MONTH_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
_SECONDS_PER_DAY = 86_400

DateLike = Union[str, date]


class InvalidDateError(ValueError):
    """Raised when a completion key is not a valid YYYY-MM-DD date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid date key {value!r}, expected YYYY-MM-DD")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (12.5 -> 13, 84.5 -> 85)."""
    return math.floor(value + 0.5)


def resolve_today(today: Optional[date] = None) -> date:
    """Return the injected 'today', falling back to the system clock."""
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    return today


def format_date(value: date) -> str:
    return f"{value.year}-{value.month:02d}-{value.day:02d}"


def parse_date(value: DateLike) -> date:
    """Parse a YYYY-MM-DD key into a date. ``date`` values pass through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)

    parts = value.split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise InvalidDateError(value)
    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError as e:
        raise InvalidDateError(value) from e


def parse_date_at_noon(value: DateLike) -> datetime:
    day = parse_date(value)
    return datetime(day.year, day.month, day.day, 12, 0, 0)


def days_between(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """Whole days from ``start`` to ``end`` (negative when ``end`` is earlier)."""
    if not isinstance(start, datetime):
        start = parse_date_at_noon(start)
    if not isinstance(end, datetime):
        end = parse_date_at_noon(end)
    return round_half_up((end - start).total_seconds() / _SECONDS_PER_DAY)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month_index: int) -> int:
    """Length of a month. ``month_index`` is 0-based (0 = January)."""
    if month_index == 1 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month_index]


def month_dates(year: int, month_index: int) -> Iterator[date]:
    """Yield every calendar day of the month in order."""
    first = date(year, month_index + 1, 1)
    for offset in range(days_in_month(year, month_index)):
        yield first + timedelta(days=offset)
