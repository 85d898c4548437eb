from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def normalize_date(value: DateLike) -> date:
    """Strip time-of-day so comparisons happen at day granularity."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_date_in_range(value: DateLike, start: DateLike, end: Optional[DateLike] = None) -> bool:
    """Inclusive range test on normalized days; a missing end never closes the range."""
    day = normalize_date(value)
    if day < normalize_date(start):
        return False
    return end is None or day <= normalize_date(end)


def day_of_week(value: DateLike) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (normalize_date(value).weekday() + 1) % 7


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    day = normalize_date(start)
    last = normalize_date(end)
    while day <= last:
        yield day
        day += timedelta(days=1)
