"""Calendar helpers for month-based bookkeeping."""

import calendar
from datetime import date

from dateutil.relativedelta import relativedelta


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the month end."""
    return value + relativedelta(months=months)


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, moving days past the month end to the last day."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(max(day, 1), last_day))


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_key(year: int, month: int) -> str:
    """Return the ``YYYY-MM`` key for a month."""
    return f"{year:04d}-{month:02d}"


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return (year, month) moved by ``offset`` months."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


__all__ = [
    "add_months",
    "clamp_day",
    "days_in_month",
    "month_key",
    "shift_month",
]
