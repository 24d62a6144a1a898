"""Utility helpers for building the trailing windows used for trend lookups."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Tuple


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def as_tuple(self) -> Tuple[date, date]:
        """Return the range as a tuple of ``(start, end)``."""
        return (self.start, self.end)

    def as_iso(self) -> Tuple[str, str]:
        """Return the range as ``YYYY-MM-DD`` strings, as the rate API expects."""
        return (self.start.isoformat(), self.end.isoformat())


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def trailing_window(days: int, *, today: str | date | None = None) -> DateRange:
    """Return the window ending on ``today`` and starting ``days`` earlier.

    The end date is always the current date unless ``today`` is supplied.
    """

    if days < 0:
        raise ValueError("days must not be negative")

    end_date = parse_date(today) if today is not None else date.today()
    return DateRange(start=end_date - timedelta(days=days), end=end_date)
