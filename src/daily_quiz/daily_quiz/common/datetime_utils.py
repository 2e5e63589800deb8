from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class DayWindow:
    """Half-open interval [start, end) covering one calendar day."""

    start: datetime
    end: datetime

    @property
    def day(self) -> date:
        return self.start.date()

    def contains(self, value: datetime) -> bool:
        value = _as_aware(value, self.start.tzinfo)
        return self.start <= value < self.end


def load_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValidationError(f"Unknown timezone: {name!r}")


def _as_aware(value: datetime, tz) -> datetime:
    # Naive datetimes are wall-clock time in the configured zone.
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def to_local_date(value: DateLike, tz) -> date:
    """Calendar day of ``value`` in ``tz``."""
    if isinstance(value, datetime):
        return _as_aware(value, tz).date()
    return value


def day_window(value: Optional[DateLike] = None, *, tz) -> DayWindow:
    """Return the day window that contains ``value`` (default: now).

    ``end`` is midnight of the next calendar day, so days around DST changes
    are not exactly 24 hours long.
    """

    if value is None:
        value = now_local(tz)
    day = to_local_date(value, tz)
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return DayWindow(start=start, end=end)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")


def now_local(tz) -> datetime:
    """Current time in ``tz``.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(tz)
