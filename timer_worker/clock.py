"""
Time-of-day arithmetic on a day-local clock.

All instants are epoch milliseconds; times of day are seconds since local midnight.
"""
from datetime import date, datetime, timedelta
from typing import Optional
import pytz

from .config import config


def local_timezone(tz: Optional[pytz.BaseTzInfo] = None) -> pytz.BaseTzInfo:
    """Return ``tz`` or the configured day-local zone."""
    return tz or pytz.timezone(config.TIMEZONE)


def _at(day: date, time_of_day: int, tz: pytz.BaseTzInfo) -> int:
    minutes, second = divmod(time_of_day, 60)
    hour, minute = divmod(minutes, 60)
    local = tz.localize(datetime(day.year, day.month, day.day, hour, minute, second))
    return int(local.timestamp()) * 1000


def occurrence(
    time_of_day: int,
    from_millis: int,
    forwards: bool,
    tz: Optional[pytz.BaseTzInfo] = None
) -> int:
    """
    Find the occurrence of ``time_of_day`` nearest to ``from_millis``.

    Starts on the local calendar day of ``from_millis``; if that candidate is on
    the wrong side of ``from_millis`` the day moves by one in the search direction.
    An exact hit is returned as is in both directions.
    """
    tz = local_timezone(tz)
    day = datetime.fromtimestamp(from_millis / 1000, tz).date()
    millis = _at(day, time_of_day, tz)
    if forwards and millis < from_millis:
        millis = _at(day + timedelta(days=1), time_of_day, tz)
    elif not forwards and millis > from_millis:
        millis = _at(day - timedelta(days=1), time_of_day, tz)
    return millis


def time_of_day(millis: int, tz: Optional[pytz.BaseTzInfo] = None) -> int:
    """Seconds since local midnight of the instant ``millis``."""
    local = datetime.fromtimestamp(millis / 1000, local_timezone(tz))
    return (local.hour * 60 + local.minute) * 60 + local.second
