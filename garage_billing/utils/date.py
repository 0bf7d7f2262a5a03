"""
Date utility functions
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from garage_billing.core.config import settings

NANOS_PER_MILLI = 1_000_000

# en-IN short month names
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_datetime(timestamp: int, tz_name: Optional[str] = None) -> datetime:
    """
    Convert a nanosecond timestamp to an aware datetime

    Nanoseconds are truncated (toward zero) to whole milliseconds first.

    Args:
        timestamp: Nanoseconds since the Unix epoch
        tz_name: IANA zone, defaults to settings.DISPLAY_TIMEZONE

    Returns:
        datetime: Local time in the display zone
    """
    millis = abs(timestamp) // NANOS_PER_MILLI
    if timestamp < 0:
        millis = -millis
    moment = EPOCH + timedelta(milliseconds=millis)
    return moment.astimezone(ZoneInfo(tz_name or settings.DISPLAY_TIMEZONE))


def format_date(timestamp: int, tz_name: Optional[str] = None) -> str:
    """
    Format a timestamp as "18 Oct 2026, 02:30 pm"

    Presentation only; compare raw timestamps, never these strings.
    """
    local = to_datetime(timestamp, tz_name)
    hour = local.hour % 12 or 12
    period = "am" if local.hour < 12 else "pm"
    return (
        f"{local.day:02d} {MONTHS[local.month - 1]} {local.year}, "
        f"{hour:02d}:{local.minute:02d} {period}"
    )


def format_short_date(timestamp: int, tz_name: Optional[str] = None) -> str:
    """Format a timestamp as "18/10/2026", day and month unpadded ("6/1/2026")"""
    local = to_datetime(timestamp, tz_name)
    return f"{local.day}/{local.month}/{local.year}"
