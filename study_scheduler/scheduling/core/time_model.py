"""
Conversions between "HH:MM" wall-clock strings and minutes since midnight.
"""

from typing import Optional
from .constants import MINUTES_PER_DAY


def _looks_like_time(value) -> bool:
    return isinstance(value, str) and ":" in value


def to_minutes(value) -> int:
    """
    Convert "HH:MM" to minutes since midnight.

    Malformed input (None, no colon, non-numeric parts) yields 0 instead of
    raising, so one bad entry degrades a day rather than aborting the week.
    """
    if not _looks_like_time(value):
        return 0
    hours, _, minutes = value.partition(":")
    try:
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return 0


def minutes_to_time_str(minutes: int) -> str:
    minutes = int(minutes) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def duration_minutes(start, end) -> Optional[int]:
    """
    Minutes from start to end, wrapping past midnight when end <= start.
    Returns None when either side is not a time string.
    """
    if not _looks_like_time(start) or not _looks_like_time(end):
        return None

    start_minutes = to_minutes(start)
    end_minutes = to_minutes(end)

    if end_minutes <= start_minutes:
        end_minutes += MINUTES_PER_DAY

    duration = end_minutes - start_minutes
    if duration < 0:
        return None
    return duration


def format_duration(start, end) -> str:
    """Human readable duration such as "1h 30m"; "N/A" for unusable input."""
    duration = duration_minutes(start, end)
    if duration is None:
        return "N/A"

    hours, minutes = divmod(duration, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"
