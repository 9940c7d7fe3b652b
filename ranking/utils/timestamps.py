"""
Time helpers: epoch-millisecond arithmetic shared by scoring and display.
"""

import time
from typing import Optional

MS_PER_SECOND = 1000
MS_PER_HOUR = 60 * 60 * MS_PER_SECOND
MS_PER_DAY = 24 * MS_PER_HOUR

# Largest unit first; month is 30 days, year is 365
_TIME_AGO_UNITS = (
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * MS_PER_SECOND)


def age_ms(timestamp: Optional[int], now: int) -> int:
    """Milliseconds elapsed since `timestamp`, never negative. Missing timestamps have age 0."""
    if not timestamp:
        return 0
    return max(now - timestamp, 0)


def age_hours(timestamp: Optional[int], now: int) -> float:
    return age_ms(timestamp, now) / MS_PER_HOUR


def age_days(timestamp: Optional[int], now: int) -> float:
    return age_ms(timestamp, now) / MS_PER_DAY


def time_ago(timestamp: Optional[int], now: int) -> str:
    """Relative description such as "3 hours ago" or "just now"."""
    if not timestamp:
        return "unknown"
    seconds = (now - timestamp) // MS_PER_SECOND
    for unit, unit_seconds in _TIME_AGO_UNITS:
        interval = seconds // unit_seconds
        if interval >= 1:
            return f"{interval} {unit}{'' if interval == 1 else 's'} ago"
    return "just now"
