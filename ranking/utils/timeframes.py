"""
Timeframe windows for ranking queries.

A timeframe names how far back createdAt may reach. Unrecognized names and
"all" mean no cutoff.
"""

from typing import Dict, Optional

from .timestamps import MS_PER_DAY, MS_PER_HOUR

TIMEFRAME_DURATIONS: Dict[str, Optional[int]] = {
    "1h": MS_PER_HOUR,
    "6h": 6 * MS_PER_HOUR,
    "12h": 12 * MS_PER_HOUR,
    "24h": 24 * MS_PER_HOUR,
    "7d": 7 * MS_PER_DAY,
    "30d": 30 * MS_PER_DAY,
    "today": MS_PER_DAY,
    "week": 7 * MS_PER_DAY,
    "month": 30 * MS_PER_DAY,
    "all": None,
}


def timeframe_duration(timeframe: Optional[str]) -> Optional[int]:
    """Window length in milliseconds, or None for no cutoff."""
    if not timeframe:
        return None
    return TIMEFRAME_DURATIONS.get(timeframe.strip().lower())


def timeframe_cutoff(timeframe: Optional[str], now: int) -> Optional[int]:
    """Earliest createdAt admitted by `timeframe`, or None when everything is admitted."""
    duration = timeframe_duration(timeframe)
    if duration is None:
        return None
    return now - duration
