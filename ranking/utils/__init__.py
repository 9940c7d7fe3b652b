"""Shared utilities: time arithmetic, timeframe windows, parameter parsing."""

from .params import parse_limit, parse_min_points
from .timestamps import MS_PER_DAY, MS_PER_HOUR, age_days, age_hours, age_ms, now_ms, time_ago
from .timeframes import TIMEFRAME_DURATIONS, timeframe_cutoff, timeframe_duration

__all__ = [
    "MS_PER_DAY",
    "MS_PER_HOUR",
    "TIMEFRAME_DURATIONS",
    "age_days",
    "age_hours",
    "age_ms",
    "now_ms",
    "parse_limit",
    "parse_min_points",
    "time_ago",
    "timeframe_cutoff",
    "timeframe_duration",
]
