"""
Built-in scoring strategies.

Every strategy is a pure function of (record, context) -> float where higher
ranks first. Age is measured against context.now, never the wall clock, so
one query scores all records at the same instant.
"""

import math

from ..models.scoring import ScoringContext
from ..models.user import UserRecord
from ..utils.timestamps import age_days, age_hours

HACKERNEWS_GRAVITY = 1.8
HACKERNEWS_AGE_OFFSET_HOURS = 2
SUBMISSION_WEIGHT = 2
REDDIT_TIME_DIVISOR = 45000


def hackernews_score(record: UserRecord, context: ScoringContext) -> float:
    """Gravity decay: (points + 2*submissions) / (ageHours + 2)^1.8."""
    hours = age_hours(record.created_at, context.now)
    base = record.points + record.submissions * SUBMISSION_WEIGHT
    return base / math.pow(hours + HACKERNEWS_AGE_OFFSET_HOURS, HACKERNEWS_GRAVITY)


def reddit_score(record: UserRecord, context: ScoringContext) -> float:
    """Reddit hotness: sign * log10(|points|) plus an age term."""
    points = record.points
    order = math.log10(max(abs(points), 1))
    sign = 1 if points > 0 else -1
    seconds = age_hours(record.created_at, context.now) * 3600
    return sign * order + seconds / REDDIT_TIME_DIVISOR


def velocity_score(record: UserRecord, context: ScoringContext) -> float:
    """Points per hour, boosted by submissions per hour."""
    hours = max(age_hours(record.created_at, context.now), 1)
    points_per_hour = record.points / hours
    submissions_per_hour = record.submissions / hours
    return points_per_hour * (1 + submissions_per_hour)


def newest_score(record: UserRecord, context: ScoringContext) -> float:
    # Negated so that descending order puts the newest first
    return -float(record.created_at or 0)


def top_score(record: UserRecord, context: ScoringContext) -> float:
    return float(record.points)


def active_score(record: UserRecord, context: ScoringContext) -> float:
    return float(record.submissions)


def efficient_score(record: UserRecord, context: ScoringContext) -> float:
    """Points per day since the account was created."""
    return record.points / max(age_days(record.created_at, context.now), 1)


def recent_score(record: UserRecord, context: ScoringContext) -> float:
    return float(record.effective_last_active or 0)


def simple_score(record: UserRecord, context: ScoringContext) -> float:
    """Points per hour without the submissions boost."""
    return record.points / max(age_hours(record.created_at, context.now), 1)
