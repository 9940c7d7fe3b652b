"""
Record filters applied before scoring or matching.

Filters: active flag, timeframe cutoff on createdAt, createdAt presence for
age-based algorithms, minimum points. A record failing any filter is simply
left out; none of them raise.
"""

from typing import Iterable, List, Optional

from ..models.user import UserRecord


def is_active(record: UserRecord) -> bool:
    """Only an explicit isActive=false deactivates a record."""
    return record.is_active is not False


def within_cutoff(record: UserRecord, cutoff: Optional[int]) -> bool:
    """True if there is no cutoff, or createdAt exists and is at or after it."""
    if cutoff is None:
        return True
    return record.created_at is not None and record.created_at >= cutoff


def meets_min_points(record: UserRecord, min_points: Optional[int]) -> bool:
    if min_points is None:
        return True
    return record.points >= min_points


def filter_records(
    records: Iterable[UserRecord],
    cutoff: Optional[int] = None,
    min_points: Optional[int] = None,
    require_created_at: bool = False,
) -> List[UserRecord]:
    """Return records passing every filter, in their original order."""
    eligible = []
    for record in records:
        if not is_active(record):
            continue
        if not within_cutoff(record, cutoff):
            continue
        if require_created_at and record.created_at is None:
            continue
        if not meets_min_points(record, min_points):
            continue
        eligible.append(record)
    return eligible
