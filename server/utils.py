"""Response assembly: ranked entries, search matches, and the JSON envelopes around them."""

from typing import Any, Dict, Iterable, List, Optional

from ranking import RankedEntry, SearchResult, UserRecord
from ranking.utils import time_ago

# Endpoint defaults
TRENDING_DEFAULT_LIMIT = 10
TRENDING_DEFAULT_TIMEFRAME = "24h"
LEADERBOARD_DEFAULT_LIMIT = 20
SORT_DEFAULT_LIMIT = 20
SORT_DEFAULT_TIMEFRAME = "all"

UNKNOWN_USERNAME = "Unknown"


def error_envelope(error: str, message: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """`{success: false, error, message?, ...}`."""
    body: Dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    body.update(extra)
    return body


def to_ranked_item(entry: RankedEntry, score_key: str = "score") -> Dict[str, Any]:
    """RankedEntry as a response item, with the score under `score_key`."""
    return {
        "rank": entry.rank,
        "id": entry.id,
        "username": entry.username,
        "points": entry.points,
        "submissions": entry.submissions,
        score_key: entry.score,
        "createdAt": entry.created_at,
        "lastActive": entry.last_active,
    }


def to_sorted_item(entry: RankedEntry, now: int) -> Dict[str, Any]:
    """Ranked item with relative join/activity times."""
    item = to_ranked_item(entry)
    item["joined"] = time_ago(entry.created_at, now)
    item["active"] = time_ago(entry.last_active, now)
    return item


def to_search_item(record: UserRecord, field: str) -> Dict[str, Any]:
    item = {
        "id": record.id,
        "username": record.username or UNKNOWN_USERNAME,
        "points": record.points,
        "submissions": record.submissions,
    }
    item[field] = record.get_field(field)
    item["lastActive"] = record.effective_last_active
    item["createdAt"] = record.created_at
    return item


def ranking_envelope(
    list_name: str,
    entries: Iterable[RankedEntry],
    score_key: str = "score",
    **header: Any,
) -> Dict[str, Any]:
    """`{success: true, **header, <list_name>: [...]}`."""
    body: Dict[str, Any] = {"success": True}
    body.update(header)
    body[list_name] = [to_ranked_item(e, score_key) for e in entries]
    return body


def search_envelope(result: SearchResult) -> Dict[str, Any]:
    results: List[Dict[str, Any]] = [to_search_item(r, result.field) for r in result.matches]
    return {
        "success": True,
        "query": result.query,
        "field": result.field,
        "count": len(results),
        "totalMatches": result.total_matches,
        "results": results,
    }
