"""
Search matcher: case-insensitive substring search over one record field.

Relevance tiers, best first: exact match, prefix match, any other substring
match. Within a tier, the most recently active record comes first; records
that tie on that too keep their snapshot order.
"""

from typing import Any, Iterable, List, Tuple

from ..errors import ValidationError
from ..models.config import MIN_QUERY_LENGTH, SearchQuery
from ..models.scoring import SearchResult
from ..models.user import UserRecord, ensure_records
from .filters import is_active

EXACT_TIER = 0
PREFIX_TIER = 1
SUBSTRING_TIER = 2


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).lower()


def validate_query(query: Any) -> str:
    """Lowercased search term; raises ValidationError when shorter than MIN_QUERY_LENGTH."""
    if not isinstance(query, str) or len(query.strip()) < MIN_QUERY_LENGTH:
        raise ValidationError(f"Search query must be at least {MIN_QUERY_LENGTH} characters")
    return query.lower()


def relevance_tier(value: str, term: str) -> int:
    if value == term:
        return EXACT_TIER
    if value.startswith(term):
        return PREFIX_TIER
    return SUBSTRING_TIER


def _sort_key(match: Tuple[int, UserRecord]) -> Tuple[int, int]:
    tier, record = match
    return tier, -(record.effective_last_active or 0)


def search(records: Iterable, query: SearchQuery) -> SearchResult:
    """Match records whose `query.field` contains the query text, ordered by relevance."""
    term = validate_query(query.query)
    matches: List[Tuple[int, UserRecord]] = []
    for record in ensure_records(records):
        if not is_active(record):
            continue
        value = record.get_field(query.field)
        if not value:
            continue
        text = _as_text(value)
        if term in text:
            matches.append((relevance_tier(text, term), record))
    matches.sort(key=_sort_key)
    return SearchResult(
        query=query.query,
        field=query.field,
        matches=[record for _, record in matches[: query.limit]],
        total_matches=len(matches),
    )
