"""Data models for the ranking engine."""

from .config import (
    DEFAULT_ALGORITHM,
    DEFAULT_SEARCH_FIELD,
    DEFAULT_SEARCH_LIMIT,
    MIN_QUERY_LENGTH,
    RankingQuery,
    SearchQuery,
)
from .scoring import SCORE_DECIMALS, RankedEntry, RankingResult, ScoringContext, SearchResult
from .user import UserRecord, ensure_records

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_SEARCH_FIELD",
    "DEFAULT_SEARCH_LIMIT",
    "MIN_QUERY_LENGTH",
    "RankedEntry",
    "RankingQuery",
    "RankingResult",
    "SCORE_DECIMALS",
    "ScoringContext",
    "SearchQuery",
    "SearchResult",
    "UserRecord",
    "ensure_records",
]
