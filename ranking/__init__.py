"""
User ranking engine.

Single entry point for the ranking package:
- models/: UserRecord, RankedEntry, ScoringContext, query parameters
- scoring/: named scoring strategies and their registry
- stages/: filters, the ranking pipeline, the search matcher
"""

from .errors import InvalidAlgorithm, RankingError, StoreUnavailable, ValidationError
from .models import (
    RankedEntry,
    RankingQuery,
    RankingResult,
    ScoringContext,
    SearchQuery,
    SearchResult,
    UserRecord,
    ensure_records,
)
from .scoring import ScoringRegistry, get_default_registry
from .stages import rank, search

__all__ = [
    "InvalidAlgorithm",
    "RankedEntry",
    "RankingError",
    "RankingQuery",
    "RankingResult",
    "ScoringContext",
    "ScoringRegistry",
    "SearchQuery",
    "SearchResult",
    "StoreUnavailable",
    "UserRecord",
    "ValidationError",
    "ensure_records",
    "get_default_registry",
    "rank",
    "search",
]
