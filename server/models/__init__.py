"""Pydantic request and response models for the API."""

from .rankings import (
    LeaderboardResponse,
    RankedItem,
    ScoredItem,
    SearchItem,
    SearchRequest,
    SearchResponse,
    SortedItem,
    SortResponse,
    SortStats,
    TrendingItem,
    TrendingResponse,
)
from .users import CheckDuplicateRequest, CreateUserRequest, TokenRequest

__all__ = [
    "CheckDuplicateRequest",
    "CreateUserRequest",
    "LeaderboardResponse",
    "RankedItem",
    "ScoredItem",
    "SearchItem",
    "SearchRequest",
    "SearchResponse",
    "SortStats",
    "SortResponse",
    "SortedItem",
    "TokenRequest",
    "TrendingItem",
    "TrendingResponse",
]
