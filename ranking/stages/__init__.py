"""Pipeline stages: record filters, ranking pipeline, search matcher."""

from .filters import filter_records, is_active
from .pipeline import build_ranked_entry, rank
from .search import search, validate_query

__all__ = [
    "build_ranked_entry",
    "filter_records",
    "is_active",
    "rank",
    "search",
    "validate_query",
]
