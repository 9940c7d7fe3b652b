"""
Query parameters for the ranking pipeline and the search matcher.

Values arrive here already defaulted; use ranking.utils.params to turn raw
request strings into them.
"""

from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_ALGORITHM = "hackernews"
DEFAULT_SEARCH_FIELD = "username"
DEFAULT_SEARCH_LIMIT = 20
MIN_QUERY_LENGTH = 2


class RankingQuery(BaseModel):
    """Parameters for rank()."""

    algorithm: str = DEFAULT_ALGORITHM
    # None or an unrecognized value means no cutoff
    timeframe: Optional[str] = None
    min_points: Optional[int] = None
    limit: int = Field(default=10, gt=0)


class SearchQuery(BaseModel):
    """Parameters for search()."""

    query: Optional[str] = None
    field: str = DEFAULT_SEARCH_FIELD
    limit: int = Field(default=DEFAULT_SEARCH_LIMIT, gt=0)
