"""Request and response models for ranking and search endpoints."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ranking.models import DEFAULT_SEARCH_FIELD, DEFAULT_SEARCH_LIMIT


class SearchRequest(BaseModel):
    """Search body. `limit` is parsed leniently: malformed values fall back to the default."""

    query: Optional[str] = None
    field: str = DEFAULT_SEARCH_FIELD
    limit: Any = DEFAULT_SEARCH_LIMIT


class RankedItem(BaseModel):
    """One ranked user as returned by the ranking endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    rank: int
    id: str
    username: str
    points: int
    submissions: int
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    last_active: Optional[int] = Field(default=None, alias="lastActive")


class TrendingItem(RankedItem):
    trend_score: float = Field(alias="trendScore")


class ScoredItem(RankedItem):
    score: float


class SortedItem(ScoredItem):
    """Scored item with relative join/activity times ("3 hours ago")."""

    joined: str
    active: str


class TrendingResponse(BaseModel):
    success: bool = True
    timeframe: str
    algorithm: str
    total: int
    trending: List[TrendingItem]


class LeaderboardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    sort_by: str = Field(alias="sortBy")
    total: int
    leaderboard: List[ScoredItem]


class SortStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(alias="totalUsers")
    average_points: int = Field(alias="averagePoints")
    total_points: int = Field(alias="totalPoints")
    time_filter: str = Field(alias="timeFilter")


class SortResponse(BaseModel):
    """Response for GET /api/sort."""

    success: bool = True
    algorithm: str
    description: str
    limit: int
    timeframe: str
    stats: SortStats
    users: List[SortedItem]


class SearchItem(BaseModel):
    """A search match. The searched field is echoed under its own key."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    username: Optional[str] = None
    points: int
    submissions: int
    last_active: Optional[int] = Field(default=None, alias="lastActive")
    created_at: Optional[int] = Field(default=None, alias="createdAt")


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    query: str
    field: str
    count: int
    total_matches: int = Field(alias="totalMatches")
    results: List[SearchItem]
