"""Ranking and search endpoints: trending, leaderboard, sort, search."""

import math
from typing import Optional

from fastapi import APIRouter, Query

from ranking import RankingQuery, SearchQuery, rank, search
from ranking.models import DEFAULT_ALGORITHM, DEFAULT_SEARCH_FIELD, DEFAULT_SEARCH_LIMIT
from ranking.stages import validate_query
from ranking.utils import parse_limit, parse_min_points

from ..models import (
    LeaderboardResponse,
    SearchRequest,
    SearchResponse,
    SortResponse,
    TrendingResponse,
)
from ..state import get_state
from ..utils import (
    LEADERBOARD_DEFAULT_LIMIT,
    SORT_DEFAULT_LIMIT,
    SORT_DEFAULT_TIMEFRAME,
    TRENDING_DEFAULT_LIMIT,
    TRENDING_DEFAULT_TIMEFRAME,
    ranking_envelope,
    search_envelope,
    to_sorted_item,
)

router = APIRouter()

# Leaderboard sortBy -> scoring algorithm; anything else sorts by points
LEADERBOARD_SORTS = {
    "points": "top",
    "submissions": "active",
    "recent": "new",
}
DEFAULT_LEADERBOARD_SORT = "points"


@router.get("/trending", response_model=TrendingResponse)
def trending(
    limit: Optional[str] = Query(None),
    timeframe: str = Query(TRENDING_DEFAULT_TIMEFRAME),
    algorithm: str = Query(DEFAULT_ALGORITHM),
):
    """Users created within `timeframe`, ranked by a time-decayed algorithm."""
    state = get_state()
    state.registry.get(algorithm)
    query = RankingQuery(
        algorithm=algorithm,
        timeframe=timeframe,
        limit=parse_limit(limit, TRENDING_DEFAULT_LIMIT),
    )
    result = rank(state.load_records(), query, now=state.now(), registry=state.registry)
    return ranking_envelope(
        "trending",
        result.entries,
        score_key="trendScore",
        timeframe=timeframe,
        algorithm=algorithm,
        total=result.total_analyzed,
    )


@router.get("/leaderboard", response_model=LeaderboardResponse)
def leaderboard(
    limit: Optional[str] = Query(None),
    sort_by: str = Query(DEFAULT_LEADERBOARD_SORT, alias="sortBy"),
):
    """All-time leaderboard by points, submissions, or join date."""
    state = get_state()
    algorithm = LEADERBOARD_SORTS.get(sort_by, LEADERBOARD_SORTS[DEFAULT_LEADERBOARD_SORT])
    query = RankingQuery(algorithm=algorithm, limit=parse_limit(limit, LEADERBOARD_DEFAULT_LIMIT))
    result = rank(state.load_records(), query, now=state.now(), registry=state.registry)
    return ranking_envelope(
        "leaderboard",
        result.entries,
        sortBy=sort_by,
        total=result.total_analyzed,
    )


@router.get("/sort", response_model=SortResponse)
def sort_users(
    algorithm: str = Query(DEFAULT_ALGORITHM),
    limit: Optional[str] = Query(None),
    timeframe: str = Query(SORT_DEFAULT_TIMEFRAME),
    min_points: Optional[str] = Query(None, alias="minPoints"),
):
    """Rank with any registered algorithm, with optional timeframe and points floor."""
    state = get_state()
    strategy = state.registry.get(algorithm)
    limit_num = parse_limit(limit, SORT_DEFAULT_LIMIT)
    query = RankingQuery(
        algorithm=algorithm,
        timeframe=timeframe,
        min_points=parse_min_points(min_points),
        limit=limit_num,
    )
    now = state.now()
    result = rank(state.load_records(), query, now=now, registry=state.registry)
    total = result.total_analyzed
    return {
        "success": True,
        "algorithm": algorithm,
        "description": strategy.description,
        "limit": limit_num,
        "timeframe": timeframe,
        "stats": {
            "totalUsers": total,
            "averagePoints": math.floor(result.total_points / total + 0.5) if total else 0,
            "totalPoints": result.total_points,
            "timeFilter": timeframe,
        },
        "users": [to_sorted_item(entry, now) for entry in result.entries],
    }


@router.post("/search", response_model=SearchResponse)
def search_users(request: SearchRequest):
    """Case-insensitive substring search on one field (username by default)."""
    state = get_state()
    query = SearchQuery(
        query=request.query,
        field=request.field or DEFAULT_SEARCH_FIELD,
        limit=parse_limit(request.limit, DEFAULT_SEARCH_LIMIT),
    )
    validate_query(query.query)
    result = search(state.load_records(), query)
    return search_envelope(result)
