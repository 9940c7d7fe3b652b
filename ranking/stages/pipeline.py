"""
Query pipeline: filter -> score -> sort -> limit -> rank.

The public entry point is rank(). Scores are kept at full precision for
sorting and rounded only when the RankedEntry is built.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from ..models.config import RankingQuery
from ..models.scoring import SCORE_DECIMALS, RankedEntry, RankingResult, ScoringContext
from ..models.user import UserRecord, ensure_records
from ..scoring.registry import ScoringRegistry, ScoringStrategy, get_default_registry
from ..utils.timeframes import timeframe_cutoff
from ..utils.timestamps import now_ms
from .filters import filter_records

logger = logging.getLogger(__name__)

ANONYMOUS_USERNAME = "Anonymous"


def _score_all(
    records: List[UserRecord],
    strategy: ScoringStrategy,
    context: ScoringContext,
) -> List[Tuple[UserRecord, float]]:
    """Score every record and sort descending. list.sort is stable, so equal scores keep input order."""
    scored = [(record, float(strategy.score(record, context))) for record in records]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored


def build_ranked_entry(rank: int, record: UserRecord, score: float) -> RankedEntry:
    """RankedEntry for one scored record, with the display score rounded."""
    return RankedEntry(
        rank=rank,
        id=record.id,
        username=record.username or ANONYMOUS_USERNAME,
        points=record.points,
        submissions=record.submissions,
        score=round(score, SCORE_DECIMALS),
        created_at=record.created_at,
        last_active=record.effective_last_active,
    )


def rank(
    records: Iterable,
    query: RankingQuery,
    now: Optional[int] = None,
    registry: Optional[ScoringRegistry] = None,
) -> RankingResult:
    """
    Rank records with the algorithm named in `query`.

    `records` may be UserRecords or a raw store snapshot. `now` (epoch ms) is
    used for every age computation in this call; it defaults to the wall
    clock. Unknown algorithms raise InvalidAlgorithm before any work is done.
    """
    registry = registry or get_default_registry()
    strategy = registry.get(query.algorithm)
    now = now_ms() if now is None else now
    context = ScoringContext(now=now)

    # 1) Filter: active, timeframe, createdAt presence, min points
    eligible = filter_records(
        ensure_records(records),
        cutoff=timeframe_cutoff(query.timeframe, now),
        min_points=query.min_points,
        require_created_at=strategy.requires_created_at,
    )

    # 2) Score at full precision and sort
    scored = _score_all(eligible, strategy, context)

    # 3) Truncate and assign 1-based ranks
    entries = [
        build_ranked_entry(position, record, score)
        for position, (record, score) in enumerate(scored[: query.limit], start=1)
    ]
    logger.debug(
        "rank algorithm=%s timeframe=%s analyzed=%d returned=%d",
        strategy.name, query.timeframe, len(scored), len(entries),
    )
    return RankingResult(
        algorithm=strategy.name,
        timeframe=query.timeframe,
        entries=entries,
        total_analyzed=len(scored),
        total_points=sum(record.points for record in eligible),
    )
