"""
Scoring models: context shared by one query and the entries it produces.

Contains:
- ScoringContext: the single "now" every scoring function sees
- RankedEntry: one ranked user as emitted by the query pipeline
- RankingResult / SearchResult: pipeline and matcher outputs
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .user import UserRecord

SCORE_DECIMALS = 4


class ScoringContext(BaseModel):
    """Evaluation context for one query. `now` is epoch milliseconds."""

    model_config = ConfigDict(frozen=True)

    now: int


class RankedEntry(BaseModel):
    """A user with its rank and display score (rounded to SCORE_DECIMALS)."""

    model_config = ConfigDict(populate_by_name=True)

    rank: int
    id: str
    username: str
    points: int
    submissions: int
    score: float
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    last_active: Optional[int] = Field(default=None, alias="lastActive")


class RankingResult(BaseModel):
    """Output of the query pipeline."""

    algorithm: str
    timeframe: Optional[str] = None
    entries: List[RankedEntry]
    # Counts before truncation to the limit
    total_analyzed: int
    total_points: int


class SearchResult(BaseModel):
    """Output of the search matcher: ordered, limited matches."""

    query: str
    field: str
    matches: List[UserRecord]
    total_matches: int

    @property
    def count(self) -> int:
        return len(self.matches)
