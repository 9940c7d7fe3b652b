"""Scoring strategy registry: maps algorithm names to scoring functions."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..errors import InvalidAlgorithm
from ..models.scoring import ScoringContext
from ..models.user import UserRecord

logger = logging.getLogger(__name__)

# Scoring function signature:
#   fn(record: UserRecord, context: ScoringContext) -> float   (higher ranks first)
ScoreFn = Callable[[UserRecord, ScoringContext], float]

DEFAULT_DESCRIPTION = "Custom sorting algorithm"


@dataclass(frozen=True)
class ScoringStrategy:
    """A registered algorithm."""

    name: str
    score: ScoreFn
    description: str = DEFAULT_DESCRIPTION
    # Records without createdAt are filtered out before scoring when True
    requires_created_at: bool = True


class ScoringRegistry:
    """Registry of named scoring strategies.

    Usage:
        registry = ScoringRegistry()
        registry.register("top", top_score, "Highest total points", requires_created_at=False)
        registry.freeze()

        strategy = registry.get("top")
        strategy.score(record, ScoringContext(now=now))
    """

    def __init__(self) -> None:
        self._strategies: Dict[str, ScoringStrategy] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        fn: ScoreFn,
        description: str = DEFAULT_DESCRIPTION,
        requires_created_at: bool = True,
    ) -> None:
        """Register a scoring function by name. Re-registering a name replaces it."""
        if self._frozen:
            raise RuntimeError(f"Scoring registry is frozen; cannot register {name!r}")
        if name in self._strategies:
            logger.info("Replacing scoring strategy %r", name)
        self._strategies[name] = ScoringStrategy(
            name=name,
            score=fn,
            description=description,
            requires_created_at=requires_created_at,
        )

    def freeze(self) -> "ScoringRegistry":
        """Reject further registrations. Returns self."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: Optional[str]) -> ScoringStrategy:
        """Strategy for `name`; raises InvalidAlgorithm for unknown names."""
        strategy = self._strategies.get(name) if name else None
        if strategy is None:
            raise InvalidAlgorithm(str(name), self.available())
        return strategy

    def available(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._strategies)

    def descriptions(self) -> Dict[str, str]:
        return {name: s.description for name, s in self._strategies.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def score(self, name: str, record: UserRecord, context: ScoringContext) -> float:
        """Score one record with the named strategy."""
        return self.get(name).score(record, context)


# ── Global default registry ──

_default_registry: Optional[ScoringRegistry] = None


def get_default_registry() -> ScoringRegistry:
    """Get the global default registry, creating, populating and freezing it on first call."""
    global _default_registry
    if _default_registry is None:
        registry = ScoringRegistry()
        register_builtins(registry)
        _default_registry = registry.freeze()
    return _default_registry


def register_builtins(registry: ScoringRegistry) -> None:
    """Register all built-in strategies."""
    from .strategies import (
        active_score,
        efficient_score,
        hackernews_score,
        newest_score,
        recent_score,
        reddit_score,
        simple_score,
        top_score,
        velocity_score,
    )

    # Time-decayed
    registry.register(
        "hackernews", hackernews_score, "Hacker News-style ranking (points + submissions over time)"
    )
    registry.register(
        "trending", hackernews_score, "Hacker News-style ranking (points + submissions over time)"
    )
    registry.register("reddit", reddit_score, "Reddit-style hotness (log points plus recency)")
    registry.register("velocity", velocity_score, "Points per hour, boosted by submission rate")
    registry.register("efficient", efficient_score, "Points per day (efficiency)")
    registry.register("simple", simple_score, "Points per hour")

    # Timestamp ordering
    registry.register("new", newest_score, "Most recently created accounts")
    registry.register("recent", recent_score, "Most recently active users")

    # Raw counters
    registry.register("top", top_score, "Highest total points", requires_created_at=False)
    registry.register("active", active_score, "Most submissions/activity", requires_created_at=False)
