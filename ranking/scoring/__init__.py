"""Scoring strategies and the registry that names them."""

from .registry import (
    ScoreFn,
    ScoringRegistry,
    ScoringStrategy,
    get_default_registry,
    register_builtins,
)

__all__ = [
    "ScoreFn",
    "ScoringRegistry",
    "ScoringStrategy",
    "get_default_registry",
    "register_builtins",
]
