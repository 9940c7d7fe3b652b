"""Tests for the scoring strategies and the registry."""

import math

import pytest

from ranking import InvalidAlgorithm, ScoringContext, ScoringRegistry, UserRecord, get_default_registry
from ranking.scoring import strategies

from .conftest import DAY, HOUR, NOW

CTX = ScoringContext(now=NOW)


def _user(**fields) -> UserRecord:
    data = {"id": "u1"}
    data.update(fields)
    return UserRecord.model_validate(data)


class TestStrategies:
    def test_hackernews_gravity_decay(self):
        user = _user(points=5, submissions=1, createdAt=NOW - HOUR)
        assert strategies.hackernews_score(user, CTX) == pytest.approx(7 / 3 ** 1.8)

    def test_hackernews_brand_new_account(self):
        user = _user(points=0, submissions=0, createdAt=NOW)
        assert strategies.hackernews_score(user, CTX) == 0

    def test_reddit_log_order_and_age_term(self):
        assert strategies.reddit_score(_user(points=100, createdAt=NOW), CTX) == pytest.approx(2.0)
        assert strategies.reddit_score(_user(points=100, createdAt=NOW - HOUR), CTX) == pytest.approx(2.08)

    def test_reddit_non_positive_points(self):
        assert strategies.reddit_score(_user(points=0, createdAt=NOW), CTX) == pytest.approx(0.0)
        assert strategies.reddit_score(_user(points=-10, createdAt=NOW), CTX) == pytest.approx(-1.0)

    def test_velocity_clamps_age_to_one_hour(self):
        user = _user(points=4, submissions=1, createdAt=NOW)
        assert strategies.velocity_score(user, CTX) == pytest.approx(8.0)

    def test_velocity_rates(self):
        user = _user(points=10, submissions=5, createdAt=NOW - 5 * HOUR)
        assert strategies.velocity_score(user, CTX) == pytest.approx(2.0 * 2.0)

    def test_efficient_points_per_day(self):
        assert strategies.efficient_score(_user(points=30, createdAt=NOW - 3 * DAY), CTX) == pytest.approx(10.0)
        assert strategies.efficient_score(_user(points=30, createdAt=NOW - 12 * HOUR), CTX) == pytest.approx(30.0)

    def test_simple_points_per_hour(self):
        assert strategies.simple_score(_user(points=10, createdAt=NOW - 5 * HOUR), CTX) == pytest.approx(2.0)

    def test_new_is_negated_creation_time(self):
        assert strategies.newest_score(_user(createdAt=NOW - HOUR), CTX) == -(NOW - HOUR)

    def test_recent_falls_back_to_created_at(self):
        assert strategies.recent_score(_user(createdAt=NOW - HOUR), CTX) == NOW - HOUR
        assert strategies.recent_score(_user(createdAt=NOW - HOUR, lastActive=NOW), CTX) == NOW

    def test_counters(self):
        user = _user(points=7, submissions=3)
        assert strategies.top_score(user, CTX) == 7
        assert strategies.active_score(user, CTX) == 3

    def test_missing_created_at_has_zero_age(self):
        user = _user(points=4)
        assert strategies.hackernews_score(user, CTX) == pytest.approx(4 / 2 ** 1.8)

    def test_future_created_at_is_clamped(self):
        user = _user(points=4, createdAt=NOW + HOUR)
        assert math.isfinite(strategies.hackernews_score(user, CTX))
        assert strategies.velocity_score(user, CTX) == pytest.approx(4.0)


class TestScoringRegistry:
    def test_register_and_score(self):
        registry = ScoringRegistry()
        registry.register("double", lambda r, c: r.points * 2.0, requires_created_at=False)
        assert registry.score("double", _user(points=4), CTX) == 8.0
        assert not registry.get("double").requires_created_at

    def test_unknown_algorithm_lists_available(self):
        registry = ScoringRegistry()
        registry.register("a", lambda r, c: 0.0)
        registry.register("b", lambda r, c: 0.0)
        with pytest.raises(InvalidAlgorithm) as exc:
            registry.get("nope")
        assert exc.value.available == ["a", "b"]
        assert exc.value.status_code == 400
        assert "nope" in exc.value.message

    def test_empty_name_is_invalid(self):
        with pytest.raises(InvalidAlgorithm):
            ScoringRegistry().get(None)

    def test_frozen_registry_rejects_registration(self):
        registry = ScoringRegistry().freeze()
        with pytest.raises(RuntimeError):
            registry.register("late", lambda r, c: 0.0)

    def test_default_registry_builtins(self):
        registry = get_default_registry()
        assert registry.frozen
        assert registry.available()[0] == "hackernews"
        for name in ("hackernews", "trending", "reddit", "velocity", "new", "top", "active", "efficient", "recent", "simple"):
            assert name in registry
        assert registry.get("top").description == "Highest total points"

    def test_only_counters_work_without_created_at(self):
        registry = get_default_registry()
        without = {name for name in registry.available() if not registry.get(name).requires_created_at}
        assert without == {"top", "active"}

    def test_default_registry_is_shared(self):
        assert get_default_registry() is get_default_registry()

    def test_descriptions_follow_registration_order(self):
        registry = ScoringRegistry()
        registry.register("b", lambda r, c: 0.0, description="second letter")
        registry.register("a", lambda r, c: 0.0)
        descriptions = registry.descriptions()
        assert list(descriptions) == ["b", "a"]
        assert descriptions["b"] == "second letter"
