"""Tests for the search matcher."""

import pytest

from ranking import SearchQuery, ValidationError, search

from .conftest import DAY, HOUR, NOW


def _names(result):
    return [record.username for record in result.matches]


@pytest.fixture
def users():
    return {
        "1": {"username": "malice", "lastActive": NOW, "createdAt": NOW - DAY},
        "2": {"username": "alice_2", "lastActive": NOW - HOUR, "createdAt": NOW - DAY},
        "3": {"username": "alice", "createdAt": NOW - 10 * DAY},
        "4": {"username": "alicorn", "createdAt": NOW - 2 * DAY, "isActive": False},
        "5": {"username": "bob", "email": "bob@example.com", "createdAt": NOW - DAY},
        "6": {"createdAt": NOW},
    }


class TestSearch:
    def test_relevance_tiers(self, users):
        result = search(users, SearchQuery(query="alice"))
        assert _names(result) == ["alice", "alice_2", "malice"]
        assert result.total_matches == 3

    def test_case_insensitive(self, users):
        result = search(users, SearchQuery(query="ALI"))
        assert "alice" in _names(result)

    def test_inactive_users_excluded(self, users):
        assert "alicorn" not in _names(search(users, SearchQuery(query="alic")))

    def test_recent_activity_first_within_tier(self):
        users = [
            {"id": "old", "username": "sam_old", "lastActive": NOW - DAY},
            {"id": "new", "username": "sam_new", "lastActive": NOW},
        ]
        result = search(users, SearchQuery(query="sam"))
        assert [r.id for r in result.matches] == ["new", "old"]

    def test_limit_keeps_total(self, users):
        result = search(users, SearchQuery(query="ali", limit=1))
        assert result.count == 1
        assert result.total_matches == 3

    def test_other_field(self, users):
        result = search(users, SearchQuery(query="example.com", field="email"))
        assert _names(result) == ["bob"]

    def test_no_match(self, users):
        result = search(users, SearchQuery(query="zz"))
        assert result.matches == []
        assert result.total_matches == 0

    @pytest.mark.parametrize("query", [None, "", "a", " a "])
    def test_short_query_rejected(self, users, query):
        with pytest.raises(ValidationError) as exc:
            search(users, SearchQuery(query=query))
        assert exc.value.status_code == 400
        assert "at least 2 characters" in exc.value.message

    def test_fractional_counters_still_match(self):
        users = {"a": {"username": "alice", "points": 12.5, "submissions": "2"}}
        result = search(users, SearchQuery(query="alice"))
        assert [r.id for r in result.matches] == ["a"]
        assert result.matches[0].points == 12
        assert result.matches[0].submissions == 2
