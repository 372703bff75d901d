"""Tests for the matcher facade."""

import pytest

from peal_mentors.config import MatchingConfig
from peal_mentors.matching.engine import ProfileNotFoundError
from peal_mentors.matching.matcher import MentorMatcher
from peal_mentors.mentors.models import (
    MatchingCriteria,
    MentorCandidate,
    MentorUser,
    RequesterProfile,
    SearchFilters,
)


class FakeRepository:
    """In-memory stand-in that records the pre-filters it was asked for."""

    def __init__(self, profiles, candidates):
        self.profiles = {p.id: p for p in profiles}
        self.candidates = candidates
        self.list_calls = []

    def resolve_profile(self, user_id):
        return self.profiles.get(user_id)

    def list_candidates(self, availability=None, accepts_remote=None):
        self.list_calls.append((availability, accepts_remote))
        return [
            c for c in self.candidates
            if (availability is None or c.availability == availability)
            and (accepts_remote is None or c.accepts_remote == accepts_remote)
        ]


def make_candidate(id, **kwargs) -> MentorCandidate:
    defaults = dict(
        id=id,
        user_id=f"user-{id}",
        user=MentorUser(id=f"user-{id}", name=f"Mentor {id}", location="Austin, TX"),
        skills=["Leadership"],
        years_experience=5,
    )
    defaults.update(kwargs)
    return MentorCandidate(**defaults)


@pytest.fixture
def repository():
    requester = RequesterProfile(id="mentee", skills=("leadership",), location="Austin")
    candidates = [make_candidate(f"m{i}") for i in range(12)]
    candidates.append(make_candidate("busy", availability="busy", bio="Marketing"))
    return FakeRepository([requester], candidates)


class TestMentorMatcher:
    def test_unknown_user_raises(self, repository):
        matcher = MentorMatcher(repository)
        with pytest.raises(ProfileNotFoundError) as exc_info:
            matcher.find_matches("ghost")
        assert exc_info.value.user_id == "ghost"

    def test_default_limit_from_config(self, repository):
        matcher = MentorMatcher(repository, MatchingConfig(default_limit=4))
        assert len(matcher.find_matches("mentee")) == 4

    def test_explicit_limit(self, repository):
        matcher = MentorMatcher(repository)
        assert len(matcher.find_matches("mentee", limit=2)) == 2

    def test_criteria_prefilter_passed_to_repository(self, repository):
        matcher = MentorMatcher(repository)
        matches = matcher.find_matches("mentee", MatchingCriteria(availability="busy", accepts_remote=True))

        assert repository.list_calls == [("busy", True)]
        assert [m.mentor_id for m in matches] == ["busy"]

    def test_recommendations_use_recommendation_limit(self, repository):
        matcher = MentorMatcher(repository)
        assert len(matcher.get_recommendations("mentee")) == 5
        assert repository.list_calls == [(None, None)]

    def test_recommendations_unknown_user(self, repository):
        with pytest.raises(ProfileNotFoundError):
            MentorMatcher(repository).get_recommendations("ghost")

    def test_search(self, repository):
        matcher = MentorMatcher(repository)
        results = matcher.search_candidates("market", SearchFilters(availability="busy"))

        assert [r.mentor_id for r in results] == ["busy"]
        assert repository.list_calls == [("busy", None)]
