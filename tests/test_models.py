"""Tests for data models."""

from peal_mentors.mentors.models import (
    MatchResult,
    MatchingCriteria,
    MentorCandidate,
    MentorUser,
    parse_bool,
    parse_number,
)


def make_candidate(**kwargs) -> MentorCandidate:
    defaults = dict(
        id="mentor-1",
        user_id="user-1",
        user=MentorUser(id="user-1", name="Ana Reyes", avatar_url="https://example.com/a.png", location="Austin, TX"),
        bio="Leadership coach",
        years_experience=5,
        skills=["Leadership", "Teaching"],
    )
    defaults.update(kwargs)
    return MentorCandidate(**defaults)


class TestMatchingCriteria:
    def test_from_dict(self):
        criteria = MatchingCriteria.from_dict({
            "skills": ["finance"],
            "interests": ["education"],
            "location": "Austin",
            "minExperience": 3,
            "availability": "busy",
            "acceptsRemote": True,
        })
        assert criteria.skills == ["finance"]
        assert criteria.interests == ["education"]
        assert criteria.location == "Austin"
        assert criteria.min_experience == 3
        assert criteria.availability == "busy"
        assert criteria.accepts_remote is True

    def test_missing_fields_are_unset(self):
        criteria = MatchingCriteria.from_dict({})
        assert criteria == MatchingCriteria()

    def test_malformed_values_degrade(self):
        criteria = MatchingCriteria.from_dict({
            "skills": "finance",
            "minExperience": "lots",
            "availability": "sometimes",
            "acceptsRemote": "maybe",
            "location": 42,
        })
        assert criteria == MatchingCriteria()

    def test_non_finite_min_experience_is_unset(self):
        assert MatchingCriteria.from_dict({"minExperience": float("nan")}).min_experience is None
        assert MatchingCriteria.from_dict({"minExperience": "inf"}).min_experience is None

    def test_non_dict(self):
        assert MatchingCriteria.from_dict(None) == MatchingCriteria()
        assert MatchingCriteria.from_dict(["skills"]) == MatchingCriteria()

    def test_non_string_list_items_dropped(self):
        criteria = MatchingCriteria.from_dict({"skills": ["finance", 3, None]})
        assert criteria.skills == ["finance"]


class TestMentorCandidate:
    def test_at_capacity(self):
        assert make_candidate(max_mentees=2, current_mentees_count=2).at_capacity
        assert not make_candidate(max_mentees=2, current_mentees_count=1).at_capacity


class TestMatchResult:
    def test_to_dict(self):
        result = MatchResult(
            candidate=make_candidate(),
            score=53,
            matched_skills=["leadership"],
            location_match=True,
        )
        d = result.to_dict()
        assert d["mentorId"] == "mentor-1"
        assert d["score"] == 53
        assert d["matchedSkills"] == ["leadership"]
        assert d["matchedInterests"] == []
        assert d["locationMatch"] is True
        assert d["availability"] == "available"
        assert d["yearsExperience"] == 5
        assert d["profile"]["skills"] == ["Leadership", "Teaching"]
        assert d["profile"]["user"]["avatarUrl"] == "https://example.com/a.png"
        assert d["profile"]["user"]["name"] == "Ana Reyes"


class TestParsers:
    def test_parse_bool(self):
        assert parse_bool(True) is True
        assert parse_bool("false") is False
        assert parse_bool(" TRUE ") is True
        assert parse_bool("yes") is None
        assert parse_bool(None) is None

    def test_parse_number(self):
        assert parse_number("4") == 4.0
        assert parse_number(2) == 2.0
        assert parse_number(True) is None
        assert parse_number("x") is None
        assert parse_number(float("nan")) is None
        assert parse_number(float("inf")) is None
        assert parse_number("-inf") is None
