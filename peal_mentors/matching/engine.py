"""Weighted mentor ranking.

Candidates are first passed through the eligibility filter (self, availability,
capacity, minimum experience, then any explicit availability / remote criteria).
Survivors get an additive score:

    skill matches x 10 + interest matches x 5 + 8 for a location match
    + min(years x 3, 30) + 15 if available + 5 if remote

Skill and interest matching uses bidirectional substring containment on
lower-cased terms, so "market" matches "marketing strategy". Requester
interests are matched against the mentor's skill tags.

Everything here is pure: no I/O, no state between calls.
"""

import logging
from typing import Optional

from peal_mentors.config import ScoringWeights
from peal_mentors.mentors.models import (
    AVAILABLE,
    UNAVAILABLE,
    MatchResult,
    MatchingCriteria,
    MentorCandidate,
    RequesterProfile,
    SearchFilters,
)
from peal_mentors.utils.text_processing import (
    contains_either,
    matching_terms,
    normalize_term,
    normalize_terms,
    text_contains,
)

logger = logging.getLogger("peal_mentors.matching.engine")

DEFAULT_LIMIT = 10
RECOMMENDATION_LIMIT = 5


class ProfileNotFoundError(LookupError):
    """The requester could not be resolved to a profile."""

    def __init__(self, user_id: Optional[str] = None):
        self.user_id = user_id
        super().__init__("User not found" if user_id is None else f"User not found: {user_id}")


def _years(candidate: MentorCandidate) -> Optional[float]:
    """Numeric experience or None; non-numeric values count as absent."""
    years = candidate.years_experience
    if isinstance(years, bool) or not isinstance(years, (int, float)):
        return None
    return years


def is_eligible(
    candidate: MentorCandidate,
    requester_id: str,
    criteria: MatchingCriteria,
) -> bool:
    """Hard pass/fail rules applied before scoring."""
    if candidate.user_id == requester_id:
        return False
    if candidate.availability == UNAVAILABLE:
        return False
    if candidate.at_capacity:
        return False
    if criteria.min_experience:
        years = _years(candidate)
        if years is None or years < criteria.min_experience:
            return False
    if criteria.availability is not None and candidate.availability != criteria.availability:
        return False
    if criteria.accepts_remote is not None and candidate.accepts_remote != criteria.accepts_remote:
        return False
    return True


def score_candidate(
    candidate: MentorCandidate,
    skills: list[str],
    interests: list[str],
    location: str,
    weights: ScoringWeights,
) -> MatchResult:
    """Score one eligible candidate against normalized requester terms."""
    mentor_skills = normalize_terms(candidate.skills)
    mentor_location = normalize_term(candidate.user.location)

    matched_skills = matching_terms(skills, mentor_skills)
    matched_interests = matching_terms(interests, mentor_skills)
    location_match = contains_either(location, mentor_location)

    score = 0
    score += len(matched_skills) * weights.skill
    score += len(matched_interests) * weights.interest

    if location_match:
        score += weights.location

    years = _years(candidate)
    if years and years > 0:
        score += min(years * weights.experience, weights.experience_cap)

    if candidate.availability == AVAILABLE:
        score += weights.availability

    if candidate.accepts_remote:
        score += weights.remote

    return MatchResult(
        candidate=candidate,
        score=score,
        matched_skills=matched_skills,
        matched_interests=matched_interests,
        location_match=location_match,
    )


def find_matches(
    requester: Optional[RequesterProfile],
    candidates: list[MentorCandidate],
    criteria: Optional[MatchingCriteria] = None,
    limit: int = DEFAULT_LIMIT,
    weights: Optional[ScoringWeights] = None,
) -> list[MatchResult]:
    """Rank candidates for a requester, best first, at most `limit` entries."""
    if requester is None:
        raise ProfileNotFoundError()

    criteria = criteria or MatchingCriteria()
    weights = weights or ScoringWeights()

    # Explicit lists override the profile even when empty; blank location falls back
    skills = normalize_terms(criteria.skills if criteria.skills is not None else requester.skills)
    interests = normalize_terms(
        criteria.interests if criteria.interests is not None else requester.interests
    )
    location = normalize_term(criteria.location or requester.location)

    matches = [
        score_candidate(candidate, skills, interests, location, weights)
        for candidate in candidates
        if is_eligible(candidate, requester.id, criteria)
    ]

    # list.sort is stable: ties keep pool order
    matches.sort(key=lambda m: m.score, reverse=True)

    logger.debug(
        "Ranked %d eligible of %d candidates for %s",
        len(matches), len(candidates), requester.id,
    )

    return matches[: max(limit, 0)]


def get_recommendations(
    requester: Optional[RequesterProfile],
    candidates: list[MentorCandidate],
    weights: Optional[ScoringWeights] = None,
) -> list[MatchResult]:
    """Profile-derived matches only, capped at five."""
    return find_matches(requester, candidates, None, RECOMMENDATION_LIMIT, weights)


def search_candidates(
    query: str,
    candidates: list[MentorCandidate],
    filters: Optional[SearchFilters] = None,
) -> list[MatchResult]:
    """Unscored listing of candidates whose bio, name or skills contain `query`.

    Eligibility rules do not apply here; only the explicit filters narrow the list.
    """
    query = query or ""
    filters = filters or SearchFilters()
    results = []

    for candidate in candidates:
        if filters.availability is not None and candidate.availability != filters.availability:
            continue
        if filters.accepts_remote is not None and candidate.accepts_remote != filters.accepts_remote:
            continue
        if (
            text_contains(candidate.bio, query)
            or text_contains(candidate.user.name, query)
            or any(text_contains(skill, query) for skill in candidate.skills)
        ):
            results.append(MatchResult(candidate=candidate))

    return results
