"""Matcher facade: resolves requester and pool, then ranks with the engine."""

import logging
from typing import Optional

from peal_mentors.config import MatchingConfig
from peal_mentors.matching.engine import ProfileNotFoundError, find_matches, search_candidates
from peal_mentors.mentors.models import MatchResult, MatchingCriteria, SearchFilters

logger = logging.getLogger("peal_mentors.matching")


class MentorMatcher:
    """Ties a profile/candidate repository to the ranking engine.

    The repository needs two methods:
      resolve_profile(user_id) -> RequesterProfile | None
      list_candidates(availability=None, accepts_remote=None) -> list[MentorCandidate]
    """

    def __init__(self, repository, config: Optional[MatchingConfig] = None):
        self.repository = repository
        self.config = config or MatchingConfig()

    def _resolve(self, requester_id: str):
        profile = self.repository.resolve_profile(requester_id)
        if profile is None:
            logger.warning("Match requested for unknown user %s", requester_id)
            raise ProfileNotFoundError(requester_id)
        return profile

    def find_matches(
        self,
        requester_id: str,
        criteria: Optional[MatchingCriteria] = None,
        limit: Optional[int] = None,
    ) -> list[MatchResult]:
        """Rank mentors for a user, optionally overriding profile fields with criteria."""
        profile = self._resolve(requester_id)
        criteria = criteria or MatchingCriteria()
        limit = self.config.default_limit if limit is None else limit

        # Narrow the pool at the source; the engine re-checks both constraints
        candidates = self.repository.list_candidates(
            availability=criteria.availability,
            accepts_remote=criteria.accepts_remote,
        )

        matches = find_matches(profile, candidates, criteria, limit, self.config.weights)
        logger.info(
            "Matched %d/%d mentors for user %s",
            len(matches), len(candidates), requester_id,
        )
        return matches

    def get_recommendations(self, requester_id: str) -> list[MatchResult]:
        """Profile-derived matches at the configured recommendation limit."""
        return self.find_matches(requester_id, None, self.config.recommendation_limit)

    def search_candidates(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
    ) -> list[MatchResult]:
        filters = filters or SearchFilters()
        candidates = self.repository.list_candidates(
            availability=filters.availability,
            accepts_remote=filters.accepts_remote,
        )
        results = search_candidates(query, candidates, filters)
        logger.info("Search %r returned %d/%d mentors", query, len(results), len(candidates))
        return results
