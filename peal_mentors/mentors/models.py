"""Mentor matching data models."""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

AVAILABLE = "available"
BUSY = "busy"
UNAVAILABLE = "unavailable"
AVAILABILITY_STATES = (AVAILABLE, BUSY, UNAVAILABLE)


@dataclass(frozen=True)
class RequesterProfile:
    """Snapshot of the user a mentor search is performed for."""

    id: str
    skills: tuple[str, ...] = ()
    interests: tuple[str, ...] = ()
    location: Optional[str] = None


@dataclass
class MatchingCriteria:
    """Explicit overrides for a match request.

    None means "not set": skills, interests and location then fall back to the
    requester's profile, the remaining fields are left unconstrained.
    """

    skills: Optional[list[str]] = None
    interests: Optional[list[str]] = None
    location: Optional[str] = None
    min_experience: Optional[float] = None
    availability: Optional[str] = None  # available, busy, unavailable
    accepts_remote: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "MatchingCriteria":
        """Build criteria from a camelCase request body. Bad values become None."""
        if not isinstance(data, dict):
            return cls()

        availability = data.get("availability")
        return cls(
            skills=_parse_str_list(data.get("skills")),
            interests=_parse_str_list(data.get("interests")),
            location=data.get("location") if isinstance(data.get("location"), str) else None,
            min_experience=parse_number(data.get("minExperience")),
            availability=availability if availability in AVAILABILITY_STATES else None,
            accepts_remote=parse_bool(data.get("acceptsRemote")),
        )


@dataclass
class SearchFilters:
    """Exact-match narrowing for the unscored mentor search."""

    availability: Optional[str] = None
    accepts_remote: Optional[bool] = None


@dataclass
class MentorUser:
    """Public fields of the user who owns a mentor profile."""

    id: str
    name: str = ""
    avatar_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "avatarUrl": self.avatar_url,
            "location": self.location,
            "bio": self.bio,
        }


@dataclass
class MentorCandidate:
    """A mentor profile in the pool being ranked."""

    id: str
    user_id: str
    user: MentorUser
    bio: Optional[str] = None
    availability: str = AVAILABLE
    years_experience: Optional[float] = None
    max_mentees: int = 5
    current_mentees_count: int = 0
    accepts_remote: bool = True
    skills: list[str] = field(default_factory=list)

    @property
    def at_capacity(self) -> bool:
        return self.current_mentees_count >= self.max_mentees

    def to_profile_dict(self) -> dict:
        """Display payload echoed back with every match."""
        return {
            "id": self.id,
            "bio": self.bio,
            "availability": self.availability,
            "yearsExperience": self.years_experience,
            "skills": list(self.skills),
            "user": self.user.to_dict(),
        }


@dataclass
class MatchResult:
    """One ranked mentor plus the sub-scores that explain its rank."""

    candidate: MentorCandidate
    score: float = 0
    matched_skills: list[str] = field(default_factory=list)
    matched_interests: list[str] = field(default_factory=list)
    location_match: bool = False

    @property
    def mentor_id(self) -> str:
        return self.candidate.id

    @property
    def availability(self) -> str:
        return self.candidate.availability

    @property
    def years_experience(self) -> Optional[float]:
        return self.candidate.years_experience

    def to_dict(self) -> dict:
        """Convert to the JSON shape returned by the API."""
        return {
            "mentorId": self.mentor_id,
            "score": self.score,
            "matchedSkills": list(self.matched_skills),
            "matchedInterests": list(self.matched_interests),
            "locationMatch": self.location_match,
            "availability": self.availability,
            "yearsExperience": self.years_experience,
            "profile": self.candidate.to_profile_dict(),
        }


def parse_bool(value: Any) -> Optional[bool]:
    """Accept real booleans and "true"/"false" strings; anything else is None."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None


def parse_number(value: Any) -> Optional[float]:
    """Finite float or None; NaN and infinities are treated as unparseable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_str_list(value: Any) -> Optional[list[str]]:
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]
