"""Profile store and candidate source backed by the ORM."""

import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from peal_mentors.mentors.models import AVAILABLE, MentorCandidate, RequesterProfile
from peal_mentors.models import MentorProfile, User

logger = logging.getLogger("peal_mentors.storage")


class MentorRepository:
    """Reads requester profiles and mentor candidates from a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def resolve_profile(self, user_id: str) -> Optional[RequesterProfile]:
        """Return the requester snapshot for `user_id`, or None if unknown."""
        user = self.db.get(User, user_id)
        if user is None:
            return None
        return user.to_requester_profile()

    def list_candidates(
        self,
        availability: Optional[str] = None,
        accepts_remote: Optional[bool] = None,
    ) -> list[MentorCandidate]:
        """All mentor profiles, newest first, optionally pre-filtered."""
        query = self.db.query(MentorProfile).options(joinedload(MentorProfile.user))

        if availability is not None:
            query = query.filter(MentorProfile.availability == availability)
        if accepts_remote is not None:
            query = query.filter(MentorProfile.accepts_remote == accepts_remote)

        profiles = query.order_by(MentorProfile.created_at.desc(), MentorProfile.id).all()
        logger.debug("Loaded %d mentor candidates", len(profiles))
        return [p.to_candidate() for p in profiles]

    def get_stats(self) -> dict:
        """Counts for the CLI --stats report."""
        stats = {}

        stats["total_users"] = self.db.query(func.count(User.id)).scalar() or 0
        stats["total_mentors"] = self.db.query(func.count(MentorProfile.id)).scalar() or 0
        stats["available_mentors"] = self.db.query(func.count(MentorProfile.id)).filter(
            MentorProfile.availability == AVAILABLE,
            MentorProfile.current_mentees_count < MentorProfile.max_mentees,
        ).scalar() or 0

        rows = self.db.query(
            MentorProfile.availability, func.count(MentorProfile.id)
        ).group_by(MentorProfile.availability).all()
        stats["by_availability"] = {availability: count for availability, count in rows}

        return stats
