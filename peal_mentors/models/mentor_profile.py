"""Mentor profile model: the candidate side of a match."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from peal_mentors.mentors.models import MentorCandidate

from .base import Base


class MentorProfile(Base):
    __tablename__ = "mentor_profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), unique=True, nullable=False)

    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    availability: Mapped[str] = mapped_column(String(20), default="available", index=True)  # available, busy, unavailable
    years_experience: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_mentees: Mapped[int] = mapped_column(Integer, default=5)
    current_mentees_count: Mapped[int] = mapped_column(Integer, default=0)
    accepts_remote: Mapped[bool] = mapped_column(Boolean, default=True)
    skills: Mapped[list] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship(back_populates="mentor_profile")

    def to_candidate(self) -> MentorCandidate:
        """Convert DB row to the MentorCandidate the engine ranks."""
        return MentorCandidate(
            id=self.id,
            user_id=self.user_id,
            user=self.user.to_mentor_user(),
            bio=self.bio,
            availability=self.availability,
            years_experience=self.years_experience,
            max_mentees=self.max_mentees if self.max_mentees is not None else 5,
            current_mentees_count=self.current_mentees_count or 0,
            accepts_remote=bool(self.accepts_remote),
            skills=list(self.skills or []),
        )
