"""User account model: the requester side of a match."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from peal_mentors.mentors.models import MentorUser, RequesterProfile

from .base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), default="")
    avatar_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[list] = mapped_column(JSON, default=list)
    interests: Mapped[list] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    mentor_profile: Mapped["MentorProfile"] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )

    def to_requester_profile(self) -> RequesterProfile:
        return RequesterProfile(
            id=self.id,
            skills=tuple(self.skills or []),
            interests=tuple(self.interests or []),
            location=self.location,
        )

    def to_mentor_user(self) -> MentorUser:
        """Public fields shown alongside a mentor profile."""
        return MentorUser(
            id=self.id,
            name=self.name or "",
            avatar_url=self.avatar_url,
            location=self.location,
            bio=self.bio,
        )
