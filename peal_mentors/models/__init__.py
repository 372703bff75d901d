"""ORM models for users and mentor profiles."""

from .base import Base, init_db, make_session_factory
from .mentor_profile import MentorProfile
from .user import User

__all__ = [
    "Base",
    "init_db",
    "make_session_factory",
    "User",
    "MentorProfile",
]
