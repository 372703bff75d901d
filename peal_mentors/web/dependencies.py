"""Shared FastAPI dependencies: DB session and matcher."""

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from peal_mentors.matching.matcher import MentorMatcher
from peal_mentors.storage.repository import MentorRepository


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_matcher(request: Request, db: Session = Depends(get_db)) -> MentorMatcher:
    """Matcher bound to the request's session and the app's matching config."""
    return MentorMatcher(MentorRepository(db), request.app.state.config.matching)
